# start.py
import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=True,
        workers=1,
        loop="asyncio",
        timeout_keep_alive=30,
        limit_concurrency=200,
        limit_max_requests=5000,
        backlog=2048,
    )


"""
启动命令
python start.py
生产环境多 worker 时记得设置 SKIP_DB_INIT=1，先单独跑一次 python -m app.db.init_db
"""
