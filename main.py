from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.api import user
from app.core.config import settings
from app.db.database import engine
from app.db.init_db import init

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ===== 启动阶段 =====
    # 多 worker 部署时设置 SKIP_DB_INIT，只让一个进程建表
    if not settings.SKIP_DB_INIT:
        try:
            init()
        except Exception as e:
            logger.error(f"数据库初始化失败: {e}")
            # 不阻止应用启动，因为表可能已经被其他worker创建

    yield
    # ===== 关闭阶段 =====
    engine.dispose()

app = FastAPI(
    title="User Service",
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS_LIST,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(user.router, prefix="/users", tags=["User"])

# 根路由
@app.get("/")
def root():
    return {"msg": "用户服务已启动"}


@app.get("/health")
def health_check():
    """健康检查端点，用于监控服务状态"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected",
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e)
        }
