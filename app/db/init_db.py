# 把模型先引进来，Base 才知道要建哪些表
from app.db.database import Base, engine
from app.models import user  # noqa: F401
import time
import logging

logger = logging.getLogger(__name__)

MAX_RETRIES = 5
RETRY_DELAY = 2  # 秒


def init():
    """
    初始化数据库表
    多个 worker 同时启动时 MySQL 会报并发DDL（1684），这种情况等一会儿重试
    """
    for attempt in range(MAX_RETRIES):
        try:
            Base.metadata.create_all(bind=engine, checkfirst=True)
            logger.info("数据库表已创建/更新完成")
            return
        except Exception as e:
            error_msg = str(e)
            if ("1684" in error_msg or "concurrent DDL" in error_msg) and attempt < MAX_RETRIES - 1:
                wait_time = RETRY_DELAY * (attempt + 1)
                logger.warning(f"检测到并发DDL操作，{wait_time}秒后重试... (尝试 {attempt + 1}/{MAX_RETRIES})")
                time.sleep(wait_time)
                continue
            logger.error(f"数据库初始化失败: {error_msg}")
            raise

if __name__ == "__main__":
    init()
