from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # ---------- 数据库 ----------
    # 设置了 DATABASE_URL 就直接用（测试里用 sqlite），否则拼 MySQL
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "users"

    SKIP_DB_INIT: bool = False

    #跨域
    CORS_ORIGINS: str = "http://localhost:3000"

    # ---------- 服务 ----------
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    @property
    def DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_DATABASE}?charset=utf8mb4"
        )

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return [orig.strip() for orig in self.CORS_ORIGINS.split(",") if orig.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
