import enum

from sqlalchemy import Column, Integer, String, Enum
from app.db.database import Base


class UserStatus(str, enum.Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"


class User(Base):
    __tablename__ = "users"

    id       = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name     = Column(String(64), nullable=True)
    username = Column(String(32), unique=True, index=True, nullable=False)
    password = Column(String(128), nullable=False)   # 明文，按原样比较
    token    = Column(String(64), nullable=False)     # 注册时生成一次，之后不再变
    status   = Column(Enum(UserStatus), nullable=False, default=UserStatus.OFFLINE)
    birthday = Column(String(32), nullable=True)      # 前端传什么存什么

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} status={self.status}>"
