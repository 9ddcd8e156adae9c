# repositories/user_repository.py
from sqlalchemy import select, exists
from sqlalchemy.orm import Session
from app.models.user import User


class UserRepository:
    """users 表的读写，都是按索引精确查找"""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[User]:
        return list(self.db.scalars(select(User).order_by(User.id)).all())

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        return self.db.scalar(select(User).where(User.username == username))

    def find_by_username_and_password(self, username: str, password: str) -> User | None:
        # 密码不放进 SQL 比较，MySQL 默认排序规则忽略大小写和尾部空格
        user = self.find_by_username(username)
        if user is None or user.password != password:
            return None
        return user

    def exists_by_username(self, username: str) -> bool:
        return bool(self.db.scalar(select(exists().where(User.username == username))))

    def save(self, user: User) -> User:
        # 新对象 flush 之后才有 id
        self.db.add(user)
        self.db.flush()
        return user

    def flush(self) -> None:
        """提交事务，数据落库"""
        self.db.commit()
