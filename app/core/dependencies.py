from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.repositories.user_repository import UserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """每个请求一个 session，包成 repository 交给 service"""
    return UserRepository(db)
