"""
Pytest configuration and shared fixtures for the user service tests
"""
import os
import tempfile

import pytest

# 导入 app 之前先把数据库指到临时 sqlite 文件
_db_fd, _db_path = tempfile.mkstemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"
os.environ["SKIP_DB_INIT"] = "1"


@pytest.fixture(scope="session", autouse=True)
def _schema():
    """Create tables once for the whole run"""
    from app.db.database import Base, engine
    from app.db.init_db import init

    init()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    os.close(_db_fd)
    os.unlink(_db_path)


@pytest.fixture(autouse=True)
def _clean_db():
    """Empty tables between tests so usernames can be reused"""
    yield
    from app.db.database import Base, SessionLocal

    db = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    finally:
        db.close()


@pytest.fixture
def db_session():
    from app.db.database import SessionLocal

    db = SessionLocal()
    yield db
    db.rollback()
    db.close()


@pytest.fixture
def repo(db_session):
    from app.repositories.user_repository import UserRepository

    return UserRepository(db_session)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def ann(repo):
    """A registered user: ann / p1"""
    from app.schemas.user import UserCreate
    from app.services import user_service

    return user_service.create_user(repo, UserCreate(name="Ann", username="ann", password="p1"))
