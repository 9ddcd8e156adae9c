# services/user_service.py
import logging

from app.core.exceptions import UserNotFoundError, UsernameConflictError, InvalidCredentialsError
from app.core.security import generate_token
from app.models.user import User, UserStatus
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserLogin, UserLogout, UserUpdate

logger = logging.getLogger(__name__)


# ---- 查询 ----
def get_users(repo: UserRepository) -> list[User]:
    return repo.find_all()


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError()
    return user


# ---- 修改资料 ----
def update_user(repo: UserRepository, user_id: int, patch: UserUpdate) -> None:
    """
    只改 patch 里带了的字段
    username 只要非空就查重，已被占用（包括自己当前的）抛 409，原记录不动
    """
    user = get_user(repo, user_id)

    if patch.username:
        check_if_user_exists(repo, patch.username)
        user.username = patch.username

    if patch.name:
        user.name = patch.name

    if patch.birthday is not None:
        user.birthday = patch.birthday

    repo.save(user)
    repo.flush()


# ---- 注册 ----
def create_user(repo: UserRepository, req: UserCreate) -> User:
    new_user = User(
        name=req.name,
        username=req.username,
        password=req.password,
        birthday=req.birthday,
        token=generate_token(),
        status=UserStatus.OFFLINE,
    )

    check_if_user_exists(repo, new_user.username)
    new_user.status = UserStatus.ONLINE

    new_user = repo.save(new_user)
    repo.flush()

    logger.debug(f"Created user: {new_user!r}")
    return new_user


# ---- 登录 ----
def check_credentials(repo: UserRepository, req: UserLogin) -> User:
    user = repo.find_by_username_and_password(req.username, req.password)
    if user is None:
        logger.warning(f"登录失败: username={req.username}")
        raise InvalidCredentialsError()

    user.status = UserStatus.ONLINE
    user = repo.save(user)
    repo.flush()

    logger.info(f"用户登录: id={user.id}")
    return user


# ---- 登出 ----
def log_out(repo: UserRepository, req: UserLogout) -> None:
    # 找不到就什么都不做，重复登出也不报错
    user = repo.find_by_id(req.id)
    if user is None:
        return

    user.status = UserStatus.OFFLINE
    repo.save(user)
    repo.flush()
    logger.info(f"用户登出: id={user.id}")


def check_if_user_exists(repo: UserRepository, username: str) -> None:
    """用户名已被占用就抛 409，否则什么都不做"""
    if repo.exists_by_username(username):
        logger.warning(f"用户名已存在: {username}")
        raise UsernameConflictError()
