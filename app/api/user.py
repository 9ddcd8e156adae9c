# 用户注册、登录登出、资料查询与修改
from fastapi import APIRouter, Depends, Response, status
from app.core.dependencies import get_user_repository
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserLogin, UserLogout, UserUpdate, UserResponse
from app.services import user_service

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def get_all_users(repo: UserRepository = Depends(get_user_repository)):
    """获取全部用户"""
    return user_service.get_users(repo)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(req: UserCreate, repo: UserRepository = Depends(get_user_repository)):
    """注册，用户名重复返回 409"""
    return user_service.create_user(repo, req)


@router.post("/login", response_model=UserResponse)
def login(req: UserLogin, repo: UserRepository = Depends(get_user_repository)):
    """用户名或密码错误返回 403"""
    return user_service.check_credentials(repo, req)


@router.post("/logout")
def logout(req: UserLogout, repo: UserRepository = Depends(get_user_repository)):
    user_service.log_out(repo, req)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, repo: UserRepository = Depends(get_user_repository)):
    return user_service.get_user(repo, user_id)


@router.put("/{user_id}", status_code=204)
def update_user(
    user_id: int,
    payload: UserUpdate,
    repo: UserRepository = Depends(get_user_repository)
):
    """
    修改资料

    Body:
        - name: 姓名（可选）
        - username: 新用户名（可选，不能和别人重复）
        - birthday: 生日（可选）
    """
    user_service.update_user(repo, user_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
