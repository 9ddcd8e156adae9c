from pydantic import BaseModel, Field
from app.models.user import UserStatus


#注册
class UserCreate(BaseModel):
    name: str | None = Field(None, max_length=64)
    username: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=1, max_length=128)
    birthday: str | None = Field(None, max_length=32)

#登录
class UserLogin(BaseModel):
    username: str
    password: str

#登出，只认 id
class UserLogout(BaseModel):
    id: int

#修改资料，没传的字段保持不变
class UserUpdate(BaseModel):
    name: str | None = Field(None, max_length=64)
    username: str | None = Field(None, max_length=32)
    birthday: str | None = Field(None, max_length=32)

#返回给前端展示用，不带密码
class UserResponse(BaseModel):
    id: int
    name: str | None = None
    username: str
    token: str
    status: UserStatus
    birthday: str | None = None

    class Config:
        from_attributes = True
