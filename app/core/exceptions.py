from fastapi import HTTPException, status


class UserNotFoundError(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


class UsernameConflictError(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="The username provided is not unique. Therefore, the user could not be created!",
        )


class InvalidCredentialsError(HTTPException):
    # 用户名错和密码错用同一条提示，不暴露是哪个字段错了
    def __init__(self):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail="Wrong username or password!")
