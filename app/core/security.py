import uuid


# -------- 签发 --------
def generate_token() -> str:
    """
    注册时发一个随机 token，之后不再更换
    不带过期时间，也不在服务端校验
    """
    return str(uuid.uuid4())
