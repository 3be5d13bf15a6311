# app/schemas/user_info.py
from pydantic import EmailStr

from app.schemas.common import CamelModel


class UserInfo(CamelModel):
    email: str


class UserInfoUpdate(CamelModel):
    email: EmailStr
