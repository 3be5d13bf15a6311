# app/routers/user.py
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.storage import KeyValueStore
from app.crud import user_info as crud_user_info
from app.dependencies import get_store
from app.schemas.user_info import UserInfo, UserInfoUpdate

router = APIRouter()


@router.get("/user-info", response_model=Optional[UserInfo])
def read_user_info(store: KeyValueStore = Depends(get_store)):
    """Данные текущего пользователя или null, если email еще не сохранялся."""
    return crud_user_info.read_user_info(store)


@router.put("/user-info", response_model=UserInfo)
def update_user_info(user_data: UserInfoUpdate, store: KeyValueStore = Depends(get_store)):
    email = str(user_data.email)
    if not crud_user_info.save_user_info(store, email):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось сохранить данные пользователя.",
        )
    return UserInfo(email=email)
