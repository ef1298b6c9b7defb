# File: app/api/v1/routes_users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.user import UserRead, UserUpdate
from app.services import user_service

router = APIRouter()


@router.get("/me", response_model=UserRead, summary="Current user")
def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("", response_model=UserRead, summary="Edit current user")
def edit_me(
    payload: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return user_service.edit_user(db, current_user.id, payload)
