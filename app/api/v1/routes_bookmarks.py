# File: app/api/v1/routes_bookmarks.py

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.bookmark import BookmarkCreate, BookmarkRead, BookmarkUpdate
from app.services import bookmark_service

router = APIRouter()


@router.get(
    "",
    response_model=list[BookmarkRead],
    summary="List the current user's bookmarks",
)
def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return bookmark_service.list_bookmarks(db, current_user.id)


@router.post(
    "",
    response_model=BookmarkRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create bookmark",
)
def create_bookmark(
    payload: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return bookmark_service.create_bookmark(db, current_user.id, payload)


@router.get("/{bookmark_id}", response_model=BookmarkRead, summary="Get bookmark")
def get_bookmark(
    bookmark_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return bookmark_service.get_bookmark(db, current_user.id, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkRead, summary="Edit bookmark")
def edit_bookmark(
    bookmark_id: int,
    payload: BookmarkUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return bookmark_service.edit_bookmark(db, current_user.id, bookmark_id, payload)


@router.delete(
    "/{bookmark_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete bookmark",
)
def delete_bookmark(
    bookmark_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
