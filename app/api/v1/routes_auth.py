# File: app/api/v1/routes_auth.py

"""
Auth API routes: signup and login. Both return a bearer token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.auth import AuthCredentials, Token
from app.services import auth_service

router = APIRouter()


@router.post(
    "/signup",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
def signup(payload: AuthCredentials, db: Session = Depends(get_db)):
    token = auth_service.signup(db, email=payload.email, password=payload.password)
    return Token(access_token=token)


@router.post(
    "/login",
    response_model=Token,
    status_code=status.HTTP_200_OK,
    summary="Exchange credentials for an access token",
)
def login(payload: AuthCredentials, db: Session = Depends(get_db)):
    token = auth_service.login(db, email=payload.email, password=payload.password)
    return Token(access_token=token)
