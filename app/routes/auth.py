from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import os

from app.database import get_db
from app.schemas.auth import UserRegister, UserLogin, UserResponse, MessageResponse
from app.services.auth_service import AuthService
from app.services.entity_store import EntityStore
from app.utils.dependencies import get_store, SESSION_COOKIE
from app.utils.security import ACCESS_TOKEN_EXPIRE_MINUTES

# Define router
router = APIRouter(prefix="/api/auth", tags=["Authentication"])

COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() == "true"

# Register a new user
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    """Register a new user. The password is stored as a bcrypt hash."""
    return AuthService.register_user(db, store, user_data)

# Login endpoint
@router.post("/login", response_model=MessageResponse)
def login(
    credentials: UserLogin,
    response: Response,
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    """Login with username and password; the session token is set as a cookie"""
    token = AuthService.login_user(db, store, credentials)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
    )
    return {"message": "Logged in"}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Drop the session cookie. Tokens are stateless, so nothing is revoked server-side."""
    response.delete_cookie(key=SESSION_COOKIE)
    return {"message": "Logged out"}
