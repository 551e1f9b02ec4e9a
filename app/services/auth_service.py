from sqlalchemy.orm import Session
from app.models.user import User
from app.schemas.auth import UserRegister, UserLogin
from app.services.entity_store import EntityStore
from sqlalchemy.exc import IntegrityError
from app.exceptions import ConflictError, PersistenceError, UnauthorizedError
from app.utils.security import (
    hash_password,
    verify_password,
    create_access_token,
    USER_ID_CLAIM,
    ACCESS_TOKEN_EXPIRE_MINUTES,
)
from datetime import timedelta
import logging

logger = logging.getLogger(__name__)

class AuthService:
    @staticmethod
    def register_user(db: Session, store: EntityStore, user_data: UserRegister) -> User:
        # Check existing username
        if store.users.find_where(db, User.username == user_data.username):
            raise ConflictError("Username already registered")

        try:
            new_user = store.users.create(
                db,
                username=user_data.username,
                password_hash=hash_password(user_data.password),
            )
        except PersistenceError as e:
            # Lost a race with a concurrent registration of the same name
            if isinstance(e.cause, IntegrityError):
                raise ConflictError("Username already registered") from e
            raise
        logger.info(f"Registered user {new_user.id}")
        return new_user


    @staticmethod
    def login_user(db: Session, store: EntityStore, credentials: UserLogin) -> str:
        """Check credentials and return a signed session token"""
        matches = store.users.find_where(db, User.username == credentials.username)
        user = matches[0] if matches else None

        if not user:
            logger.warning(f"Login failed: no user named {credentials.username}")
            raise UnauthorizedError("Incorrect username or password")

        if not verify_password(credentials.password, str(user.password_hash)):
            logger.warning(f"Login failed: incorrect password for {credentials.username}")
            raise UnauthorizedError("Incorrect username or password")

        return create_access_token(
            data={USER_ID_CLAIM: user.id},
            expires_delta=timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        )
