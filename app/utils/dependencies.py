from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fastapi import Cookie

from app.services.entity_store import EntityStore
from app.utils.security import authenticate

SESSION_COOKIE = "token"


@dataclass(frozen=True)
class AuthContext:
    """Identity established by the session guard for the current request."""
    user_id: str


# Session guard - runs before any handler that touches the store
def require_session(token: Optional[str] = Cookie(None, alias=SESSION_COOKIE)) -> AuthContext:
    return AuthContext(user_id=authenticate(token))


@lru_cache()
def get_store() -> EntityStore:
    """Repositories are stateless, so one instance serves the whole process."""
    return EntityStore()
