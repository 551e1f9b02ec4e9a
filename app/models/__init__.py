"""
Import all models to ensure they are registered with SQLAlchemy
"""
from app.models.user import User
from app.models.movie import Movie
from app.models.person import Actor, Director, Producer
from app.models.review import Review

__all__ = [
    "User",
    "Movie",
    "Actor",
    "Director",
    "Producer",
    "Review"
]
