from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List
import logging

from app.database import get_db
from app.exceptions import NotFoundError
from app.models.review import Review
from app.schemas.movie import MovieCreate, MovieResponse, MovieDetail
from app.schemas.review import ReviewResponse
from app.services.entity_store import EntityStore
from app.services.reference_resolver import ReferenceResolver
from app.utils.dependencies import AuthContext, get_store, require_session

logger = logging.getLogger(__name__)

# Every route below requires a valid session cookie
router = APIRouter(
    prefix="/api/movies",
    tags=["Movies"],
    dependencies=[Depends(require_session)],
)


@router.get("", response_model=List[MovieDetail])
def list_movies(
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    """All movies with actors, director and producer resolved"""
    movies = store.movies.find_all(db)
    return ReferenceResolver(store).resolve_movies(db, movies)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_data: MovieCreate,
    auth: AuthContext = Depends(require_session),
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    """
    Create a movie

    References are stored as given and returned as ids, not resolved.
    Any authenticated user may create movies.
    """
    movie = store.movies.create(db, **movie_data.to_fields())
    logger.info(f"Movie {movie.id} created by user {auth.user_id}")
    return MovieResponse.from_model(movie)


@router.get("/{movie_id}", response_model=MovieDetail)
def get_movie(
    movie_id: str = Path(..., description="Movie id"),
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    movie = store.movies.find_by_id(db, movie_id)
    if movie is None:
        raise NotFoundError("Movie")
    return ReferenceResolver(store).resolve_movie(db, movie)


@router.get("/{movie_id}/reviews", response_model=List[ReviewResponse])
def list_movie_reviews(
    movie_id: str = Path(..., description="Movie id"),
    db: Session = Depends(get_db),
    store: EntityStore = Depends(get_store)
):
    """Reviews of one movie, each as {user: {username}, rating, content}"""
    reviews = store.reviews.find_where(db, Review.movie_id == movie_id)
    return ReferenceResolver(store).resolve_reviews(db, reviews)
