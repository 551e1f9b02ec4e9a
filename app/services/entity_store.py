"""
Entity Store - create/read access to the six collections

One Repository per entity kind. Repositories hold no session; every call
takes the request's SQLAlchemy session so they can be shared process-wide.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar
import logging

from app.exceptions import PersistenceError
from app.models.movie import Movie
from app.models.person import Actor, Director, Producer
from app.models.review import Review
from app.models.user import User

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Create and find operations for a single entity kind"""

    def __init__(self, model: Type[ModelT]):
        self.model = model
        self.kind = model.__name__

    def create(self, db: Session, **fields) -> ModelT:
        """Persist a new entity; the primary key is generated by the model."""
        entity = self.model(**fields)
        try:
            db.add(entity)
            db.commit()
            db.refresh(entity)
        except SQLAlchemyError as e:
            db.rollback()
            raise PersistenceError(f"create {self.kind}", e) from e

        logger.debug(f"Created {self.kind} {entity.id}")
        return entity

    def find_by_id(self, db: Session, entity_id: str) -> Optional[ModelT]:
        """The entity, or None when no row has this id"""
        try:
            return db.get(self.model, entity_id)
        except SQLAlchemyError as e:
            raise PersistenceError(f"find {self.kind} by id", e) from e

    def find_all(self, db: Session) -> List[ModelT]:
        try:
            return db.query(self.model).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"list {self.kind}", e) from e

    def find_where(self, db: Session, *criteria) -> List[ModelT]:
        """
        Entities matching all SQLAlchemy criteria

        Usage:
            store.reviews.find_where(db, Review.movie_id == movie_id)
        """
        try:
            return db.query(self.model).filter(*criteria).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"query {self.kind}", e) from e

    def find_many(self, db: Session, ids: Iterable[str]) -> Dict[str, ModelT]:
        """Batch lookup keyed by id. Unknown ids are simply absent."""
        wanted = {i for i in ids if i}
        if not wanted:
            return {}
        entities = self.find_where(db, self.model.id.in_(wanted))
        return {entity.id: entity for entity in entities}


class EntityStore:
    """All repositories, constructed once and injected into routes"""

    def __init__(self):
        self.movies: Repository[Movie] = Repository(Movie)
        self.actors: Repository[Actor] = Repository(Actor)
        self.directors: Repository[Director] = Repository(Director)
        self.producers: Repository[Producer] = Repository(Producer)
        self.reviews: Repository[Review] = Repository(Review)
        self.users: Repository[User] = Repository(User)
