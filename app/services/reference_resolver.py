"""
Reference Resolver - populate reference ids at read time

Takes raw ORM rows (which only hold ids) and builds the resolved response
schemas. Stored rows are never modified. Ids that point at nothing resolve to
null, or are dropped from list fields, instead of failing the request.
"""

from sqlalchemy.orm import Session
from typing import Dict, List, Optional

from app.models.movie import Movie
from app.models.review import Review
from app.schemas.movie import MovieDetail, PersonSummary
from app.schemas.review import ReviewerProjection, ReviewResponse
from app.services.entity_store import EntityStore


def _person(entity) -> Optional[PersonSummary]:
    if entity is None:
        return None
    return PersonSummary(id=entity.id, name=entity.name)


class ReferenceResolver:
    """Read-only join over the entity store"""

    def __init__(self, store: EntityStore):
        self.store = store

    def resolve_movies(self, db: Session, movies: List[Movie]) -> List[MovieDetail]:
        """
        Resolve actors, director and producer for a batch of movies

        One query per referenced kind regardless of how many movies are passed.
        """
        if not movies:
            return []

        actors = self.store.actors.find_many(
            db, (actor_id for movie in movies for actor_id in (movie.actor_ids or []))
        )
        directors = self.store.directors.find_many(db, (m.director_id for m in movies))
        producers = self.store.producers.find_many(db, (m.producer_id for m in movies))

        return [self._expand_movie(movie, actors, directors, producers) for movie in movies]

    def resolve_movie(self, db: Session, movie: Movie) -> MovieDetail:
        return self.resolve_movies(db, [movie])[0]

    def resolve_reviews(self, db: Session, reviews: List[Review]) -> List[ReviewResponse]:
        """Reviews with the author reduced to a username-only projection"""
        users = self.store.users.find_many(db, (review.user_id for review in reviews))

        resolved = []
        for review in reviews:
            user = users.get(review.user_id)
            resolved.append(ReviewResponse(
                user=ReviewerProjection(username=user.username) if user else None,
                rating=review.rating,
                content=review.content,
            ))
        return resolved

    @staticmethod
    def _expand_movie(
        movie: Movie,
        actors: Dict[str, object],
        directors: Dict[str, object],
        producers: Dict[str, object],
    ) -> MovieDetail:
        return MovieDetail(
            id=movie.id,
            title=movie.title,
            runtime=movie.runtime,
            release_date=movie.release_date,
            poster_image=movie.poster_image,
            # Keep billing order, skip ids with no matching actor
            actors=[_person(actors[a]) for a in (movie.actor_ids or []) if a in actors],
            director=_person(directors.get(movie.director_id)),
            producer=_person(producers.get(movie.producer_id)),
        )
