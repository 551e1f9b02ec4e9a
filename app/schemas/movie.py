"""
Movie Schemas - request bodies and the two movie response shapes

MovieResponse carries raw reference ids (what is stored); MovieDetail carries
the resolved actor/director/producer objects. Keys are camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import date
from typing import List, Optional


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (releaseDate, posterImage)"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MovieCreate(CamelModel):
    """Body for POST /api/movies. Every field is optional and only type-coerced."""
    title: Optional[str] = None
    runtime: Optional[int] = Field(None, description="Runtime in minutes")
    actors: Optional[List[str]] = Field(None, description="Actor ids, in billing order")
    director: Optional[str] = Field(None, description="Director id")
    producer: Optional[str] = Field(None, description="Producer id")
    release_date: Optional[date] = None
    poster_image: Optional[str] = None

    def to_fields(self) -> dict:
        """Column values for the Movie model"""
        return {
            "title": self.title,
            "runtime": self.runtime,
            "actor_ids": list(self.actors or []),
            "director_id": self.director,
            "producer_id": self.producer,
            "release_date": self.release_date,
            "poster_image": self.poster_image,
        }


class PersonSummary(CamelModel):
    """Resolved actor, director or producer"""
    id: str
    name: Optional[str] = None


class MovieBase(CamelModel):
    id: str
    title: Optional[str] = None
    runtime: Optional[int] = None
    release_date: Optional[date] = None
    poster_image: Optional[str] = None


class MovieResponse(MovieBase):
    """Movie as stored, references left as ids"""
    actors: List[str] = []
    director: Optional[str] = None
    producer: Optional[str] = None

    @classmethod
    def from_model(cls, movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            runtime=movie.runtime,
            actors=list(movie.actor_ids or []),
            director=movie.director_id,
            producer=movie.producer_id,
            release_date=movie.release_date,
            poster_image=movie.poster_image,
        )


class MovieDetail(MovieBase):
    """Movie with its references populated"""
    actors: List[PersonSummary] = []
    director: Optional[PersonSummary] = None
    producer: Optional[PersonSummary] = None
