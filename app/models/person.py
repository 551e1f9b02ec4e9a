"""
People credited on a movie.

Actors, directors and producers only carry a name; movies point at them by id.
"""
from sqlalchemy import Column, String
from app.database import Base, new_id


class Actor(Base):
    __tablename__ = "actors"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255))


class Director(Base):
    __tablename__ = "directors"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255))


class Producer(Base):
    __tablename__ = "producers"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255))
