from sqlalchemy import Column, Integer, String, Date, JSON, DateTime
from sqlalchemy.sql import func
from app.database import Base, new_id

class Movie(Base):
    __tablename__ = "movies"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String)
    runtime = Column(Integer)  # Minutes
    # Reference ids only, resolved at read time. No foreign keys: a dangling id reads back as null.
    actor_ids = Column("actors", JSON, default=list)  # Ordered list of actor ids
    director_id = Column("director", String(32), index=True)
    producer_id = Column("producer", String(32), index=True)
    release_date = Column(Date)
    poster_image = Column(String)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Movie(id={self.id}, title={self.title})>"
