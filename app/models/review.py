from sqlalchemy import Column, String, Float, Text, DateTime
from sqlalchemy.sql import func
from app.database import Base, new_id

class Review(Base):
    __tablename__ = "reviews"

    id = Column(String(32), primary_key=True, default=new_id)
    movie_id = Column("movie", String(32), nullable=False, index=True)
    user_id = Column("user", String(32), nullable=False)
    rating = Column(Float)
    content = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Review(id={self.id}, movie_id={self.movie_id}, user_id={self.user_id})>"
