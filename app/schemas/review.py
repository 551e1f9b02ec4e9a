from pydantic import BaseModel
from typing import Optional


class ReviewerProjection(BaseModel):
    """The only user fields a review exposes"""
    username: str


class ReviewResponse(BaseModel):
    """A review as listed under a movie"""
    user: Optional[ReviewerProjection] = None
    rating: Optional[float] = None
    content: Optional[str] = None
