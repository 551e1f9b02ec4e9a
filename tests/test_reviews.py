import pytest

from app.models.movie import Movie
from app.models.review import Review
from app.models.user import User
from app.utils.security import hash_password


@pytest.fixture
def movies(db_session):
    inception = Movie(title="Inception", runtime=148, actor_ids=[])
    tenet = Movie(title="Tenet", runtime=150, actor_ids=[])
    db_session.add_all([inception, tenet])
    db_session.commit()
    return inception, tenet


@pytest.fixture
def reviewer(db_session):
    user = User(username="critic", password_hash=hash_password("Secret123!"))
    db_session.add(user)
    db_session.commit()
    return user


def test_reviews_are_filtered_by_movie(auth_client, db_session, movies, reviewer):
    inception, tenet = movies
    db_session.add_all([
        Review(movie_id=inception.id, user_id=reviewer.id, rating=9, content="Dreamy"),
        Review(movie_id=inception.id, user_id=reviewer.id, rating=7, content="Long"),
        Review(movie_id=tenet.id, user_id=reviewer.id, rating=6, content="Confusing"),
    ])
    db_session.commit()

    response = auth_client.get(f"/api/movies/{inception.id}/reviews")

    assert response.status_code == 200
    contents = sorted(r["content"] for r in response.json())
    assert contents == ["Dreamy", "Long"]


def test_review_is_projected_to_user_rating_content(auth_client, db_session, movies, reviewer):
    inception, _ = movies
    db_session.add(Review(movie_id=inception.id, user_id=reviewer.id, rating=8.5, content="Great"))
    db_session.commit()

    reviews = auth_client.get(f"/api/movies/{inception.id}/reviews").json()

    assert reviews == [{"user": {"username": "critic"}, "rating": 8.5, "content": "Great"}]
    assert "password" not in str(reviews)


def test_review_by_missing_user_has_null_user(auth_client, db_session, movies):
    inception, _ = movies
    db_session.add(Review(movie_id=inception.id, user_id="deleted-user", rating=3, content="Meh"))
    db_session.commit()

    reviews = auth_client.get(f"/api/movies/{inception.id}/reviews").json()

    assert reviews == [{"user": None, "rating": 3.0, "content": "Meh"}]


def test_reviews_for_unknown_movie_is_empty_list(auth_client):
    response = auth_client.get("/api/movies/nope/reviews")

    assert response.status_code == 200
    assert response.json() == []
