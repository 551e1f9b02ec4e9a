import logging

from app.models.movie import Movie
from app.models.user import User
from app.utils.dependencies import get_store
from app.utils.security import verify_password


def test_register_stores_hashed_password(client, db_session):
    response = client.post("/api/auth/register", json={"username": "newbie", "password": "Hunter2!"})

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "newbie"
    assert set(body) == {"id", "username"}

    db_session.expire_all()
    user = db_session.query(User).filter(User.username == "newbie").one()
    assert user.password_hash != "Hunter2!"
    assert verify_password("Hunter2!", user.password_hash)


def test_register_duplicate_username_conflicts(client, test_user):
    response = client.post("/api/auth/register", json={"username": "moviefan", "password": "x"})

    assert response.status_code == 409
    assert response.json() == {"message": "Username already registered"}


def test_login_sets_session_cookie_that_authenticates(client, db_session, test_user):
    db_session.add(Movie(title="Heat", actor_ids=[]))
    db_session.commit()

    response = client.post("/api/auth/login", json={"username": "moviefan", "password": "Password123!"})

    assert response.status_code == 200
    assert response.json() == {"message": "Logged in"}
    assert "token" in response.cookies

    movies = client.get("/api/movies")
    assert movies.status_code == 200
    assert [m["title"] for m in movies.json()] == ["Heat"]


def test_login_with_wrong_password_fails(client, test_user):
    response = client.post("/api/auth/login", json={"username": "moviefan", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect username or password"}
    assert "token" not in response.cookies


def test_login_with_unknown_user_fails(client):
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "nope"})

    assert response.status_code == 401


def test_logout_clears_cookie(client, test_user):
    client.post("/api/auth/login", json={"username": "moviefan", "password": "Password123!"})

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert client.get("/api/movies").status_code == 401


def test_register_race_on_username_conflicts(client, test_user, monkeypatch):
    # Another request inserted the name between the lookup and the insert
    monkeypatch.setattr(get_store().users, "find_where", lambda db, *criteria: [])

    response = client.post("/api/auth/register", json={"username": "moviefan", "password": "x"})

    assert response.status_code == 409
    assert response.json() == {"message": "Username already registered"}


def test_rejected_login_body_does_not_log_password(client, caplog):
    caplog.set_level(logging.INFO, logger="app.exceptions")

    response = client.post("/api/auth/login", json={"password": "S3cretPass!"})

    assert response.status_code == 422
    assert response.json() == {"message": "Invalid request body"}
    assert "Rejected request body" in caplog.text
    assert "S3cretPass!" not in caplog.text
