"""
Shared fixtures.

Each test gets a fresh Flask app bound to an in-memory SQLite database
(TestingConfig), so no running server or Postgres is needed.
"""

import pytest

from certifyme import create_app
from certifyme.db.models.question import Question
from certifyme.db.models.quiz import Quiz
from certifyme.extensions import db


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register(client, email="ada@example.com", password="password123", name="Ada Lovelace"):
    r = client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert r.status_code == 201, r.get_json()
    return r.get_json()


@pytest.fixture()
def auth(client):
    """Authorization header for a freshly registered user."""
    data = register(client)
    return {"Authorization": f"Bearer {data['access_token']}"}


@pytest.fixture()
def user_id(client, auth):
    return client.get("/api/auth/me", headers=auth).get_json()["user"]["id"]


def make_quiz(quiz_id="quiz-x", passing_score=70, correct=(0, 1, 2, 3, 0), title="Python Basics"):
    """Insert a quiz with one question per entry of *correct* (the right option index)."""
    db.session.add(Quiz(id=quiz_id, title=title, description="demo", passing_score=passing_score))
    # inserted in reverse so ordering by order_index is actually exercised
    for i in reversed(range(len(correct))):
        db.session.add(
            Question(
                id=f"{quiz_id}-q{i}",
                quiz_id=quiz_id,
                question_text=f"Question {i}?",
                options=["a", "b", "c", "d"],
                correct_answer=correct[i],
                order_index=i + 1,
            )
        )
    db.session.commit()
    return quiz_id


@pytest.fixture()
def quiz(app):
    return make_quiz()
