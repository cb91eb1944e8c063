"""HttpQuizStore: the frontend's API-backed store driving a QuizSession."""

import pytest

from certifyme.errors import NotFoundError, PersistenceError, ValidationError
from certifyme.services.quiz.session import QuizSession, SessionState
from certifyme.services.quiz.types import Identity
from components import api_client
from components.api_client import APIError
from components.quiz_store import UNANSWERED_MESSAGE, HttpQuizStore, submit_error_message

PAYLOAD = {
    "quiz": {"id": "quiz-1", "title": "JS", "description": "", "passing_score": 70},
    "questions": [
        {"id": f"q{i}", "quiz_id": "quiz-1", "question_text": "?",
         "options": ["a", "b"], "correct_answer": 0, "order_index": i}
        for i in range(3)
    ],
}

IDENTITY = Identity(user_id="u1", display_name="Ada")


@pytest.fixture()
def calls(monkeypatch):
    calls = {"get_quiz": 0, "submitted": []}

    def fake_get_quiz(quiz_id, token):
        calls["get_quiz"] += 1
        if quiz_id != "quiz-1":
            raise APIError("quiz not found", 404)
        return PAYLOAD

    def fake_submit(quiz_id, answers, token):
        calls["submitted"].append(answers)
        return {"id": "result-42"}

    monkeypatch.setattr(api_client, "get_quiz", fake_get_quiz)
    monkeypatch.setattr(api_client, "submit_answers", fake_submit)
    return calls


def test_load_fetches_quiz_once(calls):
    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    assert session.question_count == 3
    assert calls["get_quiz"] == 1


def test_unknown_quiz_maps_to_none(calls):
    assert HttpQuizStore("tok").fetch_quiz("nope") is None


def test_submit_posts_answers(calls):
    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 1, 0])
    assert session.submit() == "result-42"
    assert calls["submitted"] == [[0, 1, 0]]


def test_server_unreachable_keeps_session_ready(calls, monkeypatch):
    def offline(quiz_id, answers, token):
        raise APIError("could not reach the server")

    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 0, 0])
    monkeypatch.setattr(api_client, "submit_answers", offline)

    with pytest.raises(PersistenceError):
        session.submit()
    assert session.state is SessionState.READY


def test_server_side_validation_error(calls, monkeypatch):
    def rejected(quiz_id, answers, token):
        raise APIError("please answer all questions", 400)

    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 0, 0])
    monkeypatch.setattr(api_client, "submit_answers", rejected)

    with pytest.raises(ValidationError):
        session.submit()
    assert session.state is SessionState.READY


def test_expired_token_is_refreshed_and_submit_retried(calls, monkeypatch):
    tokens_seen = []
    refreshed = []

    def expiring(quiz_id, answers, token):
        tokens_seen.append(token)
        if token == "stale":
            raise APIError("Token has expired", 401)
        return {"id": "result-7"}

    def fake_refresh(refresh_tok):
        assert refresh_tok == "refresh-tok"
        return "fresh"

    monkeypatch.setattr(api_client, "submit_answers", expiring)
    monkeypatch.setattr(api_client, "refresh_token", fake_refresh)

    store = HttpQuizStore("stale", refresh_tok="refresh-tok", on_refresh=refreshed.append)
    session = QuizSession(store, IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 0, 0])

    assert session.submit() == "result-7"
    assert tokens_seen == ["stale", "fresh"]
    assert refreshed == ["fresh"]
    assert session.state is SessionState.SUBMITTED


def test_expired_refresh_token_fails_submit(calls, monkeypatch):
    def expired(*args):
        raise APIError("Token has expired", 401)

    monkeypatch.setattr(api_client, "submit_answers", expired)
    monkeypatch.setattr(api_client, "refresh_token", expired)

    session = QuizSession(HttpQuizStore("stale", refresh_tok="old"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 0, 0])

    with pytest.raises(PersistenceError, match="log in again"):
        session.submit()
    assert session.state is SessionState.READY


def test_401_without_refresh_token_is_not_retried(calls, monkeypatch):
    attempts = []

    def expired(quiz_id, answers, token):
        attempts.append(token)
        raise APIError("Token has expired", 401)

    monkeypatch.setattr(api_client, "submit_answers", expired)

    session = QuizSession(HttpQuizStore("stale"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 0, 0])

    with pytest.raises(PersistenceError):
        session.submit()
    assert attempts == ["stale"]


def test_unanswered_questions_message(calls):
    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    session.select_answer(0)

    with pytest.raises(ValidationError) as excinfo:
        session.submit()

    assert submit_error_message(session, excinfo.value) == UNANSWERED_MESSAGE
    assert calls["submitted"] == []


def test_server_rejection_message_is_shown(calls, monkeypatch):
    def rejected(quiz_id, answers, token):
        raise APIError("answers must be a list of option indexes", 400)

    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    session.load("quiz-1")
    session.answer_all([0, 1, 0])
    monkeypatch.setattr(api_client, "submit_answers", rejected)

    with pytest.raises(ValidationError) as excinfo:
        session.submit()

    message = submit_error_message(session, excinfo.value)
    assert message == "answers must be a list of option indexes"


def test_failed_submit_message_includes_cause():
    session = QuizSession(HttpQuizStore("tok"), IDENTITY)
    message = submit_error_message(session, NotFoundError("quiz not found"))
    assert message == "Failed to submit quiz: quiz not found"
