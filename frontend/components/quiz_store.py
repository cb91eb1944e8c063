"""
quiz_store.py — QuizStore backed by the Flask API.

Lets the Take Quiz page run a certifyme QuizSession in the browser session:
loads go through GET /api/quizzes/<id>, the result insert through
POST /api/quizzes/<id>/submissions. APIError statuses are mapped onto the
quiz error taxonomy (404 → NotFoundError, 400 → ValidationError, anything
else → PersistenceError).

Access tokens expire while a user is still answering, so a 401 is answered
once by trading the refresh token for a new access token and repeating the
call.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from certifyme.errors import NotFoundError, PersistenceError, QuizError, ValidationError
from certifyme.services.quiz.types import QuestionInfo, QuizInfo, ResultDraft

from components import api_client
from components.api_client import APIError

log = logging.getLogger(__name__)

UNANSWERED_MESSAGE = "Please answer all questions before submitting"


def _translate(exc: APIError):
    if exc.status_code == 404:
        return NotFoundError(str(exc))
    if exc.status_code == 400:
        return ValidationError(str(exc))
    return PersistenceError(str(exc))


def submit_error_message(session, exc: QuizError) -> str:
    """Text to show when session.submit() raised *exc*."""
    if isinstance(exc, ValidationError) and session.unanswered:
        return UNANSWERED_MESSAGE
    if isinstance(exc, ValidationError):
        return exc.message
    return f"Failed to submit quiz: {exc.message}"


class HttpQuizStore:

    def __init__(
        self,
        access_token: str,
        refresh_tok: Optional[str] = None,
        on_refresh: Optional[Callable[[str], None]] = None,
    ):
        self._token = access_token
        self._refresh_tok = refresh_tok
        self._on_refresh = on_refresh
        self._cache: dict[str, dict] = {}

    def _call(self, fn, *args):
        try:
            return fn(*args, self._token)
        except APIError as exc:
            if exc.status_code != 401 or not self._refresh_tok:
                raise
            log.info("access token rejected; refreshing")
        try:
            self._token = api_client.refresh_token(self._refresh_tok)
        except APIError as exc:
            raise PersistenceError(f"session expired, please log in again ({exc})") from exc
        if self._on_refresh:
            self._on_refresh(self._token)
        return fn(*args, self._token)

    def _payload(self, quiz_id: str) -> dict | None:
        if quiz_id not in self._cache:
            try:
                self._cache[quiz_id] = self._call(api_client.get_quiz, quiz_id)
            except APIError as exc:
                if exc.status_code == 404:
                    return None
                raise _translate(exc) from exc
        return self._cache[quiz_id]

    def fetch_quiz(self, quiz_id: str) -> QuizInfo | None:
        payload = self._payload(quiz_id)
        if payload is None:
            return None
        q = payload["quiz"]
        return QuizInfo(
            id=q["id"],
            title=q["title"],
            description=q.get("description") or "",
            passing_score=q["passing_score"],
        )

    def fetch_questions(self, quiz_id: str) -> list[QuestionInfo]:
        payload = self._payload(quiz_id)
        if payload is None:
            return []
        return [
            QuestionInfo(
                id=q["id"],
                quiz_id=q["quiz_id"],
                question_text=q["question_text"],
                options=tuple(q["options"]),
                correct_answer=q["correct_answer"],
                order_index=q.get("order_index", 0),
            )
            for q in payload["questions"]
        ]

    def insert_result(self, draft: ResultDraft) -> str:
        # The server re-grades the answers; the draft's score is ours for display.
        try:
            result = self._call(api_client.submit_answers, draft.quiz_id, list(draft.answers))
        except APIError as exc:
            raise _translate(exc) from exc
        return result["id"]
