"""
Quiz error taxonomy.

Every error is scoped to a single quiz session or request; none is fatal to
the application. Each class carries the HTTP status the API answers with.

    QuizError
    ├── NotFoundError     – quiz, questions, result or certificate missing (404)
    ├── ValidationError   – bad input, e.g. unanswered questions at submit (400)
    ├── AuthError         – bad credentials (401)
    ├── ForbiddenError    – the account is disabled (403)
    ├── ConflictError     – the row already exists, e.g. a taken email (409)
    └── PersistenceError  – the backing store failed to read or write (503)
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify

log = logging.getLogger(__name__)


class QuizError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(QuizError):
    status_code = 404


class ValidationError(QuizError):
    status_code = 400


class AuthError(QuizError):
    status_code = 401


class ForbiddenError(QuizError):
    status_code = 403


class ConflictError(QuizError):
    status_code = 409


class PersistenceError(QuizError):
    status_code = 503


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(QuizError)
    def _handle_quiz_error(exc: QuizError):
        if exc.status_code >= 500:
            log.error("request failed: %s", exc.message)
        else:
            log.info("request rejected (%s): %s", exc.status_code, exc.message)
        return jsonify({"error": exc.message}), exc.status_code
