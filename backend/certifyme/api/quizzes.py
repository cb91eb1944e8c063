"""
Quizzes API

Endpoints
---------
GET   /api/quizzes                          – list quizzes, newest first
POST  /api/quizzes/sample                   – load the demo quizzes (idempotent)
GET   /api/quizzes/<quiz_id>                – quiz with its ordered questions
POST  /api/quizzes/<quiz_id>/submissions    – grade answers and store a result

All routes require a valid JWT access token (Bearer in Authorization header).
"""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from certifyme.api.identity import current_identity
from certifyme.api.serializers import question_to_dict, quiz_to_dict, result_to_dict
from certifyme.db.models.quiz import Quiz
from certifyme.db.models.result import Result
from certifyme.errors import ValidationError
from certifyme.extensions import db
from certifyme.services.quiz.session import QuizSession
from certifyme.services.quiz.store import SqlQuizStore
from certifyme.services.sample_data import load_sample_data

log = logging.getLogger(__name__)

quizzes_bp = Blueprint("quizzes", __name__, url_prefix="/api/quizzes")


# ── GET /api/quizzes ──────────────────────────────────────────────────────────

@quizzes_bp.get("")
@jwt_required()
def list_quizzes():
    quizzes = Quiz.query.order_by(Quiz.created_at.desc()).all()
    return jsonify([quiz_to_dict(q) for q in quizzes]), 200


# ── POST /api/quizzes/sample ──────────────────────────────────────────────────

@quizzes_bp.post("/sample")
@jwt_required()
def load_samples():
    added = load_sample_data()
    return jsonify({"ok": True, "added": added}), 200


# ── GET /api/quizzes/<quiz_id> ────────────────────────────────────────────────

@quizzes_bp.get("/<quiz_id>")
@jwt_required()
def get_quiz(quiz_id: str):
    """Return the quiz and its questions ordered by position (404 if either is missing)."""
    session = QuizSession(SqlQuizStore(), current_identity())
    session.load(quiz_id)

    return jsonify(
        {
            "quiz":      quiz_to_dict(session.quiz),
            "questions": [question_to_dict(q) for q in session.questions],
        }
    ), 200


# ── POST /api/quizzes/<quiz_id>/submissions ───────────────────────────────────

@quizzes_bp.post("/<quiz_id>/submissions")
@jwt_required()
def submit_quiz(quiz_id: str):
    """
    Grade a completed attempt and store it as a new Result.

    Request body (JSON):
        answers : list[int]  – chosen option index per question, in question order

    Every call inserts a new row; retakes never overwrite earlier results.
    """
    data = request.get_json(silent=True) or {}
    answers = data.get("answers")
    if not isinstance(answers, list) or not all(
        isinstance(a, int) and not isinstance(a, bool) for a in answers
    ):
        raise ValidationError("answers must be a list of option indices")

    session = QuizSession(SqlQuizStore(), current_identity())
    session.load(quiz_id)
    session.answer_all(answers)
    result_id = session.submit()

    result = db.session.get(Result, result_id)
    return jsonify(result_to_dict(result)), 201
