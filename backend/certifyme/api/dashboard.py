"""
Dashboard API

GET /api/dashboard – summary for the signed-in user:

    {
      "stats":   {"completed": int, "passed": int, "avg_score": int},
      "quizzes": [QuizDict + {"latest_result": ResultDict | None}, ...]
    }

Quizzes are newest first; latest_result is the caller's most recent attempt.
"""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from certifyme.api.serializers import quiz_to_dict, result_to_dict
from certifyme.db.models.quiz import Quiz
from certifyme.db.models.result import Result

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


def compute_stats(results: list[Result]) -> dict:
    completed = len(results)
    passed = sum(1 for r in results if r.passed)
    total_score = sum(r.score for r in results)
    # round half up, same as quiz scoring
    avg_score = (2 * total_score + completed) // (2 * completed) if completed else 0
    return {"completed": completed, "passed": passed, "avg_score": avg_score}


@dashboard_bp.get("")
@jwt_required()
def dashboard():
    quizzes = Quiz.query.order_by(Quiz.created_at.desc()).all()
    results = (
        Result.query
        .filter_by(user_id=get_jwt_identity())
        .order_by(Result.created_at.desc())
        .all()
    )

    latest: dict[str, Result] = {}
    for r in results:
        latest.setdefault(r.quiz_id, r)

    cards = []
    for quiz in quizzes:
        d = quiz_to_dict(quiz)
        last = latest.get(quiz.id)
        d["latest_result"] = result_to_dict(last) if last else None
        cards.append(d)

    return jsonify({"stats": compute_stats(results), "quizzes": cards}), 200
