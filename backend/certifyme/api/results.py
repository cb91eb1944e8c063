"""
Results API

Endpoints
---------
GET   /api/results                                – caller's results, newest first
GET   /api/results/<result_id>                    – one result with its quiz
GET   /api/results/<result_id>/certificate.pdf    – certificate download (passed only)
GET   /api/results/<result_id>/certificate.png    – certificate preview image

All routes require a valid JWT access token (Bearer in Authorization header).
Results belonging to other users are reported as not found.
"""

from __future__ import annotations

import io
import logging

from flask import Blueprint, current_app, jsonify, send_file
from flask_jwt_extended import get_jwt_identity, jwt_required

from certifyme.api.identity import current_user
from certifyme.api.serializers import count_correct, quiz_to_dict, result_to_dict
from certifyme.db.models.question import Question
from certifyme.db.models.result import Result
from certifyme.errors import NotFoundError
from certifyme.services.certificate import render_certificate

log = logging.getLogger(__name__)

results_bp = Blueprint("results", __name__, url_prefix="/api/results")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _owned_result(result_id: str) -> Result:
    result = Result.query.filter_by(id=result_id, user_id=get_jwt_identity()).first()
    if not result:
        raise NotFoundError("result not found")
    return result


def _certificate_for(result_id: str):
    result = _owned_result(result_id)
    user = current_user()
    return render_certificate(
        result,
        result.quiz,
        user.display_name,
        issuer=current_app.config["CERTIFICATE_ISSUER"],
    )


# ── GET /api/results ──────────────────────────────────────────────────────────

@results_bp.get("")
@jwt_required()
def list_results():
    results = (
        Result.query
        .filter_by(user_id=get_jwt_identity())
        .order_by(Result.created_at.desc())
        .all()
    )
    return jsonify([result_to_dict(r) for r in results]), 200


# ── GET /api/results/<result_id> ──────────────────────────────────────────────

@results_bp.get("/<result_id>")
@jwt_required()
def get_result(result_id: str):
    result = _owned_result(result_id)
    questions = (
        Question.query
        .filter_by(quiz_id=result.quiz_id)
        .order_by(Question.order_index.asc())
        .all()
    )
    d = result_to_dict(result)
    d["correct_count"] = count_correct(result, questions)
    d["quiz"] = quiz_to_dict(result.quiz)
    return jsonify(d), 200


# ── GET /api/results/<result_id>/certificate.(pdf|png) ────────────────────────

@results_bp.get("/<result_id>/certificate.pdf")
@jwt_required()
def download_certificate(result_id: str):
    cert = _certificate_for(result_id)
    return send_file(
        io.BytesIO(cert.pdf),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=cert.filename,
    )


@results_bp.get("/<result_id>/certificate.png")
@jwt_required()
def preview_certificate(result_id: str):
    cert = _certificate_for(result_id)
    return send_file(io.BytesIO(cert.png), mimetype="image/png")
