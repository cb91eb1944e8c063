"""Insert the demo quizzes. Rows that already exist are left untouched."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from certifyme.data.sample_quizzes import SAMPLE_QUESTIONS, SAMPLE_QUIZZES
from certifyme.db.models.question import Question
from certifyme.db.models.quiz import Quiz
from certifyme.errors import PersistenceError
from certifyme.extensions import db

log = logging.getLogger(__name__)


def load_sample_data() -> dict:
    """Returns {"quizzes": <inserted>, "questions": <inserted>}."""
    added_quizzes = 0
    added_questions = 0
    try:
        for row in SAMPLE_QUIZZES:
            if db.session.get(Quiz, row["id"]) is None:
                db.session.add(Quiz(**row))
                added_quizzes += 1
        db.session.flush()

        for row in SAMPLE_QUESTIONS:
            if db.session.get(Question, row["id"]) is None:
                db.session.add(Question(**row))
                added_questions += 1

        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        log.error("loading sample data failed: %s", exc)
        raise PersistenceError("failed to load sample data") from exc

    log.info("sample data loaded: %d quizzes, %d questions", added_quizzes, added_questions)
    return {"quizzes": added_quizzes, "questions": added_questions}
