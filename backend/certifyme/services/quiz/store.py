"""
SQLAlchemy-backed QuizStore.

Public API
----------
    SqlQuizStore().fetch_quiz(quiz_id)       -> QuizInfo | None
    SqlQuizStore().fetch_questions(quiz_id)  -> list[QuestionInfo]  (by order_index)
    SqlQuizStore().insert_result(draft)      -> str  (new result id)

Every SQLAlchemyError is rolled back, logged and re-raised as
PersistenceError so callers only deal with the quiz error taxonomy.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from certifyme.db.models.question import Question
from certifyme.db.models.quiz import Quiz
from certifyme.db.models.result import Result
from certifyme.errors import PersistenceError
from certifyme.extensions import db
from certifyme.services.quiz.types import QuestionInfo, QuizInfo, ResultDraft

log = logging.getLogger(__name__)


def quiz_info(quiz: Quiz) -> QuizInfo:
    return QuizInfo(
        id=quiz.id,
        title=quiz.title,
        description=quiz.description,
        passing_score=quiz.passing_score,
        created_at=quiz.created_at,
    )


def question_info(question: Question) -> QuestionInfo:
    return QuestionInfo(
        id=question.id,
        quiz_id=question.quiz_id,
        question_text=question.question_text,
        options=tuple(question.options),
        correct_answer=question.correct_answer,
        order_index=question.order_index,
    )


class SqlQuizStore:

    def fetch_quiz(self, quiz_id: str) -> Optional[QuizInfo]:
        try:
            quiz = db.session.get(Quiz, quiz_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error("loading quiz %s failed: %s", quiz_id, exc)
            raise PersistenceError("failed to load quiz") from exc
        return quiz_info(quiz) if quiz else None

    def fetch_questions(self, quiz_id: str) -> List[QuestionInfo]:
        try:
            questions = (
                Question.query
                .filter_by(quiz_id=quiz_id)
                .order_by(Question.order_index.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error("loading questions for quiz %s failed: %s", quiz_id, exc)
            raise PersistenceError("failed to load questions") from exc
        return [question_info(q) for q in questions]

    def insert_result(self, draft: ResultDraft) -> str:
        result_id = str(uuid.uuid4())
        result = Result(
            id=result_id,
            user_id=draft.user_id,
            quiz_id=draft.quiz_id,
            score=draft.score,
            total_questions=draft.total_questions,
            passed=draft.passed,
            answers=list(draft.answers),
        )
        try:
            db.session.add(result)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error(
                "saving result for user=%s quiz=%s failed: %s",
                draft.user_id, draft.quiz_id, exc,
            )
            raise PersistenceError("failed to save quiz result") from exc
        return result_id
