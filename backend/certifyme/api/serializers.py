from __future__ import annotations

from typing import Optional

from certifyme.db.models.question import Question
from certifyme.db.models.result import Result


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def user_to_dict(user) -> dict:
    return {
        "id":           user.id,
        "email":        user.email,
        "name":         user.name,
        "display_name": user.display_name,
        "created_at":   _iso(user.created_at),
        "is_active":    user.is_active,
    }


def quiz_to_dict(quiz) -> dict:
    """Accepts a Quiz row or a QuizInfo."""
    return {
        "id":            quiz.id,
        "title":         quiz.title,
        "description":   quiz.description,
        "passing_score": quiz.passing_score,
        "created_at":    _iso(quiz.created_at),
    }


def question_to_dict(question) -> dict:
    """Accepts a Question row or a QuestionInfo."""
    return {
        "id":             question.id,
        "quiz_id":        question.quiz_id,
        "question_text":  question.question_text,
        "options":        list(question.options),
        "correct_answer": question.correct_answer,
        "order_index":    question.order_index,
    }


def result_to_dict(result: Result) -> dict:
    return {
        "id":              result.id,
        "user_id":         result.user_id,
        "quiz_id":         result.quiz_id,
        "score":           result.score,
        "total_questions": result.total_questions,
        "passed":          result.passed,
        "answers":         list(result.answers),
        "created_at":      _iso(result.created_at),
    }


def count_correct(result: Result, questions: list[Question]) -> int:
    """Correct answers in *result*, matched to questions by position."""
    return sum(
        1 for q, a in zip(questions, result.answers) if a == q.correct_answer
    )
