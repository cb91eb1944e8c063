"""
Plain value types shared by the quiz session and its stores.

They are detached from SQLAlchemy so the same session logic runs in the
Flask backend (SqlQuizStore) and in the Streamlit frontend (HttpQuizStore).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Identity:
    """The authenticated user a session acts on behalf of."""
    user_id: str
    display_name: str


@dataclass(frozen=True)
class QuizInfo:
    id: str
    title: str
    description: str
    passing_score: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class QuestionInfo:
    id: str
    quiz_id: str
    question_text: str
    options: Tuple[str, ...]
    correct_answer: int
    order_index: int = 0


@dataclass(frozen=True)
class Grade:
    correct: int
    total: int
    score: int
    passed: bool


@dataclass(frozen=True)
class ResultDraft:
    """Everything needed to insert one result row."""
    user_id: str
    quiz_id: str
    score: int
    total_questions: int
    passed: bool
    answers: Tuple[int, ...] = field(default_factory=tuple)
