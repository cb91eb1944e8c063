"""
Quiz session state machine.

One session is one attempt at one quiz by one user:

    LOADING ──load()──▶ READY ──submit()──▶ SUBMITTING ──▶ SUBMITTED
       │                  ▲                     │
       └──▶ NOT_FOUND     └── store failure ─────┘

The session never touches a database or HTTP client directly; it is handed
a store implementing the QuizStore protocol plus the caller's Identity.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Protocol, Sequence

from certifyme.errors import NotFoundError, QuizError, ValidationError
from certifyme.services.quiz.types import (
    Grade,
    Identity,
    QuestionInfo,
    QuizInfo,
    ResultDraft,
)

log = logging.getLogger(__name__)

UNANSWERED = -1


class QuizStore(Protocol):
    def fetch_quiz(self, quiz_id: str) -> Optional[QuizInfo]: ...

    def fetch_questions(self, quiz_id: str) -> List[QuestionInfo]: ...

    def insert_result(self, draft: ResultDraft) -> str: ...


class SessionState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    NOT_FOUND = "not_found"


def grade_answers(
    questions: Sequence[QuestionInfo],
    answers: Sequence[int],
    passing_score: int,
) -> Grade:
    """
    Score *answers* against *questions*.

    score = round(100 * correct / total), rounding halves up (12.5 -> 13),
    computed in integers so the result never depends on float error.
    """
    total = len(questions)
    if total == 0:
        raise ValidationError("quiz has no questions")
    if len(answers) != total:
        raise ValidationError(f"expected {total} answers, got {len(answers)}")

    correct = sum(
        1 for q, a in zip(questions, answers) if a == q.correct_answer
    )
    score = (200 * correct + total) // (2 * total)
    return Grade(
        correct=correct,
        total=total,
        score=score,
        passed=score >= passing_score,
    )


class QuizSession:
    """Manages one in-progress quiz attempt."""

    def __init__(self, store: QuizStore, identity: Identity) -> None:
        self._store = store
        self._identity = identity
        self._state = SessionState.LOADING
        self._quiz: Optional[QuizInfo] = None
        self._questions: List[QuestionInfo] = []
        self._answers: List[int] = []
        self._pointer = 0
        self._grade: Optional[Grade] = None
        self._result_id: Optional[str] = None

    # ── lifecycle ────────────────────────────────────────────────────────────

    def load(self, quiz_id: str) -> None:
        if self._state is not SessionState.LOADING:
            raise ValidationError("session has already been loaded")

        try:
            quiz = self._store.fetch_quiz(quiz_id)
            questions = self._store.fetch_questions(quiz_id) if quiz else []
        except QuizError:
            self._state = SessionState.NOT_FOUND
            raise

        if quiz is None or not questions:
            self._state = SessionState.NOT_FOUND
            log.info("quiz %s not found or has no questions", quiz_id)
            raise NotFoundError("quiz not found")

        self._quiz = quiz
        self._questions = sorted(questions, key=lambda q: q.order_index)
        self._answers = [UNANSWERED] * len(self._questions)
        self._pointer = 0
        self._state = SessionState.READY

    def select_answer(self, option_index: int) -> None:
        self._require_ready()
        options = self._questions[self._pointer].options
        if isinstance(option_index, bool) or not isinstance(option_index, int) \
                or not 0 <= option_index < len(options):
            raise ValidationError(
                f"option index must be between 0 and {len(options) - 1}"
            )
        self._answers[self._pointer] = option_index

    def advance(self) -> None:
        self._require_ready()
        if self._pointer < len(self._questions) - 1:
            self._pointer += 1

    def retreat(self) -> None:
        self._require_ready()
        if self._pointer > 0:
            self._pointer -= 1

    def answer_all(self, answers: Sequence[int]) -> None:
        """Select every answer in order, starting from the first question.

        UNANSWERED entries leave their slot empty so submit() can reject them.
        """
        self._require_ready()
        if len(answers) != len(self._questions):
            raise ValidationError(
                f"expected {len(self._questions)} answers, got {len(answers)}"
            )
        while not self.is_first:
            self.retreat()
        for i, option_index in enumerate(answers):
            if option_index != UNANSWERED:
                self.select_answer(option_index)
            if i < len(answers) - 1:
                self.advance()

    def submit(self) -> str:
        """Grade the attempt and persist one result. Returns the new result id."""
        self._require_ready()

        missing = self.unanswered
        if missing:
            raise ValidationError(
                f"please answer all questions before submitting "
                f"({len(missing)} unanswered)"
            )

        result_grade = grade_answers(self._questions, self._answers, self._quiz.passing_score)
        draft = ResultDraft(
            user_id=self._identity.user_id,
            quiz_id=self._quiz.id,
            score=result_grade.score,
            total_questions=result_grade.total,
            passed=result_grade.passed,
            answers=tuple(self._answers),
        )

        self._state = SessionState.SUBMITTING
        try:
            result_id = self._store.insert_result(draft)
        except QuizError:
            self._state = SessionState.READY
            log.warning(
                "submission for quiz %s by user %s failed; session still open",
                self._quiz.id, self._identity.user_id,
            )
            raise

        self._grade = result_grade
        self._result_id = result_id
        self._state = SessionState.SUBMITTED
        log.info(
            "user %s submitted quiz %s: score=%s passed=%s result=%s",
            self._identity.user_id, self._quiz.id,
            result_grade.score, result_grade.passed, result_id,
        )
        return result_id

    # ── read-only view ───────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def quiz(self) -> Optional[QuizInfo]:
        return self._quiz

    @property
    def questions(self) -> List[QuestionInfo]:
        return list(self._questions)

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def current_question(self) -> Optional[QuestionInfo]:
        if not self._questions:
            return None
        return self._questions[self._pointer]

    @property
    def current_answer(self) -> int:
        if not self._answers:
            return UNANSWERED
        return self._answers[self._pointer]

    @property
    def answers(self) -> List[int]:
        return list(self._answers)

    @property
    def answered_count(self) -> int:
        return sum(1 for a in self._answers if a != UNANSWERED)

    @property
    def unanswered(self) -> List[int]:
        return [i for i, a in enumerate(self._answers) if a == UNANSWERED]

    @property
    def progress(self) -> float:
        if not self._questions:
            return 0.0
        return (self._pointer + 1) / len(self._questions)

    @property
    def is_first(self) -> bool:
        return self._pointer == 0

    @property
    def is_last(self) -> bool:
        return self._pointer == len(self._questions) - 1

    @property
    def grade(self) -> Optional[Grade]:
        return self._grade

    @property
    def result_id(self) -> Optional[str]:
        return self._result_id

    # ── helpers ──────────────────────────────────────────────────────────────

    def _require_ready(self) -> None:
        if self._state is not SessionState.READY:
            raise ValidationError(f"quiz session is {self._state.value}, not ready")
