"""Unit tests for the QuizSession state machine against an in-memory store."""

import pytest

from certifyme.errors import NotFoundError, PersistenceError, ValidationError
from certifyme.services.quiz.session import (
    UNANSWERED,
    QuizSession,
    SessionState,
    grade_answers,
)
from certifyme.services.quiz.types import Identity, QuestionInfo, QuizInfo


class MemoryStore:
    def __init__(self, passing_score=70, correct=(0, 1, 2, 3, 0)):
        self.quizzes = {"q": QuizInfo("q", "Quiz", "", passing_score)}
        self.questions = {
            "q": [
                QuestionInfo(f"q{i}", "q", f"Q{i}?", ("a", "b", "c", "d"), c, order_index=i)
                for i, c in reversed(list(enumerate(correct)))
            ]
        }
        self.inserted = []
        self.fail_inserts = 0

    def fetch_quiz(self, quiz_id):
        return self.quizzes.get(quiz_id)

    def fetch_questions(self, quiz_id):
        return list(self.questions.get(quiz_id, []))

    def insert_result(self, draft):
        if self.fail_inserts:
            self.fail_inserts -= 1
            raise PersistenceError("database unavailable")
        self.inserted.append(draft)
        return f"result-{len(self.inserted)}"


IDENTITY = Identity(user_id="u1", display_name="Ada")


def loaded(store=None):
    session = QuizSession(store or MemoryStore(), IDENTITY)
    session.load("q")
    return session


def answer(session, answers):
    for i, a in enumerate(answers):
        session.select_answer(a)
        if i < len(answers) - 1:
            session.advance()


# ── load ──────────────────────────────────────────────────────────────────────

def test_fresh_session_is_all_unanswered():
    session = loaded()
    assert session.state is SessionState.READY
    assert session.answers == [UNANSWERED] * 5
    assert session.pointer == 0
    assert session.answered_count == 0


def test_questions_are_sorted_by_position():
    session = loaded()
    assert [q.order_index for q in session.questions] == [0, 1, 2, 3, 4]


def test_missing_quiz_is_not_found():
    session = QuizSession(MemoryStore(), IDENTITY)
    with pytest.raises(NotFoundError):
        session.load("nope")
    assert session.state is SessionState.NOT_FOUND


def test_quiz_without_questions_is_not_found():
    store = MemoryStore()
    store.questions["q"] = []
    session = QuizSession(store, IDENTITY)
    with pytest.raises(NotFoundError):
        session.load("q")
    assert session.state is SessionState.NOT_FOUND


def test_operations_before_load_are_rejected():
    session = QuizSession(MemoryStore(), IDENTITY)
    with pytest.raises(ValidationError):
        session.select_answer(0)


# ── selecting & navigating ────────────────────────────────────────────────────

def test_last_selection_wins():
    session = loaded()
    session.select_answer(1)
    session.select_answer(3)
    assert session.answers[0] == 3
    session.select_answer(3)
    assert session.answers[0] == 3


@pytest.mark.parametrize("bad", [-1, 4, 99])
def test_option_index_must_be_valid(bad):
    session = loaded()
    with pytest.raises(ValidationError):
        session.select_answer(bad)
    assert session.answers[0] == UNANSWERED


def test_retreat_at_first_question_is_noop():
    session = loaded()
    session.retreat()
    assert session.pointer == 0


def test_advance_at_last_question_is_noop():
    session = loaded()
    for _ in range(10):
        session.advance()
    assert session.pointer == 4
    assert session.is_last
    session.advance()
    assert session.pointer == 4


def test_changing_earlier_answer_after_navigating_back():
    session = loaded()
    answer(session, [0, 1, 2])
    assert session.pointer == 2
    session.retreat()
    assert session.pointer == 1
    session.select_answer(3)
    assert session.answers[:3] == [0, 3, 2]
    session.retreat()
    session.select_answer(1)
    assert session.answers[:3] == [1, 3, 2]


def test_progress_tracks_pointer():
    session = loaded()
    assert session.progress == pytest.approx(0.2)
    session.advance()
    assert session.progress == pytest.approx(0.4)


# ── grading ───────────────────────────────────────────────────────────────────

def _questions(correct):
    return [QuestionInfo(str(i), "q", "?", ("a", "b", "c"), c) for i, c in enumerate(correct)]


@pytest.mark.parametrize(
    "n, correct, passing, score, passed",
    [
        (5, 4, 70, 80, True),
        (5, 3, 70, 60, False),
        (3, 2, 70, 67, False),
        (3, 1, 30, 33, True),
        (8, 1, 13, 13, True),   # 12.5 rounds up
        (4, 0, 0, 0, True),
        (4, 4, 100, 100, True),
    ],
)
def test_grade_answers(n, correct, passing, score, passed):
    questions = _questions([0] * n)
    answers = [0] * correct + [1] * (n - correct)
    g = grade_answers(questions, answers, passing)
    assert (g.correct, g.total, g.score, g.passed) == (correct, n, score, passed)


def test_grade_requires_matching_lengths():
    with pytest.raises(ValidationError):
        grade_answers(_questions([0, 0]), [0], 50)


# ── submit ────────────────────────────────────────────────────────────────────

def test_submit_with_unanswered_questions_fails_without_transition():
    store = MemoryStore()
    session = loaded(store)
    answer(session, [0, 1, 2, 3])
    with pytest.raises(ValidationError, match="1 unanswered"):
        session.submit()
    assert session.state is SessionState.READY
    assert store.inserted == []


def test_submit_persists_one_result():
    store = MemoryStore(passing_score=70, correct=(0, 1, 2, 3, 0))
    session = loaded(store)
    answer(session, [0, 1, 2, 3, 1])  # 4 of 5 correct

    result_id = session.submit()

    assert result_id == "result-1"
    assert session.state is SessionState.SUBMITTED
    assert session.grade.score == 80 and session.grade.passed
    (draft,) = store.inserted
    assert draft.user_id == "u1"
    assert draft.quiz_id == "q"
    assert draft.score == 80
    assert draft.total_questions == 5
    assert draft.passed is True
    assert draft.answers == (0, 1, 2, 3, 1)


def test_submitted_session_is_closed():
    session = loaded()
    answer(session, [0, 1, 2, 3, 0])
    session.submit()
    with pytest.raises(ValidationError):
        session.select_answer(0)
    with pytest.raises(ValidationError):
        session.submit()


def test_persistence_failure_leaves_session_resumable():
    store = MemoryStore()
    store.fail_inserts = 1
    session = loaded(store)
    answer(session, [0, 1, 2, 3, 0])

    with pytest.raises(PersistenceError):
        session.submit()
    assert session.state is SessionState.READY
    assert session.answers == [0, 1, 2, 3, 0]

    assert session.submit() == "result-1"
    assert len(store.inserted) == 1


def test_two_attempts_create_two_results():
    store = MemoryStore()
    first = loaded(store)
    answer(first, [0, 1, 2, 3, 0])
    second = loaded(store)
    answer(second, [1, 1, 1, 1, 1])

    ids = {first.submit(), second.submit()}

    assert len(ids) == 2
    assert [d.score for d in store.inserted] == [100, 20]


def test_answer_all_walks_every_question():
    session = loaded()
    session.advance()
    session.answer_all([3, 2, 1, 0, 3])
    assert session.answers == [3, 2, 1, 0, 3]
    assert session.is_last


def test_answer_all_rejects_wrong_length():
    session = loaded()
    with pytest.raises(ValidationError):
        session.answer_all([0, 1])
