from certifyme.db.models.user import User
from certifyme.db.models.quiz import Quiz
from certifyme.db.models.question import Question
from certifyme.db.models.result import Result

__all__ = [
    "User",
    "Quiz",
    "Question",
    "Result",
]
