import uuid
from datetime import datetime, timezone
from certifyme.extensions import db


class Result(db.Model):
    """
    Outcome of one quiz attempt.

    Rows are insert-only: a retake creates a new Result instead of updating
    the previous one.
    """
    __tablename__ = "results"

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quiz_id = db.Column(
        db.String(36),
        db.ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    score = db.Column(db.Integer, nullable=False)
    total_questions = db.Column(db.Integer, nullable=False)
    passed = db.Column(db.Boolean, nullable=False)
    # chosen option index per question, parallel to question order
    answers = db.Column(db.JSON, nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    user = db.relationship("User", back_populates="results")
    quiz = db.relationship("Quiz")

    def __repr__(self):
        return f"<Result id={self.id} user={self.user_id} quiz={self.quiz_id} score={self.score}>"
