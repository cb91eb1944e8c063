import uuid
from datetime import datetime, timezone
from certifyme.extensions import db

DEFAULT_PASSING_SCORE = 70


class Quiz(db.Model):
    __tablename__ = "quizzes"
    __table_args__ = (
        db.CheckConstraint(
            "passing_score >= 0 AND passing_score <= 100",
            name="ck_quizzes_passing_score_range",
        ),
    )

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    passing_score = db.Column(db.Integer, nullable=False, default=DEFAULT_PASSING_SCORE)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    questions = db.relationship(
        "Question",
        back_populates="quiz",
        lazy="dynamic",
        cascade="all, delete-orphan",
        order_by="Question.order_index",
    )

    def __repr__(self):
        return f"<Quiz id={self.id} title={self.title!r}>"
