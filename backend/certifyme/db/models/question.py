import uuid
from certifyme.extensions import db


class Question(db.Model):
    __tablename__ = "questions"

    id = db.Column(
        db.String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    quiz_id = db.Column(
        db.String(36),
        db.ForeignKey("quizzes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_text = db.Column(db.Text, nullable=False)
    # JSON list of option strings, displayed in stored order
    options = db.Column(db.JSON, nullable=False)
    # index into options
    correct_answer = db.Column(db.Integer, nullable=False)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    # Relationships
    quiz = db.relationship("Quiz", back_populates="questions")

    def __repr__(self):
        return f"<Question id={self.id} quiz={self.quiz_id} order={self.order_index}>"
