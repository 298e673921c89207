from ..extensions import db
from .base import utcnow, isoformat
from ..services.camera_refs import preprocess_camera_refs

question_tags = db.Table(
    "question_tags",
    db.Column("question_id", db.Integer, db.ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True),
    db.Column("tag_id", db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(db.Model):
    __tablename__ = "tags"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(40), unique=True, nullable=False, index=True)
    description = db.Column(db.Text, default="")

    questions = db.relationship("Question", secondary=question_tags, back_populates="tags")

    def to_dict(self):
        return {"_id": str(self.id), "name": self.name, "description": self.description or ""}


class Question(db.Model):
    __tablename__ = "questions"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    text = db.Column(db.Text, nullable=False)
    asked_by = db.Column(db.String(80), nullable=False, index=True)
    ask_date_time = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    views = db.Column(db.JSON, default=list)  # usernames that opened the question

    tags = db.relationship("Tag", secondary=question_tags, back_populates="questions", order_by="Tag.name")
    answers = db.relationship("Answer", back_populates="question", cascade="all, delete-orphan",
                              order_by="Answer.ans_date_time")
    comments = db.relationship("Comment", cascade="all, delete-orphan",
                               order_by="Comment.comment_date_time",
                               primaryjoin="Question.id == Comment.question_id")

    def to_dict(self):
        return {
            "_id": str(self.id),
            "title": self.title,
            "text": self.text,
            "askedBy": self.asked_by,
            "askDateTime": isoformat(self.ask_date_time),
            "views": list(self.views or []),
            "tags": [t.to_dict() for t in self.tags],
            "answers": [a.to_dict() for a in self.answers],
            "comments": [c.to_dict() for c in self.comments],
        }


class Answer(db.Model):
    __tablename__ = "answers"
    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    ans_by = db.Column(db.String(80), nullable=False)
    ans_date_time = db.Column(db.DateTime, default=utcnow, nullable=False)

    question = db.relationship("Question", back_populates="answers")
    comments = db.relationship("Comment", cascade="all, delete-orphan",
                               order_by="Comment.comment_date_time",
                               primaryjoin="Answer.id == Comment.answer_id")

    def to_dict(self):
        return {
            "_id": str(self.id),
            "text": self.text,
            # camera references become markdown links for the viewer
            "renderedText": preprocess_camera_refs(self.text),
            "ansBy": self.ans_by,
            "ansDateTime": isoformat(self.ans_date_time),
            "comments": [c.to_dict() for c in self.comments],
        }
