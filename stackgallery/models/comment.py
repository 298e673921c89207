from ..extensions import db
from .base import utcnow, isoformat


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id", ondelete="CASCADE"), index=True)
    answer_id = db.Column(db.Integer, db.ForeignKey("answers.id", ondelete="CASCADE"), index=True)
    text = db.Column(db.Text, nullable=False)
    comment_by = db.Column(db.String(80), nullable=False, index=True)
    comment_date_time = db.Column(db.DateTime, default=utcnow, nullable=False)

    # attached media; permit_download stays NULL when there is no media_path
    media_path = db.Column(db.String(500))
    media_url = db.Column(db.String(500))
    media_size = db.Column(db.String(64))
    permit_download = db.Column(db.Boolean)

    def to_dict(self):
        d = {
            "_id": str(self.id),
            "text": self.text,
            "commentBy": self.comment_by,
            "commentDateTime": isoformat(self.comment_date_time),
        }
        for key, value in (("mediaPath", self.media_path), ("mediaUrl", self.media_url),
                           ("mediaSize", self.media_size), ("permitDownload", self.permit_download)):
            if value is not None:
                d[key] = value
        return d
