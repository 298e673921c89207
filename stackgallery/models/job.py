from ..extensions import db
from .base import TimestampMixin, utcnow, isoformat


class Job(db.Model, TimestampMixin):
    __tablename__ = "jobs"
    id = db.Column(db.Integer, primary_key=True)
    recruiter_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default="")
    posted_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    recruiter = db.relationship("Recruiter", back_populates="job_postings")

    def to_dict(self):
        return {
            "_id": str(self.id),
            "title": self.title,
            "description": self.description or "",
            "recruiter": self.recruiter.username if self.recruiter else None,
            "postedAt": isoformat(self.posted_at),
        }
