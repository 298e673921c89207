from ..extensions import db
from .base import utcnow, isoformat


class Testimonial(db.Model):
    __tablename__ = "testimonials"
    __table_args__ = (
        db.UniqueConstraint("profile_user_id", "from_username", name="uq_testimonials_profile_author"),
    )

    id = db.Column(db.Integer, primary_key=True)
    profile_user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    from_user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"))
    from_username = db.Column(db.String(80), nullable=False)
    from_profile_picture = db.Column(db.Text, default="")
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    approved = db.Column(db.Boolean, default=False, nullable=False)

    profile_user = db.relationship("User", foreign_keys=[profile_user_id], back_populates="testimonials")

    def to_dict(self):
        return {
            "_id": str(self.id),
            "fromUserId": str(self.from_user_id) if self.from_user_id else None,
            "fromUsername": self.from_username,
            "fromProfilePicture": self.from_profile_picture or "",
            "content": self.content,
            "createdAt": isoformat(self.created_at),
            "approved": bool(self.approved),
        }
