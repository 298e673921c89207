from ..extensions import db
from flask_login import UserMixin
from sqlalchemy.orm import validates
from .base import TimestampMixin, utcnow, isoformat
from werkzeug.security import generate_password_hash, check_password_hash

EXTERNAL_LINK_KEYS = ("github", "artstation", "linkedin", "website")
CUSTOM_COLOR_KEYS = ("primary", "accent", "background")


def _fill(keys, value):
    value = value or {}
    return {k: value.get(k) or "" for k in keys}


class User(db.Model, UserMixin, TimestampMixin):
    """Site account. Recruiters share this table, told apart by ``role``."""
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False, index=True)
    date_joined = db.Column(db.DateTime, default=utcnow)

    # profile customization
    biography = db.Column(db.Text, default="")
    profile_picture = db.Column(db.Text, default="")
    banner_image = db.Column(db.Text, default="")
    resume_file = db.Column(db.Text, default="")
    skills = db.Column(db.JSON, default=list)             # ["Blender","Three.js"]
    portfolio_models = db.Column(db.JSON, default=list)   # urls or data URIs
    portfolio_thumbnails = db.Column(db.JSON, default=list)
    external_links = db.Column(db.JSON, default=dict)     # {"github": "...", ...}
    custom_colors = db.Column(db.JSON, default=dict)      # {"primary": "#fff", ...}
    custom_font = db.Column(db.String(120), default="")

    testimonials = db.relationship(
        "Testimonial",
        foreign_keys="Testimonial.profile_user_id",
        back_populates="profile_user",
        cascade="all, delete-orphan",
        order_by="Testimonial.created_at",
    )

    __table_args__ = (
        db.CheckConstraint("role != 'Recruiter' OR company IS NOT NULL", name="ck_users_recruiter_company"),
    )
    __mapper_args__ = {"polymorphic_on": role, "polymorphic_identity": "User"}

    @validates("username")
    def _validate_username(self, key, value):
        if self.username is not None and value != self.username:
            raise ValueError("Username cannot be changed")
        if not value:
            raise ValueError("Username is required")
        return value

    def set_password(self, raw):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw):
        return check_password_hash(self.password_hash, raw)

    def to_dict(self):
        return {
            "_id": str(self.id),
            "username": self.username,
            "role": self.role,
            "dateJoined": isoformat(self.date_joined),
            "biography": self.biography or "",
            "profilePicture": self.profile_picture or "",
            "bannerImage": self.banner_image or "",
            "resumeFile": self.resume_file or "",
            "skills": list(self.skills or []),
            "portfolioModels": list(self.portfolio_models or []),
            "portfolioThumbnails": list(self.portfolio_thumbnails or []),
            "externalLinks": _fill(EXTERNAL_LINK_KEYS, self.external_links),
            "customColors": _fill(CUSTOM_COLOR_KEYS, self.custom_colors),
            "customFont": self.custom_font or "",
            "testimonials": [t.to_dict() for t in self.testimonials],
        }

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role}>"


class Recruiter(User):
    company = db.Column(db.String(200))

    job_postings = db.relationship(
        "Job",
        back_populates="recruiter",
        cascade="all, delete-orphan",
        order_by="Job.id",
    )

    __mapper_args__ = {"polymorphic_identity": "Recruiter"}

    @validates("company")
    def _validate_company(self, key, value):
        if not value or not value.strip():
            raise ValueError("Company is required for recruiters")
        return value.strip()

    def to_dict(self):
        d = super().to_dict()
        d["company"] = self.company
        d["jobPostings"] = [str(j.id) for j in self.job_postings]
        return d
