from ..extensions import db
from .base import TimestampMixin, utcnow, isoformat

# closed taxonomy the client filters the gallery by
GALLERY_TAGS = (
    "software_engineering",
    "fullstack",
    "frontend",
    "backend",
    "computer graphics",
    "3d_art",
    "modeling",
    "texturing",
    "rigging",
    "animation",
    "graphic_design",
    "illustration",
    "motion_graphics",
    "concept_art",
)


class GalleryLike(db.Model):
    """One row per (post, username); likes are added and removed row by row."""
    __tablename__ = "gallery_likes"
    __table_args__ = (
        db.UniqueConstraint("post_id", "username", name="uq_gallery_likes_post_user"),
    )

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("gallery_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    username = db.Column(db.String(80), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)


class GalleryPost(db.Model, TimestampMixin):
    __tablename__ = "gallery_posts"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    user = db.Column(db.String(80), nullable=False, index=True)  # owner username
    media = db.Column(db.Text)
    thumbnail_media = db.Column(db.Text)
    community = db.Column(db.String(120), nullable=False, index=True)
    post_date_time = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)
    views = db.Column(db.Integer, default=0, nullable=False)
    downloads = db.Column(db.Integer, default=0, nullable=False)
    media_size = db.Column(db.String(64), default="")  # "48576000 bytes"
    tags = db.Column(db.JSON, default=list)
    link = db.Column(db.String(500), default="")

    like_rows = db.relationship("GalleryLike", cascade="all, delete-orphan", order_by="GalleryLike.id")

    def to_dict(self):
        d = {
            "_id": str(self.id),
            "title": self.title,
            "description": self.description,
            "user": self.user,
            "media": self.media,
            "community": self.community,
            "postDateTime": isoformat(self.post_date_time),
            "views": self.views or 0,
            "downloads": self.downloads or 0,
            "likes": [like.username for like in self.like_rows],
            "mediaSize": self.media_size or "",
            "tags": list(self.tags or []),
            "link": self.link or "",
        }
        if self.thumbnail_media:
            d["thumbnailMedia"] = self.thumbnail_media
        return d

    def __repr__(self) -> str:
        return f"<GalleryPost id={self.id} title={self.title!r} user={self.user!r}>"
