from ..extensions import db
from .base import TimestampMixin


class Media(db.Model, TimestampMixin):
    __tablename__ = "media"
    id = db.Column(db.Integer, primary_key=True)
    filepath_location = db.Column(db.String(500), nullable=False)  # /userData/<user>/<file> or s3://...
    file_size = db.Column(db.String(64))
    user = db.Column(db.String(80), nullable=False, index=True)

    def to_dict(self):
        return {
            "_id": str(self.id),
            "filepathLocation": self.filepath_location,
            "fileSize": self.file_size,
            "user": self.user,
        }
