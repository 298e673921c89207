from flask import abort, current_app
from ..extensions import db
from ..models.media import Media
from ..utils.db import commit
from . import storage
from .downloads import format_size_bytes


def add_media(file_storage, username: str) -> Media:
    """Store an uploaded file under the uploader's folder and record it."""
    if file_storage is None or not file_storage.filename:
        abort(400, description="File missing")
    size = storage.file_size(file_storage)
    try:
        location = storage.save_file(file_storage, prefix=username)
    except ValueError as e:
        abort(400, description=str(e))
    current_app.logger.debug('stored %s (%s bytes) for %s', location, size, username)

    media = Media(filepath_location=location, file_size=format_size_bytes(size), user=username)
    db.session.add(media)
    commit("Error when creating media")
    return media
