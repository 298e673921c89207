from flask import abort, current_app
from sqlalchemy import not_
from ..extensions import db
from ..models.comment import Comment
from ..models.question import Question, Answer
from ..models.base import utcnow
from ..utils.db import commit, as_id
from .downloads import download_confirmation, file_extension


def get_comment(comment_id) -> Comment:
    comment = db.session.get(Comment, as_id(comment_id, "Comment"))
    if comment is None:
        abort(404, description="Comment not found")
    return comment


def add_comment(target_id, target_type: str, payload: dict) -> Comment:
    """Attach a new comment to a question or an answer."""
    if not isinstance(payload, dict) or not payload.get("text") or not payload.get("commentBy"):
        abort(400, description="Invalid comment")
    if target_type == "question":
        target = db.session.get(Question, as_id(target_id, "Question"))
    elif target_type == "answer":
        target = db.session.get(Answer, as_id(target_id, "Answer"))
    else:
        abort(400, description="type must be 'question' or 'answer'")
    if target is None:
        abort(404, description=f"{target_type.capitalize()} not found")

    media_path = payload.get("mediaPath") or None
    comment = Comment(
        text=payload["text"],
        comment_by=payload["commentBy"],
        comment_date_time=utcnow(),
        media_path=media_path,
        media_url=payload.get("mediaUrl") or None,
        media_size=payload.get("mediaSize") or None,
        # only media-bearing comments carry a download flag
        permit_download=bool(payload.get("permitDownload", False)) if media_path else None,
    )
    target.comments.append(comment)
    commit("Error when adding comment")
    return comment


def toggle_comment_media_permission(comment_id, username: str) -> bool:
    """Flip ``permit_download``; only the comment's author may do this."""
    comment = get_comment(comment_id)
    if comment.comment_by != username:
        abort(403, description="Only the comment author can change download permissions")
    if comment.media_path is None or comment.permit_download is None:
        abort(400, description="No media found to change permissions for")

    # one UPDATE; the database does the flip
    Comment.query.filter_by(id=comment.id).update(
        {Comment.permit_download: not_(Comment.permit_download)},
        synchronize_session=False,
    )
    commit("Error when toggling comment media download permissions")
    value = bool(get_comment(comment_id).permit_download)
    current_app.logger.info('comment %s downloads %s by %s', comment_id,
                            'enabled' if value else 'disabled', username)
    return value


def get_comment_media(comment_id) -> dict:
    comment = get_comment(comment_id)
    if not comment.media_path:
        abort(400, description="No media to download")
    if not comment.permit_download:
        abort(403, description="Downloads are not permitted")
    extension = file_extension(comment.media_path)
    size = comment.media_size or "of unknown size"
    return {
        "mediaPath": comment.media_path,
        "mediaSize": comment.media_size,
        "extension": extension,
        "confirmMessage": download_confirmation(size, extension),
    }
