from flask import abort, current_app
from ..extensions import db
from ..models.gallery_post import GalleryPost, GalleryLike, GALLERY_TAGS
from ..models.base import utcnow
from ..utils.db import commit, as_id
from . import storage
from .downloads import file_extension, parse_size_bytes

REQUIRED_FIELDS = ("title", "description", "user", "community")


def get_all_gallery_posts(tag=None):
    posts = GalleryPost.query.order_by(GalleryPost.post_date_time.asc(), GalleryPost.id.asc()).all()
    if tag:
        # tags live in a JSON column; filter here rather than per-dialect JSON SQL
        posts = [p for p in posts if tag in (p.tags or [])]
    return posts


def get_gallery_post(post_id) -> GalleryPost:
    post = db.session.get(GalleryPost, as_id(post_id, "Gallery post"))
    if post is None:
        abort(404, description="Gallery post not found")
    return post


def _check_glb_size(media, media_size):
    if file_extension(media) != "glb" or not media_size:
        return
    size = parse_size_bytes(media_size)
    if size is None:
        abort(400, description=f"Unrecognised mediaSize: {media_size}")
    limit = current_app.config.get("MAX_GLB_BYTES", 50 * 1024 * 1024)
    if size > limit:
        abort(400, description=f"File size exceeds maximum allowed ({limit // (1024 * 1024)}MB for .glb files)")


def create_gallery_post(fields: dict) -> GalleryPost:
    """Persist a gallery post. ``postDateTime`` is always set here."""
    missing = [f for f in REQUIRED_FIELDS if not fields.get(f)]
    if missing:
        abort(400, description=f"Missing required fields: {', '.join(missing)}")

    tags = fields.get("tags") or []
    if not isinstance(tags, list):
        abort(400, description="tags must be a list")
    unknown = [t for t in tags if t not in GALLERY_TAGS]
    if unknown:
        abort(400, description=f"Unknown gallery tags: {', '.join(map(str, unknown))}")

    media = fields.get("media")
    media_size = fields.get("mediaSize") or ""
    _check_glb_size(media, media_size)

    post = GalleryPost(
        title=fields["title"],
        description=fields["description"],
        user=fields["user"],
        media=media,
        thumbnail_media=fields.get("thumbnailMedia"),
        community=fields["community"],
        post_date_time=utcnow(),
        views=0,
        downloads=0,
        media_size=media_size,
        tags=list(tags),
        link=fields.get("link") or "",
    )
    db.session.add(post)
    commit("Error creating a gallery post")
    return post


def delete_gallery_post(post_id, username) -> dict:
    """Owner-only delete; stored media and thumbnail files go with it."""
    post = get_gallery_post(post_id)
    if post.user != username:
        abort(403, description="Only the owner can delete this gallery post")
    snapshot = post.to_dict()
    for location in (post.media, post.thumbnail_media):
        try:
            storage.delete_file(location)
        except Exception as e:
            current_app.logger.exception('failed to remove %s for gallery post %s', location, post_id)
            abort(500, description=f"Error deleting gallery post media: {e}")
    db.session.delete(post)
    commit("Error deleting gallery post")
    current_app.logger.info('gallery post %s deleted by %s', post_id, username)
    return snapshot


def _bump(post_id, column, context):
    post = get_gallery_post(post_id)
    GalleryPost.query.filter_by(id=post.id).update({column: column + 1}, synchronize_session=False)
    commit(context)
    return get_gallery_post(post_id)


def increment_views(post_id) -> GalleryPost:
    return _bump(post_id, GalleryPost.views, "Error incrementing gallery post views")


def increment_downloads(post_id) -> GalleryPost:
    return _bump(post_id, GalleryPost.downloads, "Error incrementing gallery post downloads")


def toggle_like(post_id, username) -> GalleryPost:
    post = get_gallery_post(post_id)
    removed = GalleryLike.query.filter_by(post_id=post.id, username=username).delete(synchronize_session=False)
    if not removed:
        db.session.add(GalleryLike(post_id=post.id, username=username))
    commit("Error toggling gallery post like")
    return get_gallery_post(post_id)
