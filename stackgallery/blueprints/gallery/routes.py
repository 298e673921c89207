from flask import jsonify, request
from flask_login import login_required
from . import bp
from .forms import GalleryPostForm
from ...models.gallery_post import GALLERY_TAGS
from ...services import gallery as gallery_service
from ...utils.decorators import acting_username
from ...utils.forms import form_error


@bp.get("/tags")
def gallery_tags():
    return jsonify(list(GALLERY_TAGS))


@bp.get("/getAllGalleryPosts")
def get_all_gallery_posts():
    posts = gallery_service.get_all_gallery_posts(tag=request.args.get("tag"))
    return jsonify([p.to_dict() for p in posts])


@bp.get("/getGalleryPost/<int:post_id>")
def get_gallery_post(post_id):
    return jsonify(gallery_service.get_gallery_post(post_id).to_dict())


@bp.post("/create")
@login_required
def create_gallery_post():
    form = GalleryPostForm()
    if not form.validate_on_submit():
        return form_error(form)
    owner = acting_username(form.user.data)
    data = request.get_json(silent=True) or {}
    # postedAt / postDateTime from the client are ignored; the server stamps the time
    post = gallery_service.create_gallery_post({
        "title": form.title.data,
        "description": form.description.data,
        "user": owner,
        "community": form.community.data,
        "media": form.media.data or None,
        "thumbnailMedia": form.thumbnailMedia.data or None,
        "mediaSize": form.mediaSize.data or "",
        "link": form.link.data or "",
        "tags": data.get("tags") or request.form.getlist("tags"),
    })
    return jsonify(post.to_dict())


@bp.delete("/delete/<int:post_id>")
@login_required
def delete_gallery_post(post_id):
    username = acting_username(request.args.get("username"))
    return jsonify(gallery_service.delete_gallery_post(post_id, username))


@bp.post("/incrementViews/<int:post_id>/<username>")
def increment_views(post_id, username):
    return jsonify(gallery_service.increment_views(post_id).to_dict())


@bp.post("/incrementDownloads/<int:post_id>/<username>")
def increment_downloads(post_id, username):
    return jsonify(gallery_service.increment_downloads(post_id).to_dict())


@bp.post("/toggleLikes/<int:post_id>/<username>")
@login_required
def toggle_likes(post_id, username):
    username = acting_username(username)
    return jsonify(gallery_service.toggle_like(post_id, username).to_dict())
