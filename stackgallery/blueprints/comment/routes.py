from flask import jsonify, request, abort
from flask_login import login_required
from . import bp
from ...services import comments as comment_service
from ...utils.decorators import acting_username


@bp.post("/addComment")
@login_required
def add_comment():
    data = request.get_json(silent=True) or {}
    comment = data.get("comment")
    if not isinstance(comment, dict):
        abort(400, description="Invalid comment")
    acting_username(comment.get("commentBy"))
    saved = comment_service.add_comment(data.get("id"), data.get("type"), comment)
    return jsonify(saved.to_dict())


@bp.get("/getCommentMedia/<int:cid>")
def get_comment_media(cid):
    return jsonify(comment_service.get_comment_media(cid))


@bp.patch("/toggleMediaPermission")
@login_required
def toggle_media_permission():
    data = request.get_json(silent=True) or {}
    if not data.get("cid"):
        abort(400, description="cid is required")
    username = acting_username(data.get("username"))
    value = comment_service.toggle_comment_media_permission(data["cid"], username)
    return jsonify({"permitDownload": value})
