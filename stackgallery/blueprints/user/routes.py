from flask import current_app, jsonify, request, redirect, abort
from flask_login import login_user, logout_user, login_required, current_user
from . import bp
from .forms import SignupForm, LoginForm, UploadForm, PortfolioUploadForm, TestimonialForm
from ...services import users as user_service
from ...services import testimonials as testimonial_service
from ...services.storage import to_data_uri
from ...services.downloads import file_extension
from ...utils.decorators import acting_username
from ...utils.forms import form_error


def _json():
    return request.get_json(silent=True) or {}


@bp.post("/signup")
def signup():
    form = SignupForm()
    if not form.validate_on_submit():
        return form_error(form)
    user = user_service.create_user(form.username.data, form.password.data, form.biography.data)
    return jsonify(user.to_dict())


@bp.post("/login")
def login():
    form = LoginForm()
    if not form.validate_on_submit():
        return form_error(form)
    user = user_service.authenticate(form.username.data, form.password.data)
    login_user(user)
    return jsonify(user.to_dict())


@bp.post("/logout")
def logout():
    logout_user()
    return redirect(current_app.config["FRONTEND_URL"])


@bp.patch("/resetPassword")
@login_required
def reset_password():
    data = _json()
    username = acting_username(data.get("username"))
    user = user_service.reset_password(username, data.get("password"))
    return jsonify(user.to_dict())


@bp.get("/getUser/<username>")
def get_user(username):
    return jsonify(user_service.get_user(username).to_dict())


@bp.get("/getUsers")
def get_users():
    return jsonify([u.to_dict() for u in user_service.list_users()])


@bp.delete("/deleteUser/<username>")
@login_required
def delete_user(username):
    acting_username(username)
    deleted = user_service.delete_user(username)
    logout_user()
    return jsonify(deleted)


# -------- profile edits --------

def _update(field):
    data = _json()
    if field not in data:
        abort(400, description=f"{field} is required")
    username = acting_username(data.get("username"))
    user = user_service.update_user(username, **{field: data[field]})
    return jsonify(user.to_dict())


@bp.patch("/updateBiography")
@login_required
def update_biography():
    return _update("biography")


@bp.patch("/updateSkills")
@login_required
def update_skills():
    return _update("skills")


@bp.patch("/updateCustomFont")
@login_required
def update_custom_font():
    return _update("customFont")


@bp.patch("/updateExternalLinks")
@login_required
def update_external_links():
    data = _json()
    username = acting_username(data.get("username"))
    user = user_service.update_external_links(username, data.get("externalLinks"))
    return jsonify(user.to_dict())


@bp.patch("/updateCustomColors")
@login_required
def update_custom_colors():
    data = _json()
    username = acting_username(data.get("username"))
    user = user_service.update_custom_colors(username, data.get("customColors"))
    return jsonify(user.to_dict())


@bp.patch("/updatePortfolioMedia")
@login_required
def update_portfolio_media():
    data = _json()
    username = acting_username(data.get("username"))
    user = user_service.update_user(
        username,
        portfolioModels=data.get("portfolioModels") or [],
        portfolioThumbnails=data.get("portfolioThumbnails") or [],
    )
    return jsonify(user.to_dict())


@bp.delete("/deletePortfolioItems")
@login_required
def delete_portfolio_items():
    data = _json()
    username = acting_username(data.get("username"))
    user = user_service.delete_portfolio_items(username, data.get("indices"))
    return jsonify(user.to_dict())


# -------- uploads (stored inline as data URIs) --------

def _upload(field):
    form = UploadForm()
    if not form.validate_on_submit():
        return form_error(form)
    username = acting_username(form.username.data)
    user = user_service.update_user(username, **{field: to_data_uri(form.file.data)})
    return jsonify(user.to_dict())


@bp.post("/uploadProfilePicture")
@login_required
def upload_profile_picture():
    return _upload("profilePicture")


@bp.post("/uploadBannerImage")
@login_required
def upload_banner_image():
    return _upload("bannerImage")


@bp.post("/uploadResume")
@login_required
def upload_resume():
    return _upload("resumeFile")


@bp.post("/uploadPortfolioModel")
@login_required
def upload_portfolio_model():
    """Portfolio entry from an uploaded file or an embeddable URL."""
    form = PortfolioUploadForm()
    if not form.validate_on_submit():
        return form_error(form)
    upload = form.file.data
    media_url = form.mediaUrl.data
    thumbnail = form.thumbnail.data or ""
    if not upload and not media_url:
        return jsonify({"error": "Either a file or media URL is required"}), 400
    username = acting_username(form.username.data)

    if media_url:
        media = media_url
    else:
        if file_extension(upload.filename) == "glb" and not thumbnail:
            return jsonify({"error": "Thumbnail required for 3D models"}), 400
        media = to_data_uri(upload)

    user = user_service.add_portfolio_item(username, media, thumbnail)
    return jsonify(user.to_dict())


# -------- testimonials --------

@bp.post("/testimonial")
@login_required
def create_or_update_testimonial():
    form = TestimonialForm()
    if not form.validate_on_submit():
        return form_error(form)
    author = acting_username(form.fromUsername.data)
    user = testimonial_service.upsert_testimonial(form.profileUsername.data, author, form.content.data)
    return jsonify(user.to_dict())


@bp.delete("/testimonial/<profile_username>")
@login_required
def delete_testimonial(profile_username):
    data = _json()
    if not data.get("fromUsername"):
        return jsonify({"error": "fromUsername required"}), 400
    author = acting_username(data.get("fromUsername"))
    user = testimonial_service.delete_testimonial(profile_username, author)
    return jsonify(user.to_dict())


@bp.patch("/testimonial/approve")
@login_required
def update_testimonial_approval():
    data = _json()
    approved = data.get("approved")
    if not data.get("username") or not data.get("testimonialId") or not isinstance(approved, bool):
        return jsonify({"error": "Missing required fields"}), 400
    owner = acting_username(data.get("username"))
    user = testimonial_service.set_testimonial_approval(owner, data["testimonialId"], approved)
    return jsonify(user.to_dict())


@bp.get("/me")
@login_required
def me():
    return jsonify(current_user.to_dict())
