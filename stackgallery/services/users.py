from flask import abort, current_app
from ..extensions import db
from ..models.user import User, Recruiter, EXTERNAL_LINK_KEYS, CUSTOM_COLOR_KEYS
from ..models.job import Job
from ..utils.db import commit

# request field -> model attribute for plain profile updates
PROFILE_FIELDS = {
    "biography": "biography",
    "skills": "skills",
    "customFont": "custom_font",
    "profilePicture": "profile_picture",
    "bannerImage": "banner_image",
    "resumeFile": "resume_file",
    "portfolioModels": "portfolio_models",
    "portfolioThumbnails": "portfolio_thumbnails",
}


def get_user(username: str) -> User:
    user = User.query.filter_by(username=username).first()
    if user is None:
        abort(404, description="User not found")
    return user


def list_users():
    return User.query.order_by(User.id).all()


def list_recruiters():
    # discriminator filter; the polymorphic query hands back Recruiter objects
    return User.query.filter(User.role == "Recruiter").order_by(User.id).all()


def _new_account(cls, username, password, **extra):
    if not username or not password:
        abort(400, description="Username and password are required")
    if User.query.filter_by(username=username).first() is not None:
        abort(400, description="Username already exists")
    try:
        user = cls(username=username, **extra)
    except ValueError as e:
        abort(400, description=str(e))
    user.set_password(password)
    db.session.add(user)
    commit("Error when saving user")
    current_app.logger.info('created %s %s', user.role, user.username)
    return user


def create_user(username, password, biography=""):
    return _new_account(User, username, password, biography=biography or "")


def create_recruiter(username, password, company):
    if not company or not str(company).strip():
        abort(400, description="Company is required for recruiters")
    return _new_account(Recruiter, username, password, company=company)


def authenticate(username, password) -> User:
    user = User.query.filter_by(username=username).first()
    if user is None or not user.check_password(password or ""):
        abort(401, description="Invalid username or password")
    return user


def reset_password(username, password) -> User:
    if not password:
        abort(400, description="Password is required")
    user = get_user(username)
    user.set_password(password)
    commit("Error when updating user password")
    return user


def delete_user(username) -> dict:
    user = get_user(username)
    snapshot = user.to_dict()
    db.session.delete(user)
    commit("Error when deleting user")
    current_app.logger.info('deleted user %s', username)
    return snapshot


def update_user(username, **fields) -> User:
    """Apply camelCase profile fields. Unknown keys are a client error."""
    user = get_user(username)
    for key, value in fields.items():
        attr = PROFILE_FIELDS.get(key)
        if attr is None:
            abort(400, description=f"Unknown profile field: {key}")
        if attr in ("skills", "portfolio_models", "portfolio_thumbnails"):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                abort(400, description=f"{key} must be a list of strings")
            value = list(value)
        elif value is not None and not isinstance(value, str):
            abort(400, description=f"{key} must be a string")
        setattr(user, attr, value if value is not None else "")
    commit("Error when updating user")
    return user


def _restricted(keys, value, label):
    if not isinstance(value, dict):
        abort(400, description=f"{label} must be an object")
    unknown = set(value) - set(keys)
    if unknown:
        abort(400, description=f"Unknown {label} keys: {', '.join(sorted(unknown))}")
    return {k: str(value.get(k) or "") for k in keys}


def update_external_links(username, links) -> User:
    user = get_user(username)
    user.external_links = _restricted(EXTERNAL_LINK_KEYS, links, "externalLinks")
    commit("Error when updating external links")
    return user


def update_custom_colors(username, colors) -> User:
    user = get_user(username)
    user.custom_colors = _restricted(CUSTOM_COLOR_KEYS, colors, "customColors")
    commit("Error when updating custom colors")
    return user


def add_portfolio_item(username, media: str, thumbnail: str = "") -> User:
    user = get_user(username)
    models = list(user.portfolio_models or [])
    thumbnails = list(user.portfolio_thumbnails or [])
    # keep thumbnails index-aligned with models
    while len(thumbnails) < len(models):
        thumbnails.append("")
    user.portfolio_models = models + [media]
    user.portfolio_thumbnails = thumbnails[:len(models)] + [thumbnail or ""]
    commit("Error uploading portfolio model")
    return user


def delete_portfolio_items(username, indices) -> User:
    if not isinstance(indices, list) or not all(isinstance(i, int) for i in indices):
        abort(400, description="indices must be a list of integers")
    user = get_user(username)
    drop = set(indices)
    user.portfolio_models = [m for i, m in enumerate(user.portfolio_models or []) if i not in drop]
    user.portfolio_thumbnails = [t for i, t in enumerate(user.portfolio_thumbnails or []) if i not in drop]
    commit("Error deleting portfolio items")
    return user


def add_job_posting(recruiter: Recruiter, title, description="") -> Job:
    if not isinstance(recruiter, Recruiter):
        abort(403, description="Only recruiters can post jobs")
    if not title:
        abort(400, description="Title is required")
    job = Job(recruiter=recruiter, title=title, description=description or "")
    db.session.add(job)
    commit("Error when saving job posting")
    return job


def list_job_postings(username):
    user = get_user(username)
    if not isinstance(user, Recruiter):
        abort(404, description="Recruiter not found")
    return list(user.job_postings)
