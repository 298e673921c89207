from functools import wraps
from flask import abort
from flask_login import current_user


def recruiter_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user.is_authenticated:
            abort(401, description="Login required")
        if getattr(current_user, "role", None) != "Recruiter":
            abort(403, description="Only recruiters can do this")
        return view(*args, **kwargs)
    return wrapped


def acting_username(claimed=None):
    """Username the current request acts as.

    A username named in the request body or path has to be the logged-in
    user's own; the client hiding a control is not enough.
    """
    if not current_user.is_authenticated:
        abort(401, description="Login required")
    if claimed and claimed != current_user.username:
        abort(403, description="Cannot act on behalf of another user")
    return current_user.username
