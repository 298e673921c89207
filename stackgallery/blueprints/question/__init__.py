from flask import Blueprint

bp = Blueprint("question", __name__)

from . import routes  # noqa: E402,F401
