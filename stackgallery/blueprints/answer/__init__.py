from flask import Blueprint

bp = Blueprint("answer", __name__)

from . import routes  # noqa: E402,F401
