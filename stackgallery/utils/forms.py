from flask import jsonify
from flask_wtf import FlaskForm


class APIForm(FlaskForm):
    """FlaskForm fed from JSON or multipart bodies; no CSRF token on the API."""

    class Meta:
        csrf = False


def form_error(form):
    for errors in form.errors.values():
        if errors:
            return jsonify({"error": errors[0]}), 400
    return jsonify({"error": "Invalid request"}), 400


def as_text(value):
    """JSON bodies can carry numbers where a string field is expected."""
    if value is None or isinstance(value, str):
        return value
    return str(value)
