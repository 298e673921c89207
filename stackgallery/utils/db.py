from flask import abort, current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ..extensions import db


def commit(context: str):
    """Commit the session, turning database failures into HTTP errors."""
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        current_app.logger.warning('%s: integrity error %s', context, e.orig)
        abort(400, description=f"{context}: conflicting or incomplete data")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception('%s failed', context)
        abort(500, description=f"{context}: {e}")


def as_id(value, label="Record"):
    """Primary keys arrive as strings or ints in JSON; anything else is a 404."""
    try:
        return int(value)
    except (TypeError, ValueError):
        abort(404, description=f"{label} not found")
