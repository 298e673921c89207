from flask import abort
from ..extensions import db
from ..models.testimonial import Testimonial
from ..models.base import utcnow
from ..utils.db import commit, as_id
from .users import get_user


def upsert_testimonial(profile_username, from_username, content):
    """Create or replace ``from_username``'s testimonial on a profile.

    A rewritten testimonial goes back to unapproved.
    """
    if not profile_username or not from_username or not content or not content.strip():
        abort(400, description="Missing required fields")
    profile_user = get_user(profile_username)
    author = get_user(from_username)
    if profile_user.id == author.id:
        abort(400, description="Cannot write testimonial for yourself")

    t = Testimonial.query.filter_by(profile_user_id=profile_user.id, from_username=from_username).first()
    if t is None:
        t = Testimonial(profile_user_id=profile_user.id, from_username=from_username)
        db.session.add(t)
    t.from_user_id = author.id
    t.from_profile_picture = author.profile_picture or ""
    t.content = content.strip()
    t.created_at = utcnow()
    t.approved = False
    commit("Error creating/updating testimonial")
    return profile_user


def delete_testimonial(profile_username, from_username):
    if not from_username:
        abort(400, description="fromUsername required")
    profile_user = get_user(profile_username)
    Testimonial.query.filter_by(profile_user_id=profile_user.id, from_username=from_username).delete()
    commit("Error deleting testimonial")
    return profile_user


def set_testimonial_approval(username, testimonial_id, approved: bool):
    """Approve keeps the testimonial and flags it; reject removes it."""
    user = get_user(username)
    t = Testimonial.query.filter_by(id=as_id(testimonial_id, "Testimonial"), profile_user_id=user.id).first()
    if t is None:
        abort(404, description="Testimonial not found")
    if approved:
        t.approved = True
    else:
        db.session.delete(t)
    commit("Error updating testimonial approval")
    return user
