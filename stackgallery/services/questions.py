from flask import abort
from sqlalchemy import or_
from ..extensions import db
from ..models.question import Question, Answer, Tag, question_tags
from ..models.base import utcnow
from ..utils.db import commit, as_id


def _tag(name, description=""):
    tag = Tag.query.filter_by(name=name).first()
    if tag is None:
        tag = Tag(name=name, description=description or "")
        db.session.add(tag)
    return tag


def add_question(title, text, asked_by, tags) -> Question:
    if not title or not text or not asked_by:
        abort(400, description="Invalid question")
    if not tags:
        abort(400, description="A question needs at least one tag")
    q = Question(title=title, text=text, asked_by=asked_by, ask_date_time=utcnow(), views=[])
    for t in tags:
        if isinstance(t, dict):
            name, description = t.get("name"), t.get("description")
        else:
            name, description = t, ""
        if not name:
            abort(400, description="Tag name is required")
        tag = _tag(str(name).strip().lower(), description)
        if tag not in q.tags:
            q.tags.append(tag)
    db.session.add(q)
    commit("Error when saving question")
    return q


def list_questions(search=None):
    query = Question.query
    if search:
        like = f"%{search}%"
        query = query.filter(or_(Question.title.ilike(like), Question.text.ilike(like)))
    return query.order_by(Question.ask_date_time.desc(), Question.id.desc()).all()


def get_question(qid, viewer=None) -> Question:
    q = db.session.get(Question, as_id(qid, "Question"))
    if q is None:
        abort(404, description="Question not found")
    if viewer and viewer not in (q.views or []):
        q.views = list(q.views or []) + [viewer]
        commit("Error when fetching question")
    return q


def add_answer(qid, text, ans_by) -> Answer:
    if not text or not ans_by:
        abort(400, description="Invalid answer")
    q = db.session.get(Question, as_id(qid, "Question"))
    if q is None:
        abort(404, description="Question not found")
    answer = Answer(text=text, ans_by=ans_by, ans_date_time=utcnow())
    q.answers.append(answer)
    commit("Error when adding answer")
    return answer


def get_tag(name) -> Tag:
    tag = Tag.query.filter_by(name=name).first()
    if tag is None:
        abort(404, description=f"Tag {name} not found")
    return tag


def tags_with_question_counts():
    rows = (
        db.session.query(Tag.name, db.func.count(question_tags.c.question_id))
        .outerjoin(question_tags, Tag.id == question_tags.c.tag_id)
        .group_by(Tag.id, Tag.name)
        .order_by(Tag.name)
        .all()
    )
    return [{"name": name, "qcnt": int(cnt)} for name, cnt in rows]
