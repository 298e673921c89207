from flask import jsonify, request
from flask_login import login_required, current_user
from . import bp
from ...services import questions as question_service
from ...utils.decorators import acting_username


@bp.post("/addQuestion")
@login_required
def add_question():
    data = request.get_json(silent=True) or {}
    asker = acting_username(data.get("askedBy"))
    q = question_service.add_question(data.get("title"), data.get("text"), asker, data.get("tags"))
    return jsonify(q.to_dict())


@bp.get("/getQuestion")
def get_questions():
    questions = question_service.list_questions(search=request.args.get("search"))
    return jsonify([q.to_dict() for q in questions])


@bp.get("/getQuestionById/<int:qid>")
def get_question_by_id(qid):
    viewer = current_user.username if current_user.is_authenticated else None
    return jsonify(question_service.get_question(qid, viewer=viewer).to_dict())
