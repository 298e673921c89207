from flask import jsonify, request
from flask_login import login_required
from . import bp
from ...services import questions as question_service
from ...utils.decorators import acting_username


@bp.post("/addAnswer")
@login_required
def add_answer():
    data = request.get_json(silent=True) or {}
    ans = data.get("ans") or {}
    author = acting_username(ans.get("ansBy"))
    answer = question_service.add_answer(data.get("qid"), ans.get("text"), author)
    return jsonify(answer.to_dict())
