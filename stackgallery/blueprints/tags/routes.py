from flask import jsonify
from . import bp
from ...services import questions as question_service


@bp.get("/getTagByName/<name>")
def get_tag_by_name(name):
    return jsonify(question_service.get_tag(name).to_dict())


@bp.get("/getTagsWithQuestionNumber")
def get_tags_with_question_number():
    return jsonify(question_service.tags_with_question_counts())
