from flask import jsonify
from flask_login import current_user
from . import bp
from .forms import RecruiterSignupForm, JobForm
from ...services import users as user_service
from ...utils.decorators import recruiter_required
from ...utils.forms import form_error


@bp.post("/signup")
def signup():
    form = RecruiterSignupForm()
    if not form.validate_on_submit():
        return form_error(form)
    recruiter = user_service.create_recruiter(form.username.data, form.password.data, form.company.data)
    return jsonify(recruiter.to_dict())


@bp.get("/getRecruiters")
def get_recruiters():
    return jsonify([r.to_dict() for r in user_service.list_recruiters()])


@bp.post("/jobs")
@recruiter_required
def create_job():
    form = JobForm()
    if not form.validate_on_submit():
        return form_error(form)
    # current_user is a proxy; the service needs the mapped Recruiter
    job = user_service.add_job_posting(current_user._get_current_object(), form.title.data, form.description.data)
    return jsonify(job.to_dict())


@bp.get("/<username>/jobs")
def list_jobs(username):
    return jsonify([j.to_dict() for j in user_service.list_job_postings(username)])
