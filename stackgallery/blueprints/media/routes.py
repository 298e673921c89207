from flask import jsonify
from flask_login import login_required
from flask_wtf.file import FileField, FileRequired
from wtforms import StringField
from wtforms.validators import DataRequired
from . import bp
from ...services.media import add_media
from ...utils.decorators import acting_username
from ...utils.forms import APIForm, form_error


class MediaForm(APIForm):
    file = FileField("File", validators=[FileRequired(message="File missing")])
    user = StringField("User", validators=[DataRequired(message="User missing")])


@bp.post("/create")
@login_required
def create_media():
    form = MediaForm()
    if not form.validate_on_submit():
        return form_error(form)
    username = acting_username(form.user.data)
    media = add_media(form.file.data, username)
    return jsonify(media.to_dict())
