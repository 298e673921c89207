from flask_wtf.file import FileField, FileRequired
from wtforms import StringField, PasswordField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional
from ...utils.forms import APIForm, as_text


class SignupForm(APIForm):
    username = StringField("Username", filters=[as_text], validators=[DataRequired(message="Username is required"), Length(max=80)])
    password = PasswordField("Password", validators=[DataRequired(message="Password is required")])
    biography = TextAreaField("Biography", validators=[Optional()])


class LoginForm(APIForm):
    username = StringField("Username", validators=[DataRequired(message="Username is required")])
    password = PasswordField("Password", validators=[DataRequired(message="Password is required")])


class UploadForm(APIForm):
    file = FileField("File", validators=[FileRequired(message="File missing")])
    username = StringField("Username", validators=[DataRequired(message="Username missing")])


class PortfolioUploadForm(APIForm):
    file = FileField("Model")
    username = StringField("Username", validators=[DataRequired(message="Username missing")])
    thumbnail = StringField("Thumbnail")
    mediaUrl = StringField("Media URL")


class TestimonialForm(APIForm):
    profileUsername = StringField(validators=[DataRequired(message="Missing required fields")])
    fromUsername = StringField(validators=[DataRequired(message="Missing required fields")])
    content = TextAreaField(filters=[as_text], validators=[DataRequired(message="Missing required fields"), Length(max=2000)])
