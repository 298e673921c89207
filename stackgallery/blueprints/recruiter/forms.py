from wtforms import StringField, PasswordField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional
from ...utils.forms import APIForm, as_text


class RecruiterSignupForm(APIForm):
    username = StringField("Username", filters=[as_text], validators=[DataRequired(message="Username is required"), Length(max=80)])
    password = PasswordField("Password", validators=[DataRequired(message="Password is required")])
    company = StringField("Company", filters=[as_text], validators=[DataRequired(message="Company is required for recruiters"), Length(max=200)])


class JobForm(APIForm):
    title = StringField("Title", filters=[as_text], validators=[DataRequired(message="Title is required"), Length(max=200)])
    description = TextAreaField("Description", validators=[Optional()])
