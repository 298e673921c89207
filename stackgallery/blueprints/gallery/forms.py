from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional
from ...utils.forms import APIForm, as_text


class GalleryPostForm(APIForm):
    title = StringField("Title", filters=[as_text],
                        validators=[DataRequired(message="title is required"), Length(max=200)])
    description = TextAreaField("Description", filters=[as_text],
                                validators=[DataRequired(message="description is required")])
    user = StringField("User", filters=[as_text], validators=[DataRequired(message="user is required")])
    community = StringField("Community", filters=[as_text],
                            validators=[DataRequired(message="community is required")])
    media = StringField("Media", filters=[as_text], validators=[Optional()])
    thumbnailMedia = StringField("Thumbnail", filters=[as_text], validators=[Optional()])
    mediaSize = StringField("Media size", filters=[as_text], validators=[Optional(), Length(max=64)])
    link = StringField("Link", filters=[as_text], validators=[Optional(), Length(max=500)])
