from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import StringField
from wtforms.validators import InputRequired


class JSONForm(FlaskForm):
    """FlaskForm fed from a JSON object instead of form data"""

    class Meta:
        csrf = False

    @classmethod
    def from_json(cls, payload):
        return cls(formdata=MultiDict(payload))


# ==================== FORM BẮT ĐẦU ====================
class StartForm(JSONForm):
    """POST /api/start. Empty, null or missing values are rejected."""
    name = StringField('Nome', validators=[InputRequired()])
    email = StringField('Email', validators=[InputRequired()])
