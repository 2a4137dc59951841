from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import StringField
from wtforms.validators import Length, Optional

VOTE_MAX_LENGTH = 32
TIMESTAMP_MAX_LENGTH = 64


def text_or_none(value):
    # Всё, что не непустая строка, сохраняем как null
    if isinstance(value, str) and value:
        return value
    return None


class VoteForm(FlaskForm):
    """Схема тела POST /api/vote.

    Оба поля необязательны: отсутствующие и нестроковые значения
    превращаются в None, слишком длинные строки отклоняются.
    """

    class Meta:
        csrf = False

    vote = StringField('Vote', validators=[Optional(), Length(max=VOTE_MAX_LENGTH)],
                       filters=[text_or_none])
    timestamp = StringField('Timestamp', validators=[Optional(), Length(max=TIMESTAMP_MAX_LENGTH)],
                            filters=[text_or_none])

    @classmethod
    def from_json(cls, payload):
        if not isinstance(payload, dict):
            payload = {}
        # Каждое значение кладём целиком, иначе список распадётся на несколько значений
        return cls(formdata=MultiDict({key: [value] for key, value in payload.items()}))
