from marshmallow import fields, ValidationError
from medcycle.utils.date_utils import parse_iso_date


class FlexibleDate(fields.Field):
    """
    Date field accepting either YYYY-MM-DD or a full ISO timestamp.

    Browsers tend to send ``new Date()`` serialized as "2025-01-15T08:30:00.000Z";
    only the calendar date is kept.
    """

    default_error_messages = {
        'invalid': 'Not a valid date. Use YYYY-MM-DD or an ISO timestamp.'
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.isoformat()

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return parse_iso_date(value)
        except (TypeError, ValueError) as error:
            raise self.make_error('invalid') from error


def strip_strings(data):
    """Strip surrounding whitespace from every string value."""
    for key, value in data.items():
        if isinstance(value, str):
            data[key] = value.strip()
    return data


def require_non_blank(value):
    if not value or not value.strip():
        raise ValidationError('Field cannot be blank.')
