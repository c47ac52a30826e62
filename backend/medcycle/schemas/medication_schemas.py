from marshmallow import Schema, fields, validate, post_load, EXCLUDE
from medcycle.schemas.fields import FlexibleDate, strip_strings, require_non_blank


class MedicationSchema(Schema):
    """
    Input schema for creating and (with partial=True) updating medications.

    frequency is stored as given; tags the schedule does not recognise are
    simply always due.
    """
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=require_non_blank)
    brand = fields.Str(allow_none=True)
    strength = fields.Str(required=True, validate=require_non_blank)
    form = fields.Str(allow_none=True)
    dosage = fields.Str(required=True, validate=require_non_blank)
    frequency = fields.Str(required=True, validate=require_non_blank)
    time_of_day = fields.Str(allow_none=True)
    purpose = fields.Str(allow_none=True)
    category = fields.Str(allow_none=True)

    bottle_size = fields.Int(allow_none=True, validate=validate.Range(min=1))
    purchase_date = FlexibleDate(allow_none=True)
    days_supply = fields.Int(allow_none=True, validate=validate.Range(min=1))

    doctor = fields.Str(allow_none=True)
    cost = fields.Str(allow_none=True)
    pharmacy = fields.Str(allow_none=True)
    side_effects = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    image_url = fields.Str(allow_none=True)
    is_active = fields.Bool()

    @post_load
    def clean_data(self, data, **kwargs):
        strip_strings(data)
        # Empty optional strings are stored as NULL
        for key, value in data.items():
            if value == '' and key not in ('name', 'strength', 'dosage', 'frequency'):
                data[key] = None
        return data


class MedicationLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    medication_id = fields.Int(required=True)
    date = FlexibleDate(required=True)
    taken = fields.Bool()
    skipped = fields.Bool()
    skip_reason = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)

    @post_load
    def clean_data(self, data, **kwargs):
        return strip_strings(data)
