from marshmallow import Schema, fields, validate, validates_schema, ValidationError, EXCLUDE
from medcycle.schemas.fields import FlexibleDate
from medcycle.utils.cycle_calculations import DEFAULT_CYCLE_LENGTH


class CycleTrackingSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    period_start_date = FlexibleDate(required=True)
    period_end_date = FlexibleDate(allow_none=True)
    cycle_length = fields.Int(
        load_default=DEFAULT_CYCLE_LENGTH,
        validate=validate.Range(min=1, max=120, error="Cycle length must be between 1 and 120 days")
    )
    notes = fields.Str(allow_none=True)

    @validates_schema
    def validate_period_dates(self, data, **kwargs):
        start = data.get('period_start_date')
        end = data.get('period_end_date')
        if start and end and end < start:
            raise ValidationError(
                'Period end date cannot be before period start date',
                field_name='period_end_date'
            )
