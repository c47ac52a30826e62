from marshmallow import Schema, fields, validate, post_load, EXCLUDE
from medcycle.models.journal_entry import MOODS
from medcycle.schemas.fields import FlexibleDate


class JournalEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = FlexibleDate(required=True)
    mood = fields.Str(
        allow_none=True,
        validate=validate.OneOf(MOODS, error="Mood must be one of: " + ", ".join(MOODS))
    )
    symptoms = fields.List(fields.Str(), load_default=list)
    notes = fields.Str(allow_none=True)
    cycle_day = fields.Int(allow_none=True, validate=validate.Range(min=1))

    @post_load
    def clean_data(self, data, **kwargs):
        if 'symptoms' in data:
            # Drop blanks and duplicates, keep order
            cleaned = []
            for symptom in data['symptoms']:
                symptom = symptom.strip()
                if symptom and symptom not in cleaned:
                    cleaned.append(symptom)
            data['symptoms'] = cleaned
        if isinstance(data.get('notes'), str):
            data['notes'] = data['notes'].strip()
        return data
