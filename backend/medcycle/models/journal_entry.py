from datetime import datetime
from medcycle import db

MOODS = ('great', 'good', 'okay', 'low', 'unwell')


class JournalEntry(db.Model):
    """
    Mood and symptom journal, one entry per user per day.

    symptoms is a JSON list of free-text strings, e.g. ["cramps", "headache"].
    cycle_day is captured when the entry is written so later cycle edits do
    not rewrite history.
    """
    __tablename__ = 'journal_entries'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    date = db.Column(db.Date, nullable=False)
    mood = db.Column(db.String(20), nullable=True)
    symptoms = db.Column(db.JSON, nullable=False, default=list)
    notes = db.Column(db.Text, nullable=True)
    cycle_day = db.Column(db.Integer, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'date', name='uq_journal_entries_user_date'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'date': self.date.isoformat() if self.date else None,
            'mood': self.mood,
            'symptoms': self.symptoms or [],
            'notes': self.notes,
            'cycle_day': self.cycle_day,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<JournalEntry {self.id} user={self.user_id} date={self.date}>'
