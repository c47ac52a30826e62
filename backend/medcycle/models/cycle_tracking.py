from datetime import datetime
from medcycle import db
from medcycle.utils.cycle_calculations import DEFAULT_CYCLE_LENGTH


class CycleTracking(db.Model):
    """
    A recorded period start.

    The row with the latest period_start_date is the user's current cycle;
    cycle day and phase are always derived from it, never stored.
    """
    __tablename__ = 'cycle_tracking'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)

    period_start_date = db.Column(db.Date, nullable=False, index=True)
    period_end_date = db.Column(db.Date, nullable=True)
    cycle_length = db.Column(db.Integer, nullable=True, default=DEFAULT_CYCLE_LENGTH)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        """Convert to dictionary for API responses."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'period_start_date': self.period_start_date.isoformat() if self.period_start_date else None,
            'period_end_date': self.period_end_date.isoformat() if self.period_end_date else None,
            'cycle_length': self.cycle_length,
            'notes': self.notes,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<CycleTracking {self.id} user={self.user_id} start={self.period_start_date}>'
