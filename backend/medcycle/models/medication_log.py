from medcycle import db


class MedicationLog(db.Model):
    """Daily adherence record for one medication."""
    __tablename__ = 'medication_logs'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    medication_id = db.Column(db.Integer, db.ForeignKey('medications.id'), nullable=False)

    date = db.Column(db.Date, nullable=False, index=True)
    taken = db.Column(db.Boolean, default=False, nullable=False)
    skipped = db.Column(db.Boolean, default=False, nullable=False)
    skip_reason = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)

    __table_args__ = (
        db.Index('idx_medication_logs_user_date', 'user_id', 'date'),
        db.UniqueConstraint('user_id', 'medication_id', 'date', name='uq_medication_logs_user_medication_date'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'medication_id': self.medication_id,
            'date': self.date.isoformat() if self.date else None,
            'taken': self.taken,
            'skipped': self.skipped,
            'skip_reason': self.skip_reason,
            'notes': self.notes
        }

    def __repr__(self):
        return f'<MedicationLog {self.id} medication={self.medication_id} date={self.date}>'
