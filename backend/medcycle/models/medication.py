from datetime import datetime, date, timedelta
from typing import Optional
from medcycle import db


class Medication(db.Model):
    """
    A medication or supplement a user takes.

    ``frequency`` holds one of the tags in
    medcycle.utils.cycle_calculations.FREQUENCIES, stored as free text.
    Deleting a medication only clears ``is_active`` so its logs survive.
    """
    __tablename__ = 'medications'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)

    # What and how much
    name = db.Column(db.Text, nullable=False)
    brand = db.Column(db.Text, nullable=True)
    strength = db.Column(db.Text, nullable=False)
    form = db.Column(db.Text, nullable=True)  # tablet, capsule, softgel, liquid...
    dosage = db.Column(db.Text, nullable=False)  # e.g. "1 capsule"
    frequency = db.Column(db.Text, nullable=False)
    time_of_day = db.Column(db.Text, nullable=True)  # morning, evening...
    purpose = db.Column(db.Text, nullable=True)
    category = db.Column(db.Text, nullable=True)  # vitamin, supplement, prescription...

    # Supply
    bottle_size = db.Column(db.Integer, nullable=True)
    purchase_date = db.Column(db.Date, nullable=True)
    days_supply = db.Column(db.Integer, nullable=True)

    # Prescribing details
    doctor = db.Column(db.Text, nullable=True)
    cost = db.Column(db.Text, nullable=True)
    pharmacy = db.Column(db.Text, nullable=True)
    side_effects = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    logs = db.relationship('MedicationLog', backref='medication', lazy=True)

    @property
    def next_refill_date(self) -> Optional[date]:
        if not self.purchase_date or not self.days_supply:
            return None
        return self.purchase_date + timedelta(days=self.days_supply)

    def days_until_refill(self, today: date) -> Optional[int]:
        """Days from ``today`` to the refill date; negative once overdue."""
        refill = self.next_refill_date
        if refill is None:
            return None
        return (refill - today).days

    def supply_remaining_percent(self, today: date) -> Optional[int]:
        """Share of the supply left on ``today``, clamped to 0..100."""
        days_left = self.days_until_refill(today)
        if days_left is None:
            return None
        percent = days_left / self.days_supply * 100
        return int(round(max(0, min(100, percent))))

    def to_dict(self, today: date = None):
        today = today or date.today()
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'brand': self.brand,
            'strength': self.strength,
            'form': self.form,
            'dosage': self.dosage,
            'frequency': self.frequency,
            'time_of_day': self.time_of_day,
            'purpose': self.purpose,
            'category': self.category,
            'bottle_size': self.bottle_size,
            'purchase_date': self.purchase_date.isoformat() if self.purchase_date else None,
            'days_supply': self.days_supply,
            'doctor': self.doctor,
            'cost': self.cost,
            'pharmacy': self.pharmacy,
            'side_effects': self.side_effects,
            'notes': self.notes,
            'image_url': self.image_url,
            'is_active': self.is_active,
            'next_refill_date': self.next_refill_date.isoformat() if self.next_refill_date else None,
            'days_until_refill': self.days_until_refill(today),
            'supply_remaining_percent': self.supply_remaining_percent(today),
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Medication {self.id} {self.name}>'
