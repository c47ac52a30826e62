import logging
from typing import Dict, Any, List

from medcycle import db
from medcycle.models.medication import Medication
from medcycle.models.user import User

logger = logging.getLogger(__name__)


class MedicationService:

    @staticmethod
    def list_active(user: User) -> List[Medication]:
        return Medication.query.filter_by(
            user_id=user.id,
            is_active=True
        ).order_by(Medication.created_at.asc(), Medication.id.asc()).all()

    @staticmethod
    def get_owned(medication_id: int, user: User) -> Medication:
        medication = Medication.query.filter_by(id=medication_id, user_id=user.id).first()
        if not medication:
            raise ValueError("Medication not found")
        return medication

    @staticmethod
    def create(user: User, data: Dict[str, Any]) -> Medication:
        try:
            medication = Medication(user_id=user.id, **data)
            db.session.add(medication)
            db.session.commit()
            logger.info("Created medication %s for user %s", medication.id, user.id)
            return medication
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update(medication: Medication, data: Dict[str, Any]) -> Medication:
        try:
            for key, value in data.items():
                setattr(medication, key, value)
            db.session.commit()
            logger.info("Updated medication %s (%s)", medication.id, ', '.join(sorted(data)))
            return medication
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def deactivate(medication: Medication) -> Medication:
        """Soft delete: keep the row so adherence history stays intact."""
        try:
            medication.is_active = False
            db.session.commit()
            logger.info("Deactivated medication %s", medication.id)
            return medication
        except Exception:
            db.session.rollback()
            raise
