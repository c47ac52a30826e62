import logging
from datetime import date
from typing import Dict, Any, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from medcycle import db
from medcycle.models.medication_log import MedicationLog
from medcycle.models.user import User
from medcycle.services.medication_service import MedicationService

logger = logging.getLogger(__name__)


class DuplicateLogError(ValueError):
    """A log already exists for this medication on this day."""


class MedicationLogService:

    @staticmethod
    def list_logs(user: User, on_date: Optional[date] = None,
                  medication_id: Optional[int] = None) -> List[MedicationLog]:
        query = MedicationLog.query.filter_by(user_id=user.id)
        if on_date is not None:
            query = query.filter(MedicationLog.date == on_date)
        if medication_id is not None:
            query = query.filter(MedicationLog.medication_id == medication_id)
        return query.order_by(MedicationLog.date.desc(), MedicationLog.id.asc()).all()

    @staticmethod
    def list_logs_between(user: User, start: date, end: date) -> List[MedicationLog]:
        return MedicationLog.query.filter(
            MedicationLog.user_id == user.id,
            MedicationLog.date >= start,
            MedicationLog.date <= end
        ).order_by(MedicationLog.date.asc(), MedicationLog.id.asc()).all()

    @staticmethod
    def get_owned(log_id: int, user: User) -> MedicationLog:
        log = MedicationLog.query.filter_by(id=log_id, user_id=user.id).first()
        if not log:
            raise ValueError("Medication log not found")
        return log

    @staticmethod
    def find_for_day(user: User, medication_id: int, day: date) -> Optional[MedicationLog]:
        return MedicationLog.query.filter_by(
            user_id=user.id,
            medication_id=medication_id,
            date=day
        ).first()

    @staticmethod
    def create(user: User, data: Dict[str, Any]) -> MedicationLog:
        # Logs may only point at the caller's own medications
        MedicationService.get_owned(data['medication_id'], user)

        try:
            log = MedicationLog(user_id=user.id, **data)
            db.session.add(log)
            db.session.commit()
            logger.info("Logged medication %s on %s for user %s", log.medication_id, log.date, user.id)
            return log
        except IntegrityError as e:
            db.session.rollback()
            raise DuplicateLogError("A log already exists for this medication on this date") from e
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update(log: MedicationLog, user: User, data: Dict[str, Any]) -> MedicationLog:
        if 'medication_id' in data:
            MedicationService.get_owned(data['medication_id'], user)

        # Moving a log must not land on a (medication, day) that already has one
        medication_id = data.get('medication_id', log.medication_id)
        day = data.get('date', log.date)
        if (medication_id, day) != (log.medication_id, log.date):
            if MedicationLogService.find_for_day(user, medication_id, day):
                raise DuplicateLogError("A log already exists for this medication on this date")

        try:
            for key, value in data.items():
                setattr(log, key, value)
            db.session.commit()
            return log
        except IntegrityError as e:
            db.session.rollback()
            raise DuplicateLogError("A log already exists for this medication on this date") from e
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def upsert_for_day(user: User, data: Dict[str, Any]) -> Tuple[MedicationLog, bool]:
        """
        Record adherence for a medication on a day, updating the existing
        log for that day if there is one.

        Only the keys present in ``data`` are written, so a notes-only call
        keeps the day's taken/skipped flags.

        Returns:
            (log, created)
        """
        existing = MedicationLogService.find_for_day(user, data['medication_id'], data['date'])

        if existing:
            changes = {key: value for key, value in data.items() if key not in ('medication_id', 'date')}
            return MedicationLogService.update(existing, user, changes), False
        return MedicationLogService.create(user, data), True
