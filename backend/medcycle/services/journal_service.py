import logging
from datetime import date
from typing import Dict, Any, List, Optional

from sqlalchemy.exc import IntegrityError

from medcycle import db
from medcycle.models.journal_entry import JournalEntry
from medcycle.models.user import User
from medcycle.services.cycle_service import CycleService
from medcycle.utils.cycle_calculations import cycle_day_for

logger = logging.getLogger(__name__)


class JournalService:

    @staticmethod
    def list_recent(user: User, limit: int = 10) -> List[JournalEntry]:
        return JournalEntry.query.filter_by(user_id=user.id).order_by(
            JournalEntry.date.desc(),
            JournalEntry.id.desc()
        ).limit(limit).all()

    @staticmethod
    def get_for_date(user: User, day: date) -> Optional[JournalEntry]:
        return JournalEntry.query.filter_by(user_id=user.id, date=day).first()

    @staticmethod
    def get_owned(entry_id: int, user: User) -> JournalEntry:
        entry = JournalEntry.query.filter_by(id=entry_id, user_id=user.id).first()
        if not entry:
            raise ValueError("Journal entry not found")
        return entry

    @staticmethod
    def create(user: User, data: Dict[str, Any]) -> JournalEntry:
        if JournalService.get_for_date(user, data['date']):
            raise ValueError("A journal entry already exists for this date. Use update endpoint instead.")

        # Snapshot the cycle day the entry was written on
        if data.get('cycle_day') is None:
            current_cycle = CycleService.get_current_cycle(user)
            data['cycle_day'] = cycle_day_for(data['date'], current_cycle)

        try:
            entry = JournalEntry(user_id=user.id, **data)
            db.session.add(entry)
            db.session.commit()
            logger.info("Created journal entry for user %s on %s", user.id, entry.date)
            return entry
        except IntegrityError as e:
            db.session.rollback()
            raise ValueError("A journal entry already exists for this date. Use update endpoint instead.") from e
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update(entry: JournalEntry, data: Dict[str, Any]) -> JournalEntry:
        if 'date' in data and data['date'] != entry.date:
            other = JournalEntry.query.filter_by(user_id=entry.user_id, date=data['date']).first()
            if other:
                raise ValueError("A journal entry already exists for this date")

        try:
            for key, value in data.items():
                setattr(entry, key, value)
            db.session.commit()
            return entry
        except IntegrityError as e:
            db.session.rollback()
            raise ValueError("A journal entry already exists for this date") from e
        except Exception:
            db.session.rollback()
            raise
