"""
Persistence for recorded cycles.
"""

import logging
from typing import Dict, Any, List, Optional

from medcycle import db
from medcycle.models.cycle_tracking import CycleTracking
from medcycle.models.user import User

logger = logging.getLogger(__name__)


class CycleService:

    @staticmethod
    def list_cycles(user: User) -> List[CycleTracking]:
        return CycleTracking.query.filter_by(user_id=user.id).order_by(
            CycleTracking.period_start_date.desc(),
            CycleTracking.id.desc()
        ).all()

    @staticmethod
    def get_current_cycle(user: User) -> Optional[CycleTracking]:
        """The most recently started cycle, or None if nothing is tracked."""
        return CycleTracking.query.filter_by(user_id=user.id).order_by(
            CycleTracking.period_start_date.desc(),
            CycleTracking.id.desc()
        ).first()

    @staticmethod
    def get_owned(cycle_id: int, user: User) -> CycleTracking:
        cycle = CycleTracking.query.filter_by(id=cycle_id, user_id=user.id).first()
        if not cycle:
            raise ValueError("Cycle tracking not found")
        return cycle

    @staticmethod
    def create(user: User, data: Dict[str, Any]) -> CycleTracking:
        try:
            cycle = CycleTracking(user_id=user.id, **data)
            db.session.add(cycle)
            db.session.commit()
            logger.info("Recorded cycle starting %s for user %s", cycle.period_start_date, user.id)
            return cycle
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update(cycle: CycleTracking, data: Dict[str, Any]) -> CycleTracking:
        start = data.get('period_start_date', cycle.period_start_date)
        end = data.get('period_end_date', cycle.period_end_date)
        if start and end and end < start:
            raise ValueError("Period end date cannot be before period start date")

        try:
            for key, value in data.items():
                setattr(cycle, key, value)
            db.session.commit()
            return cycle
        except Exception:
            db.session.rollback()
            raise
