"""
Daily and calendar medication schedules.

The current cycle and the active medication list are read once per call;
the pure calculator in medcycle.utils.cycle_calculations then runs over
that snapshot for every day requested.
"""

import logging
from collections import OrderedDict
from datetime import date
from typing import Dict, Any, List, Optional

from medcycle.models.medication import Medication
from medcycle.models.user import User
from medcycle.services.cycle_service import CycleService
from medcycle.services.journal_service import JournalService
from medcycle.services.medication_log_service import MedicationLogService
from medcycle.services.medication_service import MedicationService
from medcycle.utils.cycle_calculations import (
    cycle_day_for,
    phase_for,
    phase_label,
    calendar_phase_for,
    should_take
)
from medcycle.utils.date_utils import calendar_range, MONTH

logger = logging.getLogger(__name__)

UNSCHEDULED_TIME_GROUP = 'Other'


class ScheduleService:

    @staticmethod
    def due_medications(medications: List[Medication], cycle_day: Optional[int]) -> List[Medication]:
        return [med for med in medications if should_take(med.frequency, cycle_day)]

    @staticmethod
    def group_by_time_of_day(medications: List[Medication]) -> Dict[str, List[Medication]]:
        groups = OrderedDict()
        for med in medications:
            groups.setdefault(med.time_of_day or UNSCHEDULED_TIME_GROUP, []).append(med)
        return groups

    @staticmethod
    def today_summary(user: User, reference_date: date) -> Dict[str, Any]:
        current_cycle = CycleService.get_current_cycle(user)
        medications = MedicationService.list_active(user)

        cycle_day = cycle_day_for(reference_date, current_cycle)
        phase = phase_for(cycle_day)
        due = ScheduleService.due_medications(medications, cycle_day)

        logs = MedicationLogService.list_logs(user, on_date=reference_date)
        journal_entry = JournalService.get_for_date(user, reference_date)

        logger.debug(
            "Schedule for user %s on %s: cycle_day=%s, %d/%d medications due",
            user.id, reference_date, cycle_day, len(due), len(medications)
        )

        return {
            'date': reference_date.isoformat(),
            'cycle_day': cycle_day,
            'phase': phase.value if phase else None,
            'phase_label': phase_label(cycle_day),
            'current_cycle': current_cycle.to_dict() if current_cycle else None,
            'medications': [med.to_dict(today=reference_date) for med in due],
            'medications_by_time': {
                group: [med.to_dict(today=reference_date) for med in meds]
                for group, meds in ScheduleService.group_by_time_of_day(due).items()
            },
            'logs': [log.to_dict() for log in logs],
            'journal_entry': journal_entry.to_dict() if journal_entry else None
        }

    @staticmethod
    def calendar(user: User, anchor: date, view: str = MONTH) -> Dict[str, Any]:
        days = calendar_range(anchor, view)

        current_cycle = CycleService.get_current_cycle(user)
        medications = MedicationService.list_active(user)
        logs = MedicationLogService.list_logs_between(user, days[0], days[-1])

        logs_by_day = {}
        for log in logs:
            logs_by_day.setdefault(log.date, []).append(log.to_dict())

        cells = []
        for day in days:
            cycle_day = cycle_day_for(day, current_cycle)
            cells.append({
                'date': day.isoformat(),
                'cycle_day': cycle_day,
                'phase': calendar_phase_for(cycle_day),
                'due_medication_ids': [
                    med.id for med in ScheduleService.due_medications(medications, cycle_day)
                ],
                'logs': logs_by_day.get(day, [])
            })

        return {
            'view': view,
            'start_date': days[0].isoformat(),
            'end_date': days[-1].isoformat(),
            'days': cells
        }
