from .medication_service import MedicationService
from .medication_log_service import MedicationLogService
from .cycle_service import CycleService
from .journal_service import JournalService
from .schedule_service import ScheduleService

__all__ = ['MedicationService', 'MedicationLogService', 'CycleService', 'JournalService', 'ScheduleService']
