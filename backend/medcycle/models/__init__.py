from .user import User
from .medication import Medication
from .medication_log import MedicationLog
from .journal_entry import JournalEntry
from .cycle_tracking import CycleTracking

__all__ = ['User', 'Medication', 'MedicationLog', 'JournalEntry', 'CycleTracking']
