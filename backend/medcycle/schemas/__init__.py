from .user_schemas import UserRegistrationSchema, UserLoginSchema
from .medication_schemas import MedicationSchema, MedicationLogSchema
from .journal_schemas import JournalEntrySchema
from .cycle_schemas import CycleTrackingSchema

__all__ = [
    'UserRegistrationSchema',
    'UserLoginSchema',
    'MedicationSchema',
    'MedicationLogSchema',
    'JournalEntrySchema',
    'CycleTrackingSchema'
]
