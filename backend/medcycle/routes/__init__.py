# Routes package
from .auth import auth_bp
from .medications import medications_bp
from .medication_logs import medication_logs_bp
from .journal import journal_bp
from .cycle_tracking import cycle_tracking_bp
from .schedule import schedule_bp

__all__ = [
    'auth_bp',
    'medications_bp',
    'medication_logs_bp',
    'journal_bp',
    'cycle_tracking_bp',
    'schedule_bp'
]
