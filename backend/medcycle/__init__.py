import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from config import config

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )


def create_app(config_name='development'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    configure_logging(app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    CORS(app)

    # Import models so metadata is populated for migrations
    from medcycle.models import User, Medication, MedicationLog, JournalEntry, CycleTracking

    # Register blueprints
    from medcycle.routes import (
        auth_bp, medications_bp, medication_logs_bp, journal_bp, cycle_tracking_bp, schedule_bp
    )
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(medications_bp, url_prefix='/api/medications')
    app.register_blueprint(medication_logs_bp, url_prefix='/api/medication-logs')
    app.register_blueprint(journal_bp, url_prefix='/api/journal-entries')
    app.register_blueprint(cycle_tracking_bp, url_prefix='/api/cycle-tracking')
    app.register_blueprint(schedule_bp, url_prefix='/api/schedule')

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        return {
            'status': 'healthy',
            'message': 'MedCycle API is running',
            'env': config_name
        }

    logger.info("Application created with '%s' configuration", config_name)
    return app
