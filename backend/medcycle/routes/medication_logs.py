import logging

from flask import Blueprint, request
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from medcycle.schemas.medication_schemas import MedicationLogSchema
from medcycle.services.medication_log_service import MedicationLogService, DuplicateLogError
from medcycle.routes.helpers import (
    get_current_user, error_response, success_response, request_json, parse_date_arg
)

logger = logging.getLogger(__name__)

medication_logs_bp = Blueprint('medication_logs', __name__)


@medication_logs_bp.route('', methods=['GET'])
@jwt_required()
def list_medication_logs():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        on_date = parse_date_arg('date')
    except ValueError as e:
        return error_response(str(e), 400)

    medication_id = request.args.get('medication_id')
    if medication_id is not None:
        try:
            medication_id = int(medication_id)
        except ValueError:
            return error_response("Invalid medication_id", 400)

    try:
        logs = MedicationLogService.list_logs(user, on_date=on_date, medication_id=medication_id)
        return success_response("Medication logs retrieved successfully", [log.to_dict() for log in logs])
    except Exception:
        logger.exception("Failed to fetch medication logs")
        return error_response("Failed to fetch medication logs", 500)

@medication_logs_bp.route('', methods=['POST'])
@jwt_required()
def create_medication_log():
    """Create the day's log for a medication, or update it if one exists."""
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = MedicationLogSchema().load(request_json())
    except ValidationError as err:
        return error_response("Invalid log data", 400, err.messages)

    try:
        log, created = MedicationLogService.upsert_for_day(user, validated_data)
    except DuplicateLogError as e:
        return error_response(str(e), 409)
    except ValueError as e:
        return error_response(str(e), 404)
    except Exception:
        logger.exception("Failed to create medication log")
        return error_response("Failed to create medication log", 500)

    if created:
        return success_response("Medication log created successfully", log.to_dict(), 201)
    return success_response("Medication log updated successfully", log.to_dict())

@medication_logs_bp.route('/<int:log_id>', methods=['PATCH'])
@jwt_required()
def update_medication_log(log_id: int):
    try:
        user, _ = get_current_user()
        log = MedicationLogService.get_owned(log_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = MedicationLogSchema().load(request_json(), partial=True)
    except ValidationError as err:
        return error_response("Invalid log data", 400, err.messages)

    try:
        log = MedicationLogService.update(log, user, validated_data)
        return success_response("Medication log updated successfully", log.to_dict())
    except DuplicateLogError as e:
        return error_response(str(e), 409)
    except ValueError as e:
        return error_response(str(e), 404)
    except Exception:
        logger.exception("Failed to update medication log %s", log_id)
        return error_response("Failed to update medication log", 500)
