import logging
from datetime import date

from flask import Blueprint
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from medcycle.schemas.medication_schemas import MedicationSchema
from medcycle.services.medication_service import MedicationService
from medcycle.routes.helpers import get_current_user, error_response, success_response, request_json

logger = logging.getLogger(__name__)

medications_bp = Blueprint('medications', __name__)


@medications_bp.route('', methods=['GET'])
@jwt_required()
def list_medications():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        today = date.today()
        medications = MedicationService.list_active(user)
        return success_response(
            "Medications retrieved successfully",
            [med.to_dict(today=today) for med in medications]
        )
    except Exception:
        logger.exception("Failed to fetch medications")
        return error_response("Failed to fetch medications", 500)

@medications_bp.route('/<int:medication_id>', methods=['GET'])
@jwt_required()
def get_medication(medication_id: int):
    try:
        user, _ = get_current_user()
        medication = MedicationService.get_owned(medication_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    return success_response("Medication retrieved successfully", medication.to_dict())

@medications_bp.route('', methods=['POST'])
@jwt_required()
def create_medication():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = MedicationSchema().load(request_json())
    except ValidationError as err:
        return error_response("Invalid medication data", 400, err.messages)

    try:
        medication = MedicationService.create(user, validated_data)
        return success_response("Medication created successfully", medication.to_dict(), 201)
    except Exception:
        logger.exception("Failed to create medication")
        return error_response("Failed to create medication", 500)

@medications_bp.route('/<int:medication_id>', methods=['PATCH'])
@jwt_required()
def update_medication(medication_id: int):
    try:
        user, _ = get_current_user()
        medication = MedicationService.get_owned(medication_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = MedicationSchema().load(request_json(), partial=True)
    except ValidationError as err:
        return error_response("Invalid medication data", 400, err.messages)

    try:
        medication = MedicationService.update(medication, validated_data)
        return success_response("Medication updated successfully", medication.to_dict())
    except Exception:
        logger.exception("Failed to update medication %s", medication_id)
        return error_response("Failed to update medication", 500)

@medications_bp.route('/<int:medication_id>', methods=['DELETE'])
@jwt_required()
def delete_medication(medication_id: int):
    try:
        user, _ = get_current_user()
        medication = MedicationService.get_owned(medication_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        MedicationService.deactivate(medication)
        return '', 204
    except Exception:
        logger.exception("Failed to delete medication %s", medication_id)
        return error_response("Failed to delete medication", 500)
