import logging

from flask import Blueprint
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from medcycle.schemas.cycle_schemas import CycleTrackingSchema
from medcycle.services.cycle_service import CycleService
from medcycle.routes.helpers import get_current_user, error_response, success_response, request_json

logger = logging.getLogger(__name__)

cycle_tracking_bp = Blueprint('cycle_tracking', __name__)


@cycle_tracking_bp.route('', methods=['GET'])
@jwt_required()
def list_cycles():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        cycles = CycleService.list_cycles(user)
        return success_response("Cycles retrieved successfully", [cycle.to_dict() for cycle in cycles])
    except Exception:
        logger.exception("Failed to fetch cycle tracking")
        return error_response("Failed to fetch cycle tracking", 500)

@cycle_tracking_bp.route('/current', methods=['GET'])
@jwt_required()
def get_current_cycle():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    cycle = CycleService.get_current_cycle(user)
    return success_response(
        "Current cycle retrieved successfully",
        cycle.to_dict() if cycle else None
    )

@cycle_tracking_bp.route('', methods=['POST'])
@jwt_required()
def create_cycle():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = CycleTrackingSchema().load(request_json())
    except ValidationError as err:
        return error_response("Invalid cycle tracking data", 400, err.messages)

    try:
        cycle = CycleService.create(user, validated_data)
        return success_response("Cycle recorded successfully", cycle.to_dict(), 201)
    except Exception:
        logger.exception("Failed to create cycle tracking")
        return error_response("Failed to create cycle tracking", 500)

@cycle_tracking_bp.route('/<int:cycle_id>', methods=['PATCH'])
@jwt_required()
def update_cycle(cycle_id: int):
    try:
        user, _ = get_current_user()
        cycle = CycleService.get_owned(cycle_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = CycleTrackingSchema().load(request_json(), partial=True)
    except ValidationError as err:
        return error_response("Invalid cycle tracking data", 400, err.messages)

    try:
        cycle = CycleService.update(cycle, validated_data)
        return success_response("Cycle updated successfully", cycle.to_dict())
    except ValueError as e:
        return error_response(str(e), 400)
    except Exception:
        logger.exception("Failed to update cycle tracking %s", cycle_id)
        return error_response("Failed to update cycle tracking", 500)
