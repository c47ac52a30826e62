import logging
from datetime import date, datetime

from flask import Blueprint, request
from flask_jwt_extended import jwt_required

from medcycle.services.schedule_service import ScheduleService
from medcycle.utils.date_utils import CALENDAR_VIEWS, MONTH, greeting
from medcycle.routes.helpers import get_current_user, error_response, success_response, parse_date_arg

logger = logging.getLogger(__name__)

schedule_bp = Blueprint('schedule', __name__)


# Routes read the server clock only as a default for ?date=; services and
# calculations below take the reference date explicitly.
@schedule_bp.route('/today', methods=['GET'])
@jwt_required()
def today():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        reference_date = parse_date_arg('date', default=date.today())
    except ValueError as e:
        return error_response(str(e), 400)

    try:
        summary = ScheduleService.today_summary(user, reference_date)
        summary['greeting'] = greeting(datetime.now())
        return success_response("Schedule retrieved successfully", summary)
    except Exception:
        logger.exception("Failed to build schedule")
        return error_response("Failed to build schedule", 500)

@schedule_bp.route('/calendar', methods=['GET'])
@jwt_required()
def calendar_view():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        anchor = parse_date_arg('date', default=date.today())
    except ValueError as e:
        return error_response(str(e), 400)

    view = request.args.get('view', MONTH)
    if view not in CALENDAR_VIEWS:
        return error_response(f"Invalid view. Use one of: {', '.join(CALENDAR_VIEWS)}", 400)

    try:
        return success_response("Calendar retrieved successfully", ScheduleService.calendar(user, anchor, view))
    except Exception:
        logger.exception("Failed to build calendar")
        return error_response("Failed to build calendar", 500)
