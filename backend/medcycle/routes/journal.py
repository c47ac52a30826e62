import logging

from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from medcycle.schemas.journal_schemas import JournalEntrySchema
from medcycle.services.journal_service import JournalService
from medcycle.utils.date_utils import parse_iso_date
from medcycle.routes.helpers import get_current_user, error_response, success_response, request_json

logger = logging.getLogger(__name__)

journal_bp = Blueprint('journal', __name__)

MAX_JOURNAL_LIMIT = 100


@journal_bp.route('', methods=['GET'])
@jwt_required()
def list_journal_entries():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    limit = request.args.get('limit', current_app.config['DEFAULT_JOURNAL_LIMIT'], type=int)
    if limit < 1:
        return error_response("limit must be greater than 0", 400)
    if limit > MAX_JOURNAL_LIMIT:
        return error_response(f"limit cannot exceed {MAX_JOURNAL_LIMIT}", 400)

    try:
        entries = JournalService.list_recent(user, limit)
        return success_response("Journal entries retrieved successfully", [entry.to_dict() for entry in entries])
    except Exception:
        logger.exception("Failed to fetch journal entries")
        return error_response("Failed to fetch journal entries", 500)

@journal_bp.route('/date/<entry_date>', methods=['GET'])
@jwt_required()
def get_journal_entry_for_date(entry_date: str):
    """Entry for one day; data is null rather than 404 when nothing was written."""
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        day = parse_iso_date(entry_date)
    except ValueError:
        return error_response("Invalid date format. Use YYYY-MM-DD", 400)

    entry = JournalService.get_for_date(user, day)
    return success_response(
        "Journal entry retrieved successfully",
        entry.to_dict() if entry else None
    )

@journal_bp.route('', methods=['POST'])
@jwt_required()
def create_journal_entry():
    try:
        user, _ = get_current_user()
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = JournalEntrySchema().load(request_json())
    except ValidationError as err:
        return error_response("Invalid journal entry data", 400, err.messages)

    try:
        entry = JournalService.create(user, validated_data)
        return success_response("Journal entry created successfully", entry.to_dict(), 201)
    except ValueError as e:
        return error_response(str(e), 409)
    except Exception:
        logger.exception("Failed to create journal entry")
        return error_response("Failed to create journal entry", 500)

@journal_bp.route('/<int:entry_id>', methods=['PATCH'])
@jwt_required()
def update_journal_entry(entry_id: int):
    try:
        user, _ = get_current_user()
        entry = JournalService.get_owned(entry_id, user)
    except ValueError as e:
        return error_response(str(e), 404)

    try:
        validated_data = JournalEntrySchema().load(request_json(), partial=True)
    except ValidationError as err:
        return error_response("Invalid journal entry data", 400, err.messages)

    try:
        entry = JournalService.update(entry, validated_data)
        return success_response("Journal entry updated successfully", entry.to_dict())
    except ValueError as e:
        return error_response(str(e), 409)
    except Exception:
        logger.exception("Failed to update journal entry %s", entry_id)
        return error_response("Failed to update journal entry", 500)
