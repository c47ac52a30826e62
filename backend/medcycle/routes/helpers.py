from datetime import date
from typing import Tuple, Dict, Any, Optional

from flask import request, jsonify
from flask_jwt_extended import get_jwt_identity

from medcycle import db
from medcycle.models.user import User
from medcycle.utils.date_utils import parse_iso_date


def get_current_user() -> Tuple[User, int]:
    user_id = int(get_jwt_identity())
    user = db.session.get(User, user_id)
    if not user or not user.is_active:
        raise ValueError("User not found")
    return user, user_id

def error_response(message: str, status_code: int = 400, details: Dict[str, Any] = None) -> Tuple[Dict, int]:
    response = {'error': message}
    if details:
        response['details'] = details
    return jsonify(response), status_code

def success_response(message: str, data: Any = None, status_code: int = 200) -> Tuple[Dict, int]:
    response = {'message': message, 'data': data}
    return jsonify(response), status_code

def request_json() -> Dict[str, Any]:
    """Request body as a dict; missing or non-object bodies become {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def parse_date_arg(name: str, default: Optional[date] = None) -> Optional[date]:
    """
    Read an optional date query parameter.

    Raises:
        ValueError: If the parameter is present but malformed
    """
    value = request.args.get(name)
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValueError(f"Invalid {name} format. Use YYYY-MM-DD")
