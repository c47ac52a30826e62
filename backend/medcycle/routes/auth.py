import logging
from datetime import datetime

from flask import Blueprint, jsonify
from flask_jwt_extended import create_access_token, create_refresh_token, get_jwt_identity, jwt_required
from marshmallow import ValidationError
from medcycle import db
from medcycle.models.user import User
from medcycle.schemas.user_schemas import UserRegistrationSchema, UserLoginSchema
from medcycle.routes.helpers import get_current_user, error_response, request_json


logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _issue_tokens(user: User):
    user_identity = str(user.id)
    return {
        'access_token': create_access_token(identity=user_identity),
        'refresh_token': create_refresh_token(identity=user_identity)
    }


@auth_bp.route('/register', methods=['POST'])
def register():
    try:
        data = request_json()

        # Validate input using schema
        schema = UserRegistrationSchema()
        try:
            validated_data = schema.load(data)
        except ValidationError as err:
            return error_response('Validation failed', 400, err.messages)

        email = validated_data['email']

        # Check if user already exists
        if User.query.filter_by(email=email).first():
            return error_response('User with this email already exists', 409)

        # Create new user
        user = User(
            email=email,
            first_name=validated_data['first_name'],
            last_name=validated_data['last_name']
        )
        user.set_password(validated_data['password'])

        # Save to database
        db.session.add(user)
        db.session.commit()
        logger.info("Registered user %s", user.id)

        return jsonify({
            'message': 'User registered successfully',
            'user': user.to_dict(),
            **_issue_tokens(user)
        }), 201

    except Exception:
        db.session.rollback()
        logger.exception("Registration failed")
        return error_response('Registration failed', 500)

@auth_bp.route('/login', methods=['POST'])
def login():
    try:
        data = request_json()

        schema = UserLoginSchema()
        try:
            validated_data = schema.load(data)
        except ValidationError as err:
            return error_response('Validation failed', 400, err.messages)

        user = User.query.filter_by(email=validated_data['email']).first()

        # Check if user exists and password is correct
        if not user or not user.check_password(validated_data['password']):
            return error_response('Invalid email or password', 401)

        if not user.is_active:
            return error_response('Account is deactivated', 401)

        user.last_login_at = datetime.utcnow()
        db.session.commit()

        return jsonify({
            'message': 'Login successful',
            'user': user.to_dict(),
            **_issue_tokens(user)
        }), 200

    except Exception:
        db.session.rollback()
        logger.exception("Login failed")
        return error_response('Login failed', 500)

@auth_bp.route('/logout', methods=['POST'])
@jwt_required()
def logout():
    """
    Logout endpoint. JWTs are stateless, so the client discards its tokens.
    """
    current_user_id = get_jwt_identity()

    return jsonify({
        'message': 'Logout successful',
        'user_id': current_user_id,
        'note': 'Please delete the JWT token from client storage'
    }), 200

@auth_bp.route('/refresh', methods=['POST'])
@jwt_required(refresh=True)
def refresh():
    current_user_id = get_jwt_identity()
    new_access_token = create_access_token(identity=current_user_id)

    return jsonify({
        'message': 'Token refreshed successfully',
        'access_token': new_access_token
    }), 200

@auth_bp.route('/user', methods=['GET'])
@jwt_required()
def current_user():
    try:
        user, _ = get_current_user()
    except ValueError:
        return error_response('User not found or inactive', 401)

    return jsonify({'user': user.to_dict()}), 200
