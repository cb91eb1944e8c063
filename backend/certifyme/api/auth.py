"""
Account endpoints.

    POST /api/auth/register   {email, password, name?}  → tokens + user (201)
    POST /api/auth/login      {email, password}         → tokens + user
    POST /api/auth/refresh    (refresh token)           → {access_token}
    GET  /api/auth/me                                   → {user}

Access tokens are short-lived; the frontend trades its refresh token for a
new one when a call comes back 401.
"""
import logging
import uuid

from flask import Blueprint, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt_identity,
    jwt_required,
)
from werkzeug.security import check_password_hash, generate_password_hash

from certifyme.api.serializers import user_to_dict
from certifyme.db.models.user import User
from certifyme.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from certifyme.extensions import db

log = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")

_MIN_PASSWORD_LENGTH = 8


def _credentials() -> tuple[str, str, dict]:
    data = request.get_json(silent=True) or {}
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    if not email or not password:
        raise ValidationError("email and password are required")
    return email, password, data


def _active_user(user_id: str) -> User:
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFoundError("user not found")
    if not user.is_active:
        raise ForbiddenError("account is disabled")
    return user


def _session_payload(user: User, **extra) -> dict:
    return {
        **extra,
        "access_token": create_access_token(identity=user.id),
        "refresh_token": create_refresh_token(identity=user.id),
        "user": user_to_dict(user),
    }


@auth_bp.post("/register")
def register():
    email, password, data = _credentials()
    if "@" not in email:
        raise ValidationError("email address is not valid")
    if len(password) < _MIN_PASSWORD_LENGTH:
        raise ValidationError(f"password must be at least {_MIN_PASSWORD_LENGTH} characters")
    if User.query.filter_by(email=email).first():
        raise ConflictError("email already registered")

    user = User(
        id=str(uuid.uuid4()),
        email=email,
        name=(data.get("name") or "").strip()[:255] or None,
        password_hash=generate_password_hash(password),
    )
    db.session.add(user)
    db.session.commit()
    log.info("registered user %s", user.id)
    return jsonify(_session_payload(user, message="Account created")), 201


@auth_bp.post("/login")
def login():
    email, password, _ = _credentials()
    user = User.query.filter_by(email=email).first()
    if user is None or not check_password_hash(user.password_hash, password):
        log.info("failed login for %s", email)
        raise AuthError("invalid credentials")
    if not user.is_active:
        raise ForbiddenError("account is disabled")
    return jsonify(_session_payload(user))


@auth_bp.post("/refresh")
@jwt_required(refresh=True)
def refresh():
    # A disabled or deleted account can't keep minting access tokens.
    user = _active_user(get_jwt_identity())
    return jsonify({"access_token": create_access_token(identity=user.id)})


@auth_bp.get("/me")
@jwt_required()
def me():
    return jsonify({"user": user_to_dict(_active_user(get_jwt_identity()))})
