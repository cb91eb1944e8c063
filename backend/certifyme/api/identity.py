"""Resolve the JWT subject into the Identity handed to quiz sessions."""

from __future__ import annotations

from flask_jwt_extended import get_jwt_identity

from certifyme.db.models.user import User
from certifyme.errors import NotFoundError
from certifyme.extensions import db
from certifyme.services.quiz.types import Identity


def current_user() -> User:
    user = db.session.get(User, get_jwt_identity())
    if not user:
        raise NotFoundError("user not found")
    return user


def current_identity() -> Identity:
    user = current_user()
    return Identity(user_id=user.id, display_name=user.display_name)
