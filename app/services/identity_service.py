from flask import current_app
from sqlalchemy.exc import IntegrityError
from app.extensions import db
from app.exceptions import UnauthenticatedError, UserNotFoundError
from app.models import User
from app.repositories import UserRepository
from app.utils.validation import parse_text


class IdentityService:
    """Maps a verified identity reference onto an internal user record."""

    @staticmethod
    def resolve_user(identity) -> User:
        if not identity:
            raise UnauthenticatedError()
        user = UserRepository.find_by_external_id(str(identity))
        if not user:
            current_app.logger.warning(f"No user record for identity {identity}")
            raise UserNotFoundError()
        return user

    @staticmethod
    def sync(identity, data: dict):
        """Return the user for ``identity``, creating it on first resolution.

        Returns a ``(user, created)`` tuple.
        """
        if not identity:
            raise UnauthenticatedError()
        data = data if isinstance(data, dict) else {}
        email = parse_text(data, "email")
        full_name = parse_text(data, "fullName")

        user = UserRepository.find_by_external_id(str(identity))
        if user:
            changed = False
            if email is not None and email != user.email:
                user.email = email
                changed = True
            if full_name is not None and full_name != user.full_name:
                user.full_name = full_name
                changed = True
            if changed:
                UserRepository.save(user)
            return user, False

        try:
            user = UserRepository.create(
                User(external_id=str(identity), email=email, full_name=full_name)
            )
        except IntegrityError:
            # a concurrent sync inserted the same identity first
            db.session.rollback()
            user = UserRepository.find_by_external_id(str(identity))
            if not user:
                raise
            current_app.logger.info(f"User for identity {identity} was created concurrently")
            return user, False
        current_app.logger.info(f"Created user {user.id} for identity {identity}")
        return user, True
