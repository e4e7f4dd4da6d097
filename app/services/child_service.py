from typing import List
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.exceptions import ChildNotFoundError, ForbiddenError, InternalError, InvalidFieldError
from app.models import Child
from app.projections import child_to_dict
from app.repositories import ChildRepository
from app.services.identity_service import IdentityService
from app.utils.validation import parse_int, parse_text, require_fields


class ChildService:
    """Child profiles a guardian keeps to fill in event registrations."""

    @staticmethod
    def _child_attrs(data: dict) -> dict:
        if not isinstance(data, dict):
            raise InvalidFieldError("body", "Request body must be a JSON object")
        attrs = {}
        if "firstName" in data:
            first_name = parse_text(data, "firstName")
            if not first_name or not first_name.strip():
                raise InvalidFieldError("firstName", "firstName must not be empty")
            attrs["first_name"] = first_name.strip()
        if "lastName" in data:
            last_name = parse_text(data, "lastName")
            attrs["last_name"] = last_name.strip() if last_name else None
        if "age" in data:
            attrs["age"] = parse_int(data, "age", minimum=0)
        for field, column in (
            ("foodAllergies", "food_allergies"),
            ("medicalConcerns", "medical_concerns"),
            ("baseballExperience", "baseball_experience"),
            ("additionalInformation", "additional_information"),
        ):
            if field in data:
                attrs[column] = parse_text(data, field)
        return attrs

    @staticmethod
    def _owned_child(user, child_id: int) -> Child:
        child = ChildRepository.find_by_id(child_id)
        if not child:
            raise ChildNotFoundError()
        if child.parent_user_id != user.id:
            current_app.logger.warning(
                f"User {user.id} attempted to access child {child_id} owned by user {child.parent_user_id}"
            )
            raise ForbiddenError("You can only manage your own children")
        return child

    @staticmethod
    def list_for_current_user(identity) -> List[dict]:
        user = IdentityService.resolve_user(identity)
        return [child_to_dict(c) for c in ChildRepository.find_by_user(user.id)]

    @staticmethod
    def add_child(identity, data: dict) -> Child:
        user = IdentityService.resolve_user(identity)

        data = data or {}
        require_fields(data, ["firstName"])
        attrs = ChildService._child_attrs(data)
        attrs["parent_user_id"] = user.id

        try:
            child = ChildRepository.create(attrs)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to add child for user {user.id}: {str(e)}", exc_info=True)
            raise InternalError(f"Failed to save child - {str(e)}") from e

        current_app.logger.info(f"User {user.id} added child {child.id}")
        return child

    @staticmethod
    def update_child(identity, child_id: int, data: dict) -> Child:
        user = IdentityService.resolve_user(identity)
        child = ChildService._owned_child(user, child_id)

        attrs = ChildService._child_attrs(data or {})
        if not attrs:
            return child

        try:
            child = ChildRepository.update(child, attrs)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to update child {child_id}: {str(e)}", exc_info=True)
            raise InternalError(f"Failed to save child - {str(e)}") from e

        current_app.logger.info(f"User {user.id} updated child {child_id}: {sorted(attrs)}")
        return child

    @staticmethod
    def remove_child(identity, child_id: int):
        user = IdentityService.resolve_user(identity)
        child = ChildService._owned_child(user, child_id)

        try:
            ChildRepository.delete(child)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to remove child {child_id}: {str(e)}", exc_info=True)
            raise InternalError(f"Failed to remove child - {str(e)}") from e

        current_app.logger.info(f"User {user.id} removed child {child_id}")
