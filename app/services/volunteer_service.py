from datetime import date
from typing import List
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.exceptions import DuplicateVolunteerError, EventNotFoundError, InternalError
from app.models import Volunteer
from app.models.enums import Capability, RegistrationStatus
from app.projections import volunteer_to_dict
from app.repositories import EventRepository, VolunteerRepository
from app.services.authorization import require_capability
from app.services.identity_service import IdentityService
from app.utils.validation import parse_int, parse_text, require_fields


class VolunteerService:
    @staticmethod
    def sign_up(identity, data: dict) -> Volunteer:
        user = IdentityService.resolve_user(identity)

        data = data or {}
        require_fields(data, ["eventId"])
        event_id = parse_int(data, "eventId")

        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()

        if VolunteerRepository.find_by_event_and_user(event.id, user.id):
            current_app.logger.warning(f"User {user.id} already volunteering for event {event.id}")
            raise DuplicateVolunteerError()

        attrs = {
            "event_id": event.id,
            "user_id": user.id,
            "role": parse_text(data, "role"),
            "availability": parse_text(data, "availability"),
            "skills": parse_text(data, "skills"),
            "notes": parse_text(data, "notes"),
            "signup_date": date.today(),
            "status": RegistrationStatus.REGISTERED,
        }
        try:
            volunteer = VolunteerRepository.add(attrs)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(
                f"Failed to sign up user {user.id} to volunteer for event {event.id}: {str(e)}",
                exc_info=True,
            )
            raise InternalError(f"Failed to sign up as volunteer - {str(e)}") from e

        current_app.logger.info(f"User {user.id} signed up to volunteer for event {event.id}")
        return volunteer

    @staticmethod
    def list_for_current_user(identity) -> List[dict]:
        user = IdentityService.resolve_user(identity)
        return [volunteer_to_dict(v) for v in VolunteerRepository.find_by_user(user.id)]

    @staticmethod
    def list_for_event(identity, event_id: int) -> List[dict]:
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.VIEW_ROSTER)

        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()
        return [volunteer_to_dict(v) for v in VolunteerRepository.find_by_event(event.id)]
