import threading
from contextlib import contextmanager
from datetime import date
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.exceptions import (
    ApiError,
    DuplicateRegistrationError,
    EventFullError,
    EventNotFoundError,
    RegistrationFailedError,
)
from app.models import Participant
from app.models.enums import RegistrationStatus
from app.repositories import EventRepository, ParticipantRepository
from app.services.identity_service import IdentityService
from app.utils.validation import parse_bool, parse_int, parse_text, require_fields

# Striped by event id; the set of locks is fixed.
EVENT_LOCK_STRIPES = 64
_event_locks = tuple(threading.Lock() for _ in range(EVENT_LOCK_STRIPES))


@contextmanager
def event_lock(event_id: int):
    """Serialize registrations for one event within this process.

    Other processes are kept out by the row lock taken on the event inside
    the registration transaction.
    """
    with _event_locks[event_id % EVENT_LOCK_STRIPES]:
        yield


class RegistrationService:
    @staticmethod
    def register(identity, data: dict) -> Participant:
        user = IdentityService.resolve_user(identity)

        data = data or {}
        require_fields(data, ["eventId", "childName"])
        event_id = parse_int(data, "eventId")
        child_name = parse_text(data, "childName").strip()
        optional_attrs = {
            "child_age": parse_int(data, "childAge", minimum=0),
            "allergies": parse_text(data, "allergies"),
            "emergency_contact": parse_text(data, "emergencyContact"),
            "needs_food": parse_bool(data, "needsFood"),
            "medical_concerns": parse_text(data, "medicalConcerns"),
            "additional_information": parse_text(data, "additionalInformation"),
        }

        current_app.logger.info(f"Registration attempt: user {user.id} for event {event_id}")

        if not EventRepository.get_event(event_id):
            raise EventNotFoundError()

        with event_lock(event_id):
            try:
                event = EventRepository.get_event_for_update(event_id)
                if not event:
                    raise EventNotFoundError()

                # keyed on guardian and event, not on the child named
                if ParticipantRepository.find_by_user_and_event(user.id, event.id):
                    current_app.logger.warning(
                        f"User {user.id} already registered for event {event.id}"
                    )
                    raise DuplicateRegistrationError()

                if event.capacity is not None:
                    current_count = ParticipantRepository.count_by_event(event.id)
                    current_app.logger.info(
                        f"Capacity check for event {event.id}: {current_count}/{event.capacity}"
                    )
                    if current_count >= event.capacity:
                        raise EventFullError()

                attrs = {
                    "event_id": event.id,
                    "parent_user_id": user.id,
                    "child_name": child_name,
                    "registration_date": date.today(),
                    "status": RegistrationStatus.REGISTERED,
                }
                attrs.update({k: v for k, v in optional_attrs.items() if v is not None})
                participant = ParticipantRepository.register_for_event(attrs)
            except ApiError:
                db.session.rollback()
                raise
            except SQLAlchemyError as e:
                db.session.rollback()
                current_app.logger.error(
                    f"Failed to register user {user.id} for event {event_id}: {str(e)}",
                    exc_info=True,
                )
                raise RegistrationFailedError(str(e)) from e

        current_app.logger.info(
            f"Registered participant {participant.id} for user {user.id}, event {event_id}"
        )
        return participant
