from decimal import Decimal
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.exceptions import EventNotFoundError, InternalError, InvalidFieldError
from app.models import Event
from app.models.enums import Capability
from app.repositories import EventRepository, ParticipantRepository, VolunteerRepository
from app.services.authorization import require_capability
from app.services.identity_service import IdentityService
from app.utils.validation import (
    parse_date,
    parse_int,
    parse_price,
    parse_text,
    require_fields,
)
from typing import List


class EventService:
    @staticmethod
    def get_events() -> List[Event]:
        return EventRepository.get_events()

    @staticmethod
    def get_event(event_id: int) -> Event:
        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()
        return event

    @staticmethod
    def _event_attrs(data: dict) -> dict:
        """Validate the writable event fields present in ``data``."""
        if not isinstance(data, dict):
            raise InvalidFieldError("body", "Request body must be a JSON object")
        attrs = {}
        if "name" in data:
            name = parse_text(data, "name")
            if not name or not name.strip():
                raise InvalidFieldError("name", "name must not be empty")
            attrs["name"] = name.strip()
        if "date" in data:
            event_date = parse_date(data, "date")
            if event_date is None:
                raise InvalidFieldError("date", "date must not be empty")
            attrs["date"] = event_date
        for field, column in (
            ("description", "description"),
            ("location", "location"),
            ("ageGroup", "age_group"),
        ):
            if field in data:
                attrs[column] = parse_text(data, field)
        if "capacity" in data:
            attrs["capacity"] = parse_int(data, "capacity", minimum=1)
        if "price" in data:
            price = parse_price(data, "price")
            attrs["price"] = price if price is not None else Decimal("0")
        return attrs

    @staticmethod
    def create_event(identity, data: dict) -> Event:
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.MANAGE_EVENTS)

        data = data or {}
        require_fields(data, ["name", "date"])
        attrs = EventService._event_attrs(data)
        attrs.setdefault("price", Decimal("0"))

        event = EventRepository.create_event(attrs)
        current_app.logger.info(f"User {user.id} created event {event.id}")
        return event

    @staticmethod
    def update_event(identity, event_id: int, data: dict) -> Event:
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.MANAGE_EVENTS)

        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()

        attrs = EventService._event_attrs(data or {})
        if not attrs:
            return event

        event = EventRepository.update_event(event, attrs)
        current_app.logger.info(f"User {user.id} updated event {event.id}: {sorted(attrs)}")
        return event

    @staticmethod
    def delete_event(identity, event_id: int):
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.MANAGE_EVENTS)

        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()

        try:
            removed_participants = ParticipantRepository.delete_by_event_id(event_id)
            removed_volunteers = VolunteerRepository.delete_by_event_id(event_id)
            EventRepository.delete_event(event)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error deleting event {event_id}: {str(e)}", exc_info=True)
            raise InternalError(f"An error occurred while deleting the event: {str(e)}") from e

        current_app.logger.info(
            f"User {user.id} deleted event {event_id} "
            f"({removed_participants} registrations, {removed_volunteers} volunteers)"
        )

    @staticmethod
    def event_stats(identity) -> List[dict]:
        """Per-event registration and volunteer totals for the admin dashboard."""
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.VIEW_STATS)

        try:
            events = EventRepository.get_events()
            registrations = ParticipantRepository.count_grouped_by_event()
            volunteers = VolunteerRepository.count_grouped_by_event()
        except SQLAlchemyError as e:
            raise InternalError(f"Failed to get event statistics - {str(e)}") from e

        stats = []
        for event in events:
            count = registrations.get(event.id, 0)
            price = float(event.price or 0)
            stats.append(
                {
                    "eventId": event.id,
                    "registrationCount": count,
                    "volunteerCount": volunteers.get(event.id, 0),
                    "revenue": round(count * price, 2),
                    "capacity": event.capacity,
                    "isFullyBooked": event.capacity is not None and count >= event.capacity,
                }
            )
        return stats
