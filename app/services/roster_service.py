from typing import List
from sqlalchemy.exc import SQLAlchemyError
from app.exceptions import EventNotFoundError, InternalError
from app.models.enums import Capability
from app.projections import registration_view
from app.repositories import EventRepository, ParticipantRepository
from app.services.authorization import require_capability
from app.services.identity_service import IdentityService


class RosterService:
    @staticmethod
    def list_for_event(identity, event_id: int) -> List[dict]:
        user = IdentityService.resolve_user(identity)
        require_capability(user, Capability.VIEW_ROSTER)

        event = EventRepository.get_event(event_id)
        if not event:
            raise EventNotFoundError()

        try:
            participants = ParticipantRepository.find_by_event(event.id)
            return [registration_view(p) for p in participants]
        except SQLAlchemyError as e:
            raise InternalError(f"Failed to get participants - {str(e)}") from e

    @staticmethod
    def list_for_current_user(identity) -> List[dict]:
        user = IdentityService.resolve_user(identity)
        try:
            participants = ParticipantRepository.find_by_user(user.id)
            return [registration_view(p) for p in participants]
        except SQLAlchemyError as e:
            raise InternalError(f"Failed to get registrations - {str(e)}") from e
