from datetime import date
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.exceptions import (
    CancellationFailedError,
    EventAlreadyOccurredError,
    ForbiddenError,
    ParticipantNotFoundError,
)
from app.repositories import ParticipantRepository
from app.services.identity_service import IdentityService


class CancellationService:
    @staticmethod
    def cancel(identity, participant_id: int):
        user = IdentityService.resolve_user(identity)

        participant = ParticipantRepository.find_by_id(participant_id)
        if not participant:
            raise ParticipantNotFoundError()

        if participant.parent_user_id != user.id:
            current_app.logger.warning(
                f"User {user.id} attempted to cancel registration {participant_id} owned by user {participant.parent_user_id}"
            )
            raise ForbiddenError("You can only cancel your own registrations")

        if participant.event.date < date.today():
            raise EventAlreadyOccurredError()

        try:
            ParticipantRepository.delete(participant)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(
                f"Failed to cancel registration {participant_id}: {str(e)}", exc_info=True
            )
            raise CancellationFailedError(str(e)) from e

        current_app.logger.info(f"User {user.id} cancelled registration {participant_id}")
