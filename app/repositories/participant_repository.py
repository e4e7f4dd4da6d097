from typing import List, Optional
from app.extensions import db
from app.models import Participant


class ParticipantRepository:
    @staticmethod
    def find_by_id(participant_id: int) -> Optional[Participant]:
        return db.session.get(Participant, participant_id)

    @staticmethod
    def find_by_user_and_event(user_id: int, event_id: int) -> List[Participant]:
        """All registrations a guardian holds for an event, whichever child is named."""
        return Participant.query.filter_by(
            parent_user_id=user_id, event_id=event_id
        ).all()

    @staticmethod
    def find_by_event(event_id: int) -> List[Participant]:
        return (
            Participant.query.filter_by(event_id=event_id)
            .order_by(Participant.id.asc())
            .all()
        )

    @staticmethod
    def find_by_user(user_id: int) -> List[Participant]:
        return (
            Participant.query.filter_by(parent_user_id=user_id)
            .order_by(Participant.registration_date.desc(), Participant.id.desc())
            .all()
        )

    @staticmethod
    def count_by_event(event_id: int) -> int:
        return Participant.query.filter_by(event_id=event_id).count()

    @staticmethod
    def count_grouped_by_event() -> dict:
        rows = (
            db.session.query(Participant.event_id, db.func.count(Participant.id))
            .group_by(Participant.event_id)
            .all()
        )
        return {event_id: count for event_id, count in rows}

    @staticmethod
    def register_for_event(attrs) -> Participant:
        participant = Participant(**attrs)
        db.session.add(participant)
        db.session.commit()
        return participant

    @staticmethod
    def delete(participant: Participant):
        db.session.delete(participant)
        db.session.commit()

    @staticmethod
    def delete_by_event_id(event_id: int) -> int:
        """Deletes all registrations for an event without committing."""
        return Participant.query.filter_by(event_id=event_id).delete()
