from typing import List, Optional
from app.extensions import db
from app.models import Volunteer


class VolunteerRepository:
    @staticmethod
    def find_by_event_and_user(event_id: int, user_id: int) -> Optional[Volunteer]:
        return Volunteer.query.filter_by(event_id=event_id, user_id=user_id).first()

    @staticmethod
    def find_by_event(event_id: int) -> List[Volunteer]:
        return (
            Volunteer.query.filter_by(event_id=event_id)
            .order_by(Volunteer.id.asc())
            .all()
        )

    @staticmethod
    def find_by_user(user_id: int) -> List[Volunteer]:
        return (
            Volunteer.query.filter_by(user_id=user_id)
            .order_by(Volunteer.signup_date.desc(), Volunteer.id.desc())
            .all()
        )

    @staticmethod
    def count_grouped_by_event() -> dict:
        rows = (
            db.session.query(Volunteer.event_id, db.func.count(Volunteer.id))
            .group_by(Volunteer.event_id)
            .all()
        )
        return {event_id: count for event_id, count in rows}

    @staticmethod
    def add(attrs) -> Volunteer:
        volunteer = Volunteer(**attrs)
        db.session.add(volunteer)
        db.session.commit()
        return volunteer

    @staticmethod
    def delete_by_event_id(event_id: int) -> int:
        """Deletes all volunteer signups for an event without committing."""
        return Volunteer.query.filter_by(event_id=event_id).delete()
