from typing import List, Optional
from app.extensions import db
from app.models import Event


class EventRepository:
    @staticmethod
    def get_events() -> List[Event]:
        return Event.query.order_by(Event.date.asc(), Event.id.asc()).all()

    @staticmethod
    def get_event(event_id: int) -> Optional[Event]:
        return db.session.get(Event, event_id)

    @staticmethod
    def get_event_for_update(event_id: int) -> Optional[Event]:
        """Load an event and lock its row until the current transaction ends."""
        return (
            Event.query.filter_by(id=event_id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    @staticmethod
    def create_event(attrs) -> Event:
        event = Event(**attrs)
        db.session.add(event)
        db.session.commit()
        return event

    @staticmethod
    def update_event(event: Event, attrs: dict) -> Event:
        for key, value in attrs.items():
            if hasattr(event, key):
                setattr(event, key, value)
        db.session.commit()
        return event

    @staticmethod
    def delete_event(event: Event):
        db.session.delete(event)
        db.session.commit()
