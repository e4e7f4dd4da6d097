from app.extensions import db
from .enums import RegistrationStatus


class Participant(db.Model):
    __tablename__ = "participants"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False, index=True)
    parent_user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    child_name = db.Column(db.String(255), nullable=False)
    registration_date = db.Column(db.Date, nullable=False)
    status = db.Column(
        db.Enum(RegistrationStatus),
        nullable=False,
        default=RegistrationStatus.REGISTERED,
    )
    child_age = db.Column(db.Integer, nullable=True)
    allergies = db.Column(db.Text, nullable=True)
    emergency_contact = db.Column(db.String(255), nullable=True)
    needs_food = db.Column(db.Boolean, nullable=True)
    medical_concerns = db.Column(db.Text, nullable=True)
    additional_information = db.Column(db.Text, nullable=True)

    # Relationships
    event = db.relationship("Event", backref=db.backref("participants", lazy=True))
    parent_user = db.relationship("User", backref=db.backref("participants", lazy=True))

    def __repr__(self):
        return (
            f"Participant("
            f"id={self.id}, "
            f"event_id={self.event_id}, "
            f"parent_user_id={self.parent_user_id}, "
            f"child_name='{self.child_name}', "
            f"status={self.status}, "
            f"registration_date={self.registration_date}"
            f")"
        )
