from app.extensions import db
from .enums import RegistrationStatus


class Volunteer(db.Model):
    __tablename__ = "volunteers"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    role = db.Column(db.String(100), nullable=True)
    availability = db.Column(db.String(255), nullable=True)
    skills = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    signup_date = db.Column(db.Date, nullable=False)
    status = db.Column(
        db.Enum(RegistrationStatus),
        nullable=False,
        default=RegistrationStatus.REGISTERED,
    )

    # Relationships
    event = db.relationship("Event", backref=db.backref("volunteers", lazy=True))
    user = db.relationship("User", backref=db.backref("volunteer_signups", lazy=True))

    def __repr__(self):
        return f"<Volunteer event_id={self.event_id} user_id={self.user_id}>"
