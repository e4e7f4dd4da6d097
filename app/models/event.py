from app.extensions import db


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    date = db.Column(db.Date, nullable=False)
    description = db.Column(db.Text, nullable=True)
    location = db.Column(db.String(255), nullable=True)
    # NULL means unlimited
    capacity = db.Column(db.Integer, nullable=True)
    age_group = db.Column(db.String(50), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    created_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    def __repr__(self):
        return f"<Event id={self.id} name={self.name!r} date={self.date} capacity={self.capacity}>"
