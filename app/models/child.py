from app.extensions import db


class Child(db.Model):
    """A child profile saved by a guardian for filling in registrations."""

    __tablename__ = "children"

    id = db.Column(db.Integer, primary_key=True)
    parent_user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=True)
    age = db.Column(db.Integer, nullable=True)
    food_allergies = db.Column(db.Text, nullable=True)
    medical_concerns = db.Column(db.Text, nullable=True)
    baseball_experience = db.Column(db.String(255), nullable=True)
    additional_information = db.Column(db.Text, nullable=True)
    created_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now()
    )

    parent_user = db.relationship("User", backref=db.backref("children", lazy=True))

    @property
    def full_name(self):
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __repr__(self):
        return f"<Child id={self.id} parent_user_id={self.parent_user_id} first_name='{self.first_name}'>"
