from app.extensions import db
from .enums import UserType
from .role import user_roles


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    external_id = db.Column(db.String(128), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), nullable=True)
    full_name = db.Column(db.String(255), nullable=True)
    user_type = db.Column(db.Enum(UserType), nullable=False, default=UserType.USER)
    updated_at = db.Column(
        db.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )
    created_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now()
    )

    roles = db.relationship("Role", secondary=user_roles, lazy="selectin")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return self.id == other.id
        return False

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return (
            f"User("
            f"id={self.id}, "
            f"external_id='{self.external_id}', "
            f"user_type={self.user_type}"
            f")"
        )
