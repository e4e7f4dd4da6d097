from app.extensions import db
from .enums import TeamRole


user_roles = db.Table(
    "user_roles",
    db.Column("user_id", db.Integer, db.ForeignKey("users.id"), primary_key=True),
    db.Column("role_id", db.Integer, db.ForeignKey("roles.id"), primary_key=True),
)


class Role(db.Model):
    __tablename__ = "roles"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Enum(TeamRole), unique=True, nullable=False)

    def __repr__(self):
        return f"<Role {self.name.value if self.name else None}>"
