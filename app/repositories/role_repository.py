from typing import List, Optional
from app.extensions import db
from app.models import Role
from app.models.enums import TeamRole


class RoleRepository:
    @staticmethod
    def find_by_name(name: TeamRole) -> Optional[Role]:
        return Role.query.filter_by(name=name).first()

    @staticmethod
    def find_by_names(names: List[TeamRole]) -> List[Role]:
        if not names:
            return []
        return Role.query.filter(Role.name.in_(names)).all()

    @staticmethod
    def create(name: TeamRole) -> Role:
        role = Role(name=name)
        db.session.add(role)
        db.session.commit()
        return role
