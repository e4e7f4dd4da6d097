from flask import current_app
from app.models.enums import TeamRole
from app.repositories import RoleRepository


class RoleService:
    @staticmethod
    def seed_team_roles():
        """Create the default team roles that are missing. Safe to run repeatedly."""
        current_app.logger.info("Initializing database with default team roles...")
        created = []
        for name in TeamRole:
            if RoleRepository.find_by_name(name) is None:
                RoleRepository.create(name)
                current_app.logger.info(f"Created {name.value}")
                created.append(name)
        current_app.logger.info("Team role initialization completed")
        return created
