from typing import List
from flask import current_app
from app.exceptions import InvalidFieldError, UserNotFoundError
from app.models import User
from app.models.enums import Capability, TeamRole, UserType
from app.repositories import RoleRepository, UserRepository
from app.services.authorization import has_capability, require_capability
from app.services.identity_service import IdentityService


class UserService:
    @staticmethod
    def me(identity) -> User:
        return IdentityService.resolve_user(identity)

    @staticmethod
    def is_admin(identity) -> bool:
        user = IdentityService.resolve_user(identity)
        return has_capability(user, Capability.MANAGE_USERS)

    @staticmethod
    def get_users(identity) -> List[User]:
        admin = IdentityService.resolve_user(identity)
        require_capability(admin, Capability.MANAGE_USERS)
        return UserRepository.get_users()

    @staticmethod
    def set_user_type(identity, user_id: int, data: dict) -> User:
        admin = IdentityService.resolve_user(identity)
        require_capability(admin, Capability.MANAGE_USERS)

        value = (data if isinstance(data, dict) else {}).get("userType")
        try:
            user_type = UserType[str(value).upper()]
        except KeyError:
            raise InvalidFieldError(
                "userType", f"Invalid userType. Must be one of {[t.value for t in UserType]}"
            )

        user = UserRepository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")

        user.user_type = user_type
        UserRepository.save(user)
        current_app.logger.info(f"Admin {admin.id} set user {user.id} type to {user_type.value}")
        return user

    @staticmethod
    def set_user_roles(identity, user_id: int, data: dict) -> User:
        admin = IdentityService.resolve_user(identity)
        require_capability(admin, Capability.MANAGE_USERS)

        names = (data if isinstance(data, dict) else {}).get("roles")
        if not isinstance(names, list):
            raise InvalidFieldError("roles", "roles must be a list of team role names")
        try:
            requested = {TeamRole[str(name).upper()] for name in names}
        except KeyError:
            raise InvalidFieldError(
                "roles", f"Unknown team role. Must be one of {[r.value for r in TeamRole]}"
            )

        user = UserRepository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")

        roles = RoleRepository.find_by_names(list(requested))
        if len(roles) != len(requested):
            missing = requested - {role.name for role in roles}
            raise InvalidFieldError(
                "roles", f"Team roles not initialized: {sorted(r.value for r in missing)}"
            )

        user.roles = roles
        UserRepository.save(user)
        current_app.logger.info(
            f"Admin {admin.id} set user {user.id} roles to {sorted(r.value for r in requested)}"
        )
        return user

    @staticmethod
    def grant_admin(external_id: str, email=None):
        """Bootstrap an administrator outside any request. Returns ``(user, created)``."""
        user, created = IdentityService.sync(external_id, {"email": email})
        if user.user_type != UserType.ADMIN:
            user.user_type = UserType.ADMIN
            UserRepository.save(user)
        current_app.logger.info(f"User {user.id} ({external_id}) granted admin")
        return user, created
