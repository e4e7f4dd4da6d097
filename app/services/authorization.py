from app.exceptions import ForbiddenError
from app.models.enums import Capability, UserType

CAPABILITIES = {
    UserType.USER: frozenset(),
    UserType.ADMIN: frozenset(Capability),
}


def has_capability(user, capability: Capability) -> bool:
    return capability in CAPABILITIES.get(user.user_type, frozenset())


def require_capability(user, capability: Capability):
    if not has_capability(user, capability):
        raise ForbiddenError("Access denied. Admin privileges required.")
