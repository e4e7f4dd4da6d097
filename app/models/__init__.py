from app.models.child import Child
from app.models.event import Event
from app.models.participant import Participant
from app.models.role import Role, user_roles
from app.models.user import User
from app.models.volunteer import Volunteer
from app.models.enums import Capability, RegistrationStatus, TeamRole, UserType
