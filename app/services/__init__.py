from app.services.cancellation_service import CancellationService
from app.services.child_service import ChildService
from app.services.event_service import EventService
from app.services.identity_service import IdentityService
from app.services.registration_service import RegistrationService
from app.services.role_service import RoleService
from app.services.roster_service import RosterService
from app.services.user_service import UserService
from app.services.volunteer_service import VolunteerService
