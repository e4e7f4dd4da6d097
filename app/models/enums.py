from enum import Enum


class UserType(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class RegistrationStatus(Enum):
    REGISTERED = "REGISTERED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    WAITLISTED = "WAITLISTED"


class TeamRole(Enum):
    TEAM_FUNDRAISING = "TEAM_FUNDRAISING"
    TEAM_SOCIAL_MEDIA = "TEAM_SOCIAL_MEDIA"
    TEAM_COACH = "TEAM_COACH"
    TEAM_EVENT_COORDINATION = "TEAM_EVENT_COORDINATION"


class Capability(Enum):
    VIEW_ROSTER = "view_roster"
    VIEW_STATS = "view_stats"
    MANAGE_EVENTS = "manage_events"
    MANAGE_USERS = "manage_users"
