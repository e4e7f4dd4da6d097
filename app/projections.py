"""Response shapes for the JSON API.

Storage entities never serialize themselves; every endpoint reshapes them
through the functions below so that the wire format stays independent of the
schema and relationship graphs are never walked implicitly.
"""
from typing import Tuple

from app.models.enums import UserType


def split_child_name(full_name: str) -> Tuple[str, str]:
    """Split a stored child name into (first, last).

    The first whitespace-delimited token is the first name and everything
    after it is the last name, so ``"Alex Johnson Smith"`` becomes
    ``("Alex", "Johnson Smith")`` and ``"Alex"`` becomes ``("Alex", "")``.
    """
    parts = (full_name or "").strip().split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def _iso(value):
    return value.isoformat() if value else None


def _price(value):
    return float(value) if value is not None else None


def event_to_dict(event):
    return {
        "id": event.id,
        "name": event.name,
        "date": _iso(event.date),
        "description": event.description,
        "location": event.location,
        "capacity": event.capacity,
        "ageGroup": event.age_group,
        "price": _price(event.price),
    }


def event_summary(event):
    # events are single-day: the one date is both start and end
    return {
        "id": event.id,
        "title": event.name,
        "startDate": _iso(event.date),
        "endDate": _iso(event.date),
        "description": event.description,
        "location": event.location,
        "capacity": event.capacity,
        "ageGroup": event.age_group,
        "price": _price(event.price),
    }


def registration_view(participant):
    first_name, last_name = split_child_name(participant.child_name)
    return {
        "id": participant.id,
        "childFirstName": first_name,
        "childLastName": last_name,
        "registrationDate": _iso(participant.registration_date),
        "status": participant.status.value if participant.status else None,
        "childAge": participant.child_age,
        "allergies": participant.allergies,
        "emergencyContact": participant.emergency_contact,
        "needsFood": participant.needs_food,
        "event": event_summary(participant.event) if participant.event else None,
    }


def participant_to_dict(participant):
    return {
        "id": participant.id,
        "eventId": participant.event_id,
        "parentUserId": participant.parent_user_id,
        "childName": participant.child_name,
        "registrationDate": _iso(participant.registration_date),
        "status": participant.status.value if participant.status else None,
        "childAge": participant.child_age,
        "allergies": participant.allergies,
        "emergencyContact": participant.emergency_contact,
        "needsFood": participant.needs_food,
        "medicalConcerns": participant.medical_concerns,
        "additionalInformation": participant.additional_information,
    }


def volunteer_to_dict(volunteer):
    return {
        "id": volunteer.id,
        "userId": volunteer.user_id,
        "role": volunteer.role,
        "availability": volunteer.availability,
        "skills": volunteer.skills,
        "notes": volunteer.notes,
        "signupDate": _iso(volunteer.signup_date),
        "status": volunteer.status.value if volunteer.status else None,
        "event": event_summary(volunteer.event) if volunteer.event else None,
    }


def child_to_dict(child):
    return {
        "id": child.id,
        "firstName": child.first_name,
        "lastName": child.last_name,
        "fullName": child.full_name,
        "age": child.age,
        "foodAllergies": child.food_allergies,
        "medicalConcerns": child.medical_concerns,
        "baseballExperience": child.baseball_experience,
        "additionalInformation": child.additional_information,
    }

def user_to_dict(user):
    return {
        "id": user.id,
        "externalId": user.external_id,
        "email": user.email,
        "fullName": user.full_name,
        "userType": user.user_type.value if user.user_type else None,
        "isAdmin": user.user_type == UserType.ADMIN,
        "roles": sorted(role.name.value for role in user.roles),
        "createdAt": _iso(user.created_at),
    }
