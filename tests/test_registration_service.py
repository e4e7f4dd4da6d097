import threading
from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import (
    DuplicateRegistrationError,
    EventFullError,
    EventNotFoundError,
    InvalidFieldError,
    MissingFieldsError,
    RegistrationFailedError,
    UnauthenticatedError,
    UserNotFoundError,
)
from app.models import Participant
from app.repositories import ParticipantRepository
from app.services import RegistrationService, RosterService
from app.services import registration_service


def test_register_creates_participant(parent, make_event):
    event = make_event(capacity=10)

    participant = RegistrationService.register(
        "parent-uid", {"eventId": event.id, "childName": "Sam Rivera", "childAge": 10}
    )

    assert participant.id is not None
    assert participant.parent_user_id == parent.id
    assert participant.event_id == event.id
    assert participant.child_name == "Sam Rivera"
    assert participant.child_age == 10
    assert participant.registration_date == date.today()
    assert participant.status.value == "REGISTERED"


def test_register_leaves_unspecified_optional_fields_unset(parent, make_event):
    event = make_event()

    participant = RegistrationService.register(
        "parent-uid", {"eventId": event.id, "childName": "Sam Rivera"}
    )

    assert participant.child_age is None
    assert participant.allergies is None
    assert participant.emergency_contact is None
    assert participant.needs_food is None
    assert participant.medical_concerns is None
    assert participant.additional_information is None


def test_register_requires_identity(make_event):
    event = make_event()

    with pytest.raises(UnauthenticatedError):
        RegistrationService.register(None, {"eventId": event.id, "childName": "Sam"})


def test_register_unknown_user(make_event):
    event = make_event()

    with pytest.raises(UserNotFoundError):
        RegistrationService.register("stranger", {"eventId": event.id, "childName": "Sam"})


def test_register_unknown_event(parent):
    with pytest.raises(EventNotFoundError):
        RegistrationService.register("parent-uid", {"eventId": 999, "childName": "Sam"})


def test_register_requires_child_name(parent, make_event):
    event = make_event()

    with pytest.raises(MissingFieldsError) as excinfo:
        RegistrationService.register("parent-uid", {"eventId": event.id, "childName": "  "})

    assert excinfo.value.fields == ["childName"]


def test_second_registration_for_same_event_is_duplicate_regardless_of_child(parent, make_event):
    event = make_event()
    RegistrationService.register("parent-uid", {"eventId": event.id, "childName": "A B"})

    with pytest.raises(DuplicateRegistrationError):
        RegistrationService.register("parent-uid", {"eventId": event.id, "childName": "C D"})

    assert ParticipantRepository.count_by_event(event.id) == 1


def test_last_open_slot_is_accepted_then_event_is_full(make_user, make_event):
    event = make_event(capacity=3)
    for i in range(3):
        make_user(f"parent-{i}")
    make_user("late-parent")

    for i in range(2):
        RegistrationService.register(f"parent-{i}", {"eventId": event.id, "childName": f"Kid {i}"})
    RegistrationService.register("parent-2", {"eventId": event.id, "childName": "Kid 2"})

    with pytest.raises(EventFullError):
        RegistrationService.register("late-parent", {"eventId": event.id, "childName": "Kid 3"})

    assert ParticipantRepository.count_by_event(event.id) == 3


def test_unlimited_capacity_accepts_everyone(make_user, make_event):
    event = make_event(capacity=None)

    for i in range(25):
        make_user(f"family-{i}")
        RegistrationService.register(f"family-{i}", {"eventId": event.id, "childName": f"Child {i}"})

    assert ParticipantRepository.count_by_event(event.id) == 25


def test_duplicate_check_runs_before_capacity_check(make_user, make_event):
    event = make_event(capacity=2)
    make_user("first-parent")
    make_user("second-parent")
    RegistrationService.register("first-parent", {"eventId": event.id, "childName": "A B"})
    RegistrationService.register("second-parent", {"eventId": event.id, "childName": "C D"})

    # event is now full as well, but the duplicate is reported
    with pytest.raises(DuplicateRegistrationError):
        RegistrationService.register("first-parent", {"eventId": event.id, "childName": "E F"})


def test_registration_shows_up_in_roster_once(parent, admin, make_event):
    event = make_event(capacity=5)

    RegistrationService.register("parent-uid", {"eventId": event.id, "childName": "Riley Chen"})

    roster = RosterService.list_for_event("admin-uid", event.id)
    assert [(r["childFirstName"], r["childLastName"]) for r in roster] == [("Riley", "Chen")]


def test_persistence_failure_is_reported_as_registration_failed(parent, make_event, monkeypatch):
    event = make_event()

    def fail(attrs):
        raise OperationalError("INSERT INTO participants", {}, Exception("disk I/O error"))

    monkeypatch.setattr(ParticipantRepository, "register_for_event", staticmethod(fail))

    with pytest.raises(RegistrationFailedError) as excinfo:
        RegistrationService.register("parent-uid", {"eventId": event.id, "childName": "Sam"})

    assert "disk I/O error" in excinfo.value.message
    assert excinfo.value.status_code == 400


def test_concurrent_requests_cannot_oversell_last_slot(app, make_user, make_event):
    event = make_event(capacity=1)
    event_id = event.id
    identities = [f"racer-{i}" for i in range(6)]
    for identity in identities:
        make_user(identity)

    barrier = threading.Barrier(len(identities))
    outcomes = []
    outcomes_lock = threading.Lock()

    def attempt(identity):
        with app.app_context():
            barrier.wait()
            try:
                RegistrationService.register(identity, {"eventId": event_id, "childName": "Racer"})
                result = "registered"
            except EventFullError:
                result = "full"
            with outcomes_lock:
                outcomes.append(result)

    threads = [threading.Thread(target=attempt, args=(i,)) for i in identities]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("registered") == 1
    assert outcomes.count("full") == len(identities) - 1
    assert Participant.query.filter_by(event_id=event_id).count() == 1


def test_unknown_events_are_rejected_before_taking_an_event_lock(parent, monkeypatch):
    locked = []
    real_event_lock = registration_service.event_lock

    def recording_event_lock(event_id):
        locked.append(event_id)
        return real_event_lock(event_id)

    monkeypatch.setattr(registration_service, "event_lock", recording_event_lock)

    for event_id in range(1000, 1200):
        with pytest.raises(EventNotFoundError):
            RegistrationService.register("parent-uid", {"eventId": event_id, "childName": "Sam"})

    assert locked == []
    assert len(registration_service._event_locks) == registration_service.EVENT_LOCK_STRIPES



def test_fractional_event_id_is_rejected(parent, make_event):
    event = make_event()

    with pytest.raises(InvalidFieldError):
        RegistrationService.register("parent-uid", {"eventId": event.id + 0.9, "childName": "Sam"})

    assert ParticipantRepository.count_by_event(event.id) == 0


def test_whole_number_float_event_id_is_accepted(parent, make_event):
    event = make_event()

    participant = RegistrationService.register(
        "parent-uid", {"eventId": float(event.id), "childName": "Sam"}
    )

    assert participant.event_id == event.id


def test_event_id_beyond_integer_range_is_rejected(parent):
    with pytest.raises(InvalidFieldError):
        RegistrationService.register("parent-uid", {"eventId": 10 ** 30, "childName": "Sam"})
