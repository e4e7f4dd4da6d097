def test_volunteer_signup_and_listing(client, auth_headers, parent, make_event):
    event = make_event(name="Fall Tournament")
    headers = auth_headers("parent-uid")

    response = client.post(
        "/api/volunteers",
        json={
            "eventId": event.id,
            "role": "Event Volunteer",
            "availability": "Full event duration",
            "notes": "Contact via: email",
        },
        headers=headers,
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["role"] == "Event Volunteer"
    assert body["skills"] is None
    assert body["event"]["title"] == "Fall Tournament"

    mine = client.get("/api/volunteers/me", headers=headers).get_json()
    assert [v["id"] for v in mine] == [body["id"]]


def test_volunteer_signup_is_once_per_event(client, auth_headers, parent, make_event):
    event = make_event()
    headers = auth_headers("parent-uid")

    assert client.post("/api/volunteers", json={"eventId": event.id}, headers=headers).status_code == 200
    again = client.post("/api/volunteers", json={"eventId": event.id}, headers=headers)

    assert again.status_code == 400
    assert again.get_json()["reason"] == "duplicate_volunteer"


def test_volunteer_signup_for_missing_event(client, auth_headers, parent):
    response = client.post("/api/volunteers", json={"eventId": 404}, headers=auth_headers("parent-uid"))

    assert response.status_code == 404


def test_volunteer_roster_is_admin_only(client, auth_headers, parent, admin, make_event):
    event = make_event()
    client.post("/api/volunteers", json={"eventId": event.id}, headers=auth_headers("parent-uid"))

    forbidden = client.get(f"/api/volunteers/event/{event.id}", headers=auth_headers("parent-uid"))
    allowed = client.get(f"/api/volunteers/event/{event.id}", headers=auth_headers("admin-uid"))

    assert forbidden.status_code == 403
    assert allowed.status_code == 200
    assert [v["userId"] for v in allowed.get_json()] == [parent.id]
