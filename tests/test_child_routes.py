from app.models import Child


def _add_child(client, headers, **fields):
    payload = {"firstName": "Jordan", "lastName": "Lee", "age": 9}
    payload.update(fields)
    return client.post("/api/children", json=payload, headers=headers)


def test_add_and_list_children(client, auth_headers, parent):
    headers = auth_headers("parent-uid")

    response = _add_child(
        client,
        headers,
        foodAllergies="peanuts",
        medicalConcerns="asthma inhaler",
        baseballExperience="2 seasons",
    )

    assert response.status_code == 201
    body = response.get_json()
    assert body["fullName"] == "Jordan Lee"
    assert body["foodAllergies"] == "peanuts"
    assert body["baseballExperience"] == "2 seasons"
    assert body["additionalInformation"] is None

    _add_child(client, headers, firstName="Ava", lastName=None, age=6)
    listed = client.get("/api/children", headers=headers).get_json()
    assert [c["fullName"] for c in listed] == ["Ava", "Jordan Lee"]


def test_children_are_listed_per_guardian(client, auth_headers, parent, make_user):
    make_user("other-parent")
    _add_child(client, auth_headers("parent-uid"))

    listed = client.get("/api/children", headers=auth_headers("other-parent"))

    assert listed.status_code == 200
    assert listed.get_json() == []


def test_add_child_requires_first_name(client, auth_headers, parent):
    response = client.post("/api/children", json={"lastName": "Lee"}, headers=auth_headers("parent-uid"))

    assert response.status_code == 400
    assert response.get_json()["missing_fields"] == ["firstName"]


def test_add_child_rejects_negative_age(client, auth_headers, parent):
    response = _add_child(client, auth_headers("parent-uid"), age=-1)

    assert response.status_code == 400
    assert response.get_json()["reason"] == "invalid_field"


def test_update_child_changes_only_supplied_fields(client, auth_headers, parent):
    headers = auth_headers("parent-uid")
    child_id = _add_child(client, headers, foodAllergies="peanuts").get_json()["id"]

    response = client.put(f"/api/children/{child_id}", json={"age": 10}, headers=headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body["age"] == 10
    assert body["foodAllergies"] == "peanuts"
    assert body["fullName"] == "Jordan Lee"


def test_update_child_rejects_blank_first_name(client, auth_headers, parent):
    headers = auth_headers("parent-uid")
    child_id = _add_child(client, headers).get_json()["id"]

    response = client.put(f"/api/children/{child_id}", json={"firstName": "  "}, headers=headers)

    assert response.status_code == 400


def test_only_the_guardian_can_change_a_child(client, auth_headers, parent, make_user):
    make_user("other-parent")
    child_id = _add_child(client, auth_headers("parent-uid")).get_json()["id"]
    other = auth_headers("other-parent")

    update = client.put(f"/api/children/{child_id}", json={"age": 12}, headers=other)
    delete = client.delete(f"/api/children/{child_id}", headers=other)

    assert update.status_code == 403
    assert delete.status_code == 403
    assert Child.query.filter_by(id=child_id).count() == 1


def test_remove_child(client, auth_headers, parent):
    headers = auth_headers("parent-uid")
    child_id = _add_child(client, headers).get_json()["id"]

    response = client.delete(f"/api/children/{child_id}", headers=headers)

    assert response.status_code == 200
    assert Child.query.filter_by(id=child_id).count() == 0
    assert client.delete(f"/api/children/{child_id}", headers=headers).status_code == 404


def test_children_require_sign_in(client):
    assert client.get("/api/children").status_code == 401


def test_child_profile_fills_in_a_registration(client, auth_headers, parent, make_event):
    headers = auth_headers("parent-uid")
    event = make_event()
    child = _add_child(client, headers, foodAllergies="dairy", medicalConcerns="none").get_json()

    response = client.post(
        "/api/participants",
        json={
            "eventId": event.id,
            "childName": child["fullName"],
            "childAge": child["age"],
            "allergies": child["foodAllergies"],
            "medicalConcerns": child["medicalConcerns"],
        },
        headers=headers,
    )

    assert response.status_code == 200
    assert response.get_json()["childName"] == "Jordan Lee"
    assert response.get_json()["allergies"] == "dairy"
