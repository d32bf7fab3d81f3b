from conftest import days_from_today


def _review(employee_id, **overrides):
    data = {
        "employeeId": employee_id,
        "reviewer": "Ada Admin",
        "reviewPeriod": "2024 H1",
        "rating": 4,
        "comments": "Consistently strong delivery.",
    }
    data.update(overrides)
    return data


def test_create_review_defaults(client, tenant_admin, employee):
    resp = client.post("/reviews", headers=tenant_admin["headers"], json=_review(employee["id"]))
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["reviewDate"] == days_from_today(0)
    assert body["ratings"] == {}
    assert body["linkedGoals"] == []


def test_review_rating_range(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    for rating in (0, 6, 3.5, "five"):
        assert client.post("/reviews", headers=headers, json=_review(employee["id"], rating=rating)).status_code == 400
    assert client.post("/reviews", headers=headers, json=_review(employee["id"], reviewer="")).status_code == 400


def test_review_linked_goals_must_exist(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    goal = client.post("/goals", headers=headers, json={
        "employeeId": employee["id"], "objective": "Mentor", "dueDate": days_from_today(20), "category": "Team",
    }).get_json()

    missing = client.post("/reviews", headers=headers, json=_review(employee["id"], linkedGoals=[goal["id"], 9999]))
    assert missing.status_code == 400
    assert "9999" in missing.get_json()["message"]

    ok = client.post("/reviews", headers=headers, json=_review(employee["id"], linkedGoals=[goal["id"]],
                                                            ratings={"teamwork": 5}))
    assert ok.status_code == 201
    assert ok.get_json()["linkedGoals"] == [goal["id"]]
    assert ok.get_json()["ratings"] == {"teamwork": 5}

    review_id = ok.get_json()["id"]
    assert client.put(f"/reviews/{review_id}", headers=headers, json={"rating": 9}).status_code == 400
    assert client.put(f"/reviews/{review_id}", headers=headers, json={"linkedGoals": [424242]}).status_code == 400
    updated = client.put(f"/reviews/{review_id}", headers=headers, json={"rating": 5, "strengths": "Focus"})
    assert updated.get_json()["rating"] == 5
    assert updated.get_json()["strengths"] == "Focus"


def test_list_and_delete_reviews(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    client.post("/reviews", headers=headers, json=_review(employee["id"]))
    client.post("/reviews", headers=headers, json=_review(tenant_admin["employee_id"]))

    mine = client.get("/reviews", headers=headers, query_string={"employeeId": employee["id"]}).get_json()
    assert len(mine) == 1
    assert client.delete(f"/reviews/{mine[0]['id']}", headers=headers).status_code == 204
    assert len(client.get("/reviews", headers=headers).get_json()) == 1


def test_infinite_rating_is_a_validation_error(client, tenant_admin, employee):
    body = (
        '{"employeeId": %d, "reviewer": "Ada", "reviewPeriod": "2024 H1", '
        '"rating": 1e999, "comments": "Fine."}' % employee["id"]
    )
    resp = client.post("/reviews", headers=tenant_admin["headers"], content_type="application/json", data=body)
    assert resp.status_code == 400


def test_update_review_rejects_null_required_fields(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    review = client.post("/reviews", headers=headers, json=_review(employee["id"])).get_json()
    for field in ("reviewer", "reviewPeriod", "comments"):
        assert client.put(f"/reviews/{review['id']}", headers=headers, json={field: None}).status_code == 400
    assert client.put(f"/reviews/{review['id']}", headers=headers, json={"rating": None}).status_code == 400
