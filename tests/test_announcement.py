from conftest import days_from_today


def _announcement(**overrides):
    data = {
        "title": "Office move",
        "content": "We are moving to the 5th floor.",
        "category": "general",
        "author": "Facilities",
        "publishDate": days_from_today(0),
    }
    data.update(overrides)
    return data


def test_create_announcement_defaults(client, tenant_admin):
    resp = client.post("/announcements", headers=tenant_admin["headers"], json=_announcement())
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["isActive"] is True
    assert body["priority"] == "normal"
    assert body["audience"] == "all"


def test_announcement_date_and_enum_rules(client, tenant_admin):
    headers = tenant_admin["headers"]
    assert client.post("/announcements", headers=headers,
                       json=_announcement(publishDate=days_from_today(-1))).status_code == 400
    assert client.post("/announcements", headers=headers,
                       json=_announcement(expiryDate=days_from_today(0))).status_code == 400
    assert client.post("/announcements", headers=headers, json=_announcement(category="gossip")).status_code == 400
    assert client.post("/announcements", headers=headers, json=_announcement(priority="meh")).status_code == 400
    assert client.post("/announcements", headers=headers, json=_announcement(audience="aliens")).status_code == 400


def test_filter_update_and_delete(client, tenant_admin):
    headers = tenant_admin["headers"]
    client.post("/announcements", headers=headers, json=_announcement(category="policy", priority="high"))
    event = client.post("/announcements", headers=headers, json=_announcement(category="event")).get_json()

    policies = client.get("/announcements", headers=headers, query_string={"category": "policy"}).get_json()
    assert len(policies) == 1 and policies[0]["priority"] == "high"
    high = client.get("/announcements", headers=headers, query_string={"priority": "high"}).get_json()
    assert [a["category"] for a in high] == ["policy"]

    url = f"/announcements/{event['id']}"
    # expiry is checked against the stored publish date
    assert client.put(url, headers=headers, json={"expiryDate": days_from_today(-1)}).status_code == 400
    updated = client.put(url, headers=headers, json={"expiryDate": days_from_today(7), "isActive": False})
    assert updated.status_code == 200
    assert updated.get_json()["isActive"] is False

    assert client.delete(url, headers=headers).status_code == 204


def test_update_rejects_null_required_fields(client, tenant_admin):
    headers = tenant_admin["headers"]
    created = client.post("/announcements", headers=headers, json=_announcement()).get_json()
    url = f"/announcements/{created['id']}"
    for field in ("title", "content", "category", "priority", "audience", "author"):
        resp = client.put(url, headers=headers, json={field: None})
        assert resp.status_code == 400, field
