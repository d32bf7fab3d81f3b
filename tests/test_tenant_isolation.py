import pytest

from conftest import days_from_today


@pytest.fixture
def two_tenants(make_tenant):
    return make_tenant("Acme", "a@acme.com"), make_tenant("Globex", "g@globex.com")


def test_records_are_invisible_across_tenants(client, two_tenants):
    acme, globex = two_tenants
    goal = client.post("/goals", headers=acme["headers"], json={
        "employeeId": acme["employee_id"],
        "objective": "Acme only",
        "dueDate": days_from_today(10),
        "category": "Team",
    }).get_json()

    assert client.get(f"/goals/{goal['id']}", headers=globex["headers"]).status_code == 404
    assert client.get("/goals", headers=globex["headers"]).get_json() == []
    assert client.put(f"/goals/{goal['id']}", headers=globex["headers"], json={"objective": "x"}).status_code == 404
    assert client.delete(f"/goals/{goal['id']}", headers=globex["headers"]).status_code == 404

    # still there for its owner
    assert client.get(f"/goals/{goal['id']}", headers=acme["headers"]).status_code == 200


def test_cannot_reference_employee_of_other_tenant(client, two_tenants):
    acme, globex = two_tenants
    resp = client.post("/goals", headers=globex["headers"], json={
        "employeeId": acme["employee_id"],
        "objective": "Sneaky",
        "dueDate": days_from_today(10),
        "category": "Team",
    })
    assert resp.status_code == 404

    employees = client.get("/employees", headers=globex["headers"]).get_json()
    assert [e["id"] for e in employees] == [globex["employee_id"]]


def test_client_supplied_tenant_id_is_ignored(client, two_tenants):
    acme, globex = two_tenants
    resp = client.post("/announcements", headers=acme["headers"], json={
        "title": "Hello",
        "content": "World",
        "category": "general",
        "author": "HR",
        "publishDate": days_from_today(0),
        "tenantId": globex["tenant_id"],
    })
    assert resp.status_code == 201
    assert resp.get_json()["tenantId"] == acme["tenant_id"]
    assert client.get("/announcements", headers=globex["headers"]).get_json() == []


@pytest.mark.parametrize("path", [
    "/employees", "/goals", "/reviews", "/leave-requests", "/leave-policies", "/holidays",
    "/timesheets", "/announcements", "/recognitions", "/onboarding-tasks", "/documents",
])
def test_missing_scoped_record_reports_not_found(client, tenant_admin, path):
    resp = client.delete(f"{path}/424242", headers=tenant_admin["headers"])
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False
    assert "not found for this tenant" in resp.get_json()["message"]


def test_protected_routes_require_token(client):
    assert client.get("/employees").status_code == 401
    assert client.post("/goals", json={}).status_code == 401
