from hrms.models import User

NEW_EMPLOYEE = {
    "firstName": "John",
    "lastName": "Smith",
    "email": "john@acme.com",
    "role": "Analyst",
    "department": "Finance",
    "hireDate": "2024-03-01",
}


def test_create_employee_defaults_and_user_account(client, app, tenant_admin, monkeypatch):
    sent = []
    monkeypatch.setattr(
        "hrms.employee.services.send_employee_welcome_email",
        lambda email, first_name, temp_password, login_url: sent.append((email, temp_password)) or True,
    )

    resp = client.post("/employees", headers=tenant_admin["headers"], json=NEW_EMPLOYEE)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "Active"
    assert body["leaveBalances"] == {"Vacation": 15, "Sick": 10, "Personal": 5}
    assert body["tenantId"] == tenant_admin["tenant_id"]
    assert body["userId"] is not None

    assert len(sent) == 1
    email, temp_password = sent[0]
    assert email == "john@acme.com"
    login = client.post("/auth/login", json={"email": "john@acme.com", "password": temp_password})
    assert login.status_code == 200
    assert login.get_json()["user"]["role"] == "employee"
    assert login.get_json()["user"]["employeeId"] == body["id"]


def test_create_employee_links_existing_user_in_same_tenant(client, app, tenant_admin):
    client.post("/auth/register", headers=tenant_admin["headers"], json={
        "email": "john@acme.com", "password": "pw", "role": "hr",
    })
    resp = client.post("/employees", headers=tenant_admin["headers"], json=NEW_EMPLOYEE)
    assert resp.status_code == 201

    with app.app_context():
        user = User.query.filter_by(email="john@acme.com").first()
        assert user.employee_id == resp.get_json()["id"]
        assert user.role == "hr"


def test_create_employee_does_not_link_user_from_other_tenant(client, app, make_tenant):
    acme = make_tenant("Acme", "a@acme.com")
    make_tenant("Globex", "shared@globex.com")

    resp = client.post("/employees", headers=acme["headers"], json=dict(NEW_EMPLOYEE, email="shared@globex.com"))
    assert resp.status_code == 201
    assert resp.get_json()["userId"] is None

    with app.app_context():
        user = User.query.filter_by(email="shared@globex.com").first()
        assert user.employee_id != resp.get_json()["id"]


def test_leave_policy_overrides_initial_balance(client, tenant_admin):
    client.post("/leave-policies", headers=tenant_admin["headers"], json={
        "name": "Generous vacation", "description": "More days", "leaveType": "Vacation", "accrualRate": 25,
    })
    resp = client.post("/employees", headers=tenant_admin["headers"], json=NEW_EMPLOYEE)
    assert resp.get_json()["leaveBalances"]["Vacation"] == 25
    assert resp.get_json()["leaveBalances"]["Sick"] == 10


def test_create_employee_validation(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    missing = client.post("/employees", headers=headers, json={"firstName": "X"})
    assert missing.status_code == 400

    dup = client.post("/employees", headers=headers, json=dict(NEW_EMPLOYEE, email="jane@acme.com"))
    assert dup.status_code == 400

    bad_status = client.post("/employees", headers=headers, json=dict(NEW_EMPLOYEE, status="Retired"))
    assert bad_status.status_code == 400

    bad_date = client.post("/employees", headers=headers, json=dict(NEW_EMPLOYEE, hireDate="yesterday"))
    assert bad_date.status_code == 400


def test_list_employees_ordered_by_name(client, tenant_admin, employee):
    client.post("/employees", headers=tenant_admin["headers"], json=dict(NEW_EMPLOYEE, lastName="Adams"))
    resp = client.get("/employees", headers=tenant_admin["headers"])
    names = [e["lastName"] for e in resp.get_json()]
    assert names == sorted(names)
    assert set(names) == {"Admin", "Doe", "Adams"}


def test_update_employee_merges_leave_balances(client, tenant_admin, employee):
    url = f"/employees/{employee['id']}"
    resp = client.put(url, headers=tenant_admin["headers"], json={
        "department": "Platform", "leaveBalances": {"Sick": 3},
    })
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["department"] == "Platform"
    assert body["leaveBalances"] == {"Vacation": 15, "Sick": 3, "Personal": 5}

    clash = client.put(url, headers=tenant_admin["headers"], json={"email": "admin@acme.com"})
    assert clash.status_code == 400


def test_delete_employee_unlinks_user(client, app, tenant_admin, employee):
    resp = client.delete(f"/employees/{employee['id']}", headers=tenant_admin["headers"])
    assert resp.status_code == 204

    with app.app_context():
        user = User.query.filter_by(email="jane@acme.com").first()
        assert user is not None
        assert user.employee_id is None

    missing = client.get(f"/employees/{employee['id']}", headers=tenant_admin["headers"])
    assert missing.status_code == 404
    assert missing.get_json()["message"] == f'Employee with ID "{employee["id"]}" not found for this tenant.'


def test_update_employee_rejects_null_required_fields(client, tenant_admin, employee):
    url = f"/employees/{employee['id']}"
    for field in ("firstName", "role", "department", "status"):
        resp = client.put(url, headers=tenant_admin["headers"], json={field: None})
        assert resp.status_code == 400, field
    assert client.put(url, headers=tenant_admin["headers"], json={"phone": None}).status_code == 200


def test_leave_balances_must_be_known_non_negative_numbers(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    for balances in ({"Vacation": "lots"}, {"Vacation": -1}, {"Sabbatical": 3}, {"Sick": None}, ["Vacation"]):
        created = client.post("/employees", headers=headers, json=dict(NEW_EMPLOYEE, leaveBalances=balances))
        assert created.status_code == 400, balances
        updated = client.put(f"/employees/{employee['id']}", headers=headers, json={"leaveBalances": balances})
        assert updated.status_code == 400, balances

    ok = client.post("/employees", headers=headers, json=dict(NEW_EMPLOYEE, leaveBalances={"Vacation": "20"}))
    assert ok.status_code == 201
    assert ok.get_json()["leaveBalances"]["Vacation"] == 20
