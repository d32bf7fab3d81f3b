from conftest import days_from_today


def _task(employee_id, **overrides):
    data = {"employeeId": employee_id, "task": "Set up laptop", "dueDate": days_from_today(3)}
    data.update(overrides)
    return data


def test_create_task_defaults_and_rules(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    resp = client.post("/onboarding-tasks", headers=headers, json=_task(employee["id"]))
    assert resp.status_code == 201
    assert resp.get_json()["completed"] is False

    # today is allowed, yesterday is not
    assert client.post("/onboarding-tasks", headers=headers,
                       json=_task(employee["id"], dueDate=days_from_today(0))).status_code == 201
    assert client.post("/onboarding-tasks", headers=headers,
                       json=_task(employee["id"], dueDate=days_from_today(-1))).status_code == 400
    assert client.post("/onboarding-tasks", headers=headers, json=_task(9999)).status_code == 404


def test_past_due_date_only_for_completed_tasks(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    task = client.post("/onboarding-tasks", headers=headers, json=_task(employee["id"])).get_json()
    url = f"/onboarding-tasks/{task['id']}"

    assert client.put(url, headers=headers, json={"dueDate": days_from_today(-2)}).status_code == 400
    done = client.put(url, headers=headers, json={"dueDate": days_from_today(-2), "completed": True})
    assert done.status_code == 200
    assert done.get_json()["completed"] is True
    assert client.put(url, headers=headers, json={"employeeId": 9999}).status_code == 404


def test_list_filters_by_completion(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    client.post("/onboarding-tasks", headers=headers, json=_task(employee["id"], task="Sign contract", completed=True))
    client.post("/onboarding-tasks", headers=headers, json=_task(employee["id"], task="Meet team", dueDate=days_from_today(1)))
    client.post("/onboarding-tasks", headers=headers, json=_task(tenant_admin["employee_id"], task="Admin chores"))

    open_tasks = client.get("/onboarding-tasks", headers=headers,
                            query_string={"employeeId": employee["id"], "completed": "false"}).get_json()
    assert [t["task"] for t in open_tasks] == ["Meet team"]

    done = client.get("/onboarding-tasks", headers=headers, query_string={"completed": "true"}).get_json()
    assert [t["task"] for t in done] == ["Sign contract"]

    assert client.delete(f"/onboarding-tasks/{done[0]['id']}", headers=headers).status_code == 204


def test_update_rejects_null_task(client, tenant_admin, employee):
    headers = tenant_admin["headers"]
    task = client.post("/onboarding-tasks", headers=headers, json=_task(employee["id"])).get_json()
    url = f"/onboarding-tasks/{task['id']}"
    assert client.put(url, headers=headers, json={"task": None}).status_code == 400
    assert client.put(url, headers=headers, json={"completed": None}).status_code == 400
