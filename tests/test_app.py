from hrms.models import Tenant


def test_home_lists_endpoints(client):
    body = client.get("/").get_json()
    assert body["message"] == "HRMS Multi-Tenant API"
    assert "/auth/login" in body["endpoints"]
    assert "/goals/<int:goal_id>" in body["endpoints"]


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_malformed_json_body(client, tenant_admin):
    resp = client.post("/goals", headers=dict(tenant_admin["headers"], **{"Content-Type": "application/json"}),
                       data="{not json")
    assert resp.status_code == 400


def test_seed_demo_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["seed-demo"])
    assert result.exit_code == 0, result.output
    assert "Demo Corp" in result.output

    again = runner.invoke(args=["seed-demo"])
    assert "already exists" in again.output

    with app.app_context():
        assert Tenant.query.filter_by(name="Demo Corp").count() == 1
