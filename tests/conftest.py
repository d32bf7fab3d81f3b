from datetime import date, timedelta

import pytest

from hrms import create_app
from hrms.config import TestingConfig
from hrms.models import db


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(_Config)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_tenant(client):
    """Run setup-tenant-admin and hand back what the tests need to act as that admin."""

    def _make(name="Acme", email="admin@acme.com", password="secret123"):
        resp = client.post("/auth/setup-tenant-admin", json={
            "tenantName": name,
            "adminEmail": email,
            "adminPassword": password,
            "adminFirstName": "Ada",
            "adminLastName": "Admin",
        })
        assert resp.status_code == 201, resp.get_json()
        body = resp.get_json()
        return {
            "headers": {"Authorization": f"Bearer {body['accessToken']}"},
            "tenant_id": body["tenant"]["id"],
            "user": body["user"],
            "employee_id": body["user"]["employee"]["id"],
        }

    return _make


@pytest.fixture
def tenant_admin(make_tenant):
    return make_tenant()


@pytest.fixture
def employee(client, tenant_admin):
    resp = client.post("/employees", headers=tenant_admin["headers"], json={
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@acme.com",
        "role": "Engineer",
        "department": "Engineering",
        "hireDate": "2024-01-15",
    })
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def days_from_today(n):
    return (date.today() + timedelta(days=n)).isoformat()


def next_weekday(weekday=0):
    """Date of the next given weekday strictly after today (Monday=0)."""
    today = date.today()
    ahead = (weekday - today.weekday()) % 7 or 7
    return today + timedelta(days=ahead)
