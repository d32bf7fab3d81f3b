def test_get_own_tenant(client, tenant_admin):
    resp = client.get(f"/tenants/{tenant_admin['tenant_id']}", headers=tenant_admin["headers"])
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Acme"


def test_cannot_read_or_update_other_tenant(client, make_tenant):
    acme = make_tenant("Acme", "a@acme.com")
    globex = make_tenant("Globex", "g@globex.com")

    assert client.get(f"/tenants/{globex['tenant_id']}", headers=acme["headers"]).status_code == 403
    resp = client.put(f"/tenants/{globex['tenant_id']}", headers=acme["headers"], json={"name": "Hacked"})
    assert resp.status_code == 403


def test_update_tenant_validates_name_and_status(client, make_tenant):
    acme = make_tenant("Acme", "a@acme.com")
    make_tenant("Globex", "g@globex.com")
    url = f"/tenants/{acme['tenant_id']}"

    clash = client.put(url, headers=acme["headers"], json={"name": "Globex"})
    assert clash.status_code == 400
    assert "exists" in clash.get_json()["message"]

    assert client.put(url, headers=acme["headers"], json={"status": "paused"}).status_code == 400

    ok = client.put(url, headers=acme["headers"], json={"name": "Acme Inc", "contactEmail": "hq@acme.com"})
    assert ok.status_code == 200
    assert ok.get_json()["name"] == "Acme Inc"
    assert ok.get_json()["contactEmail"] == "hq@acme.com"
