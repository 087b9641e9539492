def test_live(client):
    resp = client.get("/live")

    assert resp.status_code == 200
    assert resp.json() == {"status": "alive"}


def test_healthz_reports_upstream_host(client):
    resp = client.get("/healthz")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["env"] == "test"
    assert body["upstream"] == "public-api.shiphero.com"


def test_security_headers(client):
    resp = client.get("/live")

    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["Cache-Control"] == "no-store"


def test_metrics_exposes_fetch_counters(client, gql, use_source, auth_headers):
    use_source(gql.Source([gql.page([gql.product("SKU-1", inventory_bin="A-1", on_hand=1)])]))
    client.get("/inventory", params={"customer_account_id": gql.CUSTOMER_ID}, headers=auth_headers)

    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert "shiphero_pages_fetched_total" in resp.text
