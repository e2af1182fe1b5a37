def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_index_serves_form(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Address Comparison Tool" in r.text
    assert 'id="address1"' in r.text
    assert 'id="address2"' in r.text
    assert "/api/compare-addresses" in r.text


def test_index_not_in_openapi(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/" not in paths
    assert "/api/compare-addresses" in paths
