"""
Tests for the newsletter and blog relay endpoints
"""
import httpx


def test_subscribe_relays_once(client, use_backend):
    seen = use_backend(lambda r: httpx.Response(200, json={"message": "Subscribed!"}))

    response = client.post("/api/newsletter/subscribe", json={"email": "ada@x.com"})

    assert response.status_code == 200
    assert response.json() == {"message": "Subscribed!"}
    assert len(seen) == 1


def test_subscribe_empty_email_makes_no_outbound_call(client, use_backend):
    seen = use_backend(lambda r: httpx.Response(200, json={}))

    response = client.post("/api/newsletter/subscribe", json={"email": "  "})

    assert response.status_code == 400
    assert response.json() == {"error": "Email is required."}
    assert seen == []


def test_subscribe_unusable_body_is_rejected(client, use_backend):
    seen = use_backend(lambda r: httpx.Response(200, json={}))

    no_body = client.post("/api/newsletter/subscribe")
    not_json = client.post(
        "/api/newsletter/subscribe", content=b"not json", headers={"Content-Type": "application/json"}
    )
    not_object = client.post("/api/newsletter/subscribe", json="ada@x.com")

    for response in (no_body, not_json, not_object):
        assert response.status_code == 400
        assert response.json() == {"error": "Email is required."}
    assert seen == []


def test_subscribe_conflict(client, use_backend):
    use_backend(lambda r: httpx.Response(409, json={"error": "Email already subscribed"}))

    response = client.post("/api/newsletter/subscribe", json={"email": "ada@x.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "Email already subscribed"}


def test_subscribe_network_error(client, use_backend):
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    use_backend(handler)

    response = client.post("/api/newsletter/subscribe", json={"email": "ada@x.com"})

    assert response.status_code == 502
    assert response.json() == {"error": "Network error. Could not connect to the server."}


def test_blogs_list(client, use_backend):
    blogs = [{"_id": "b1", "title": "Soil health", "content": "...", "createdAt": "2025-09-01T10:00:00Z"}]
    use_backend(lambda r: httpx.Response(200, json=blogs))

    response = client.get("/api/blogs")

    assert response.status_code == 200
    assert response.json() == blogs


def test_blogs_failure_reports_endpoint(client, use_backend):
    use_backend(lambda r: httpx.Response(404, json={"error": "nope"}))

    response = client.get("/api/blogs")

    assert response.status_code == 502
    assert response.json() == {
        "error": "Server responded with 404: Not Found",
        "endpoint": "https://backend.test/api/blogs",
    }


def test_health_never_reports_secret_values(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert all(isinstance(v, bool) for v in body["env_vars"].values())
