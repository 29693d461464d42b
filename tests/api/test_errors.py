def test_unknown_route_uses_envelope(client):
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_method_not_allowed_uses_envelope(client):
    response = client.patch("/api/v1/health")

    assert response.status_code == 405
    assert response.json()["success"] is False
