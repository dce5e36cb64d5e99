from cleansync.security_headers import build_security_headers


def test_api_responses_carry_security_headers(api):
    response = api.get("/api/client")

    assert response.status_code == 401
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Content-Security-Policy"].startswith("default-src 'none'")
    assert response.headers["Cache-Control"] == "no-store, no-cache, must-revalidate"


def test_health_is_excluded(api):
    assert "X-Frame-Options" not in api.get("/health").headers


def test_hsts_only_in_production():
    assert "Strict-Transport-Security" not in build_security_headers(production=False)
    assert build_security_headers(production=True)["Strict-Transport-Security"].startswith("max-age=")


def test_validation_errors_are_reported_as_400(api, logged_in):
    response = api.post("/api/supplies", json={})

    assert response.status_code == 400
    assert response.json()["detail"][0]["loc"] == ["body", "item"]
