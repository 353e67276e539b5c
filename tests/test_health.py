def test_health_configured(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "configured": True}


def test_health_reports_missing_settings(client, settings):
    from dependencies import get_settings
    from main import app

    app.dependency_overrides[get_settings] = lambda: settings.model_copy(update={"gh_token": ""})
    assert client.get("/health").json() == {"status": "OK", "configured": False}
