from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_service.common.rate_limiter import setup_rate_limiter


def test_requests_over_the_limit_are_rejected() -> None:
    app = FastAPI()

    @app.get("/ping")
    def ping() -> dict[str, str]:
        return {"status": "ok"}

    limiter = setup_rate_limiter(app, "2/minute", "memory://")

    with TestClient(app) as client:
        assert client.get("/ping").status_code == 200
        assert client.get("/ping").status_code == 200
        response = client.get("/ping")

    assert app.state.limiter is limiter
    assert response.status_code == 429
    assert response.json() == {"detail": "Too many requests. Please try again later."}
