from typing import Any
from fastapi.testclient import TestClient


def create_task(
    test_client: TestClient,
    title: str,
    description: str = "",
    status: str = "Todo",
) -> int:
    response = test_client.post(
        "/tasks",
        json={"title": title, "description": description, "status": status},
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def task_titles(tasks: list[dict[str, Any]]) -> list[str]:
    return [task["title"] for task in tasks]
