from typing import Any
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "task_store": {"status": "ok", "tasks": 4},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "task_store": {
                            "status": "error",
                            "message": "Task store is not initialised",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(request: Request) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "task_store": {"status": "ok"},
    }

    task_store = getattr(request.app.state, "task_store", None)
    if task_store is None:
        health_status["task_store"].update(
            {"status": "error", "message": "Task store is not initialised"}
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    health_status["task_store"]["tasks"] = task_store.count()
    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
