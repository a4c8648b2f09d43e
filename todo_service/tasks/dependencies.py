from fastapi import Depends, Request

from todo_service.tasks.service import TaskService
from todo_service.tasks.store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)
