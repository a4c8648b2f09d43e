from fastapi import APIRouter, Depends, status

from todo_service.common.exceptions import (
    ResourceType,
    invalid_argument_response,
    resource_not_found_response,
)
from todo_service.config import Settings, get_settings
from todo_service.tasks.dependencies import get_task_service
from todo_service.tasks.schemas import (
    CreateTaskRequest,
    TaskCreated,
    TaskPage,
    TaskRecord,
    TaskUpdated,
    UpdateTaskDescriptionRequest,
    UpdateTaskStatusRequest,
)
from todo_service.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> TaskCreated:
    return task_service.create_task(task_input)


@router.get("")
def list_tasks(
    task_service: TaskService = Depends(get_task_service),
) -> list[TaskRecord]:
    return task_service.list_tasks()


# Registered before /{task_id} so "page" is not parsed as an id
@router.get(
    "/page",
    responses={
        **invalid_argument_response,
        **resource_not_found_response(ResourceType.PAGE),
    },
)
def list_tasks_page(
    page_number: int = 1,
    page_size: int | None = None,
    task_service: TaskService = Depends(get_task_service),
    settings: Settings = Depends(get_settings),
) -> TaskPage:
    return task_service.list_tasks_page(
        page_number, page_size if page_size is not None else settings.DEFAULT_PAGE_SIZE
    )


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: int, task_service: TaskService = Depends(get_task_service)
) -> TaskRecord:
    return task_service.get_task(task_id)


@router.put(
    "/{task_id}/status",
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def update_task_status(
    task_id: int,
    status_input: UpdateTaskStatusRequest,
    task_service: TaskService = Depends(get_task_service),
) -> TaskUpdated:
    return task_service.update_task_status(task_id, status_input.status)


@router.put(
    "/{task_id}/description",
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def update_task_description(
    task_id: int,
    description_input: UpdateTaskDescriptionRequest,
    task_service: TaskService = Depends(get_task_service),
) -> TaskUpdated:
    return task_service.update_task_description(task_id, description_input.description)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: int, task_service: TaskService = Depends(get_task_service)):
    task_service.delete_task(task_id)
