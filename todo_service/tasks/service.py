import logging

from todo_service.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskCreated,
    TaskPage,
    TaskRecord,
    TaskUpdated,
)
from todo_service.tasks.store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def create_task(self, task_input: CreateTaskRequest) -> TaskCreated:
        task_id = self.task_store.add(
            Task(
                title=task_input.title,
                description=task_input.description,
                status=task_input.status,
            )
        )
        logger.info(f"Created task {task_id}")
        return TaskCreated(id=task_id, message="Task created.")

    def list_tasks(self) -> list[TaskRecord]:
        return self.task_store.list_all()

    def list_tasks_page(self, page_number: int, page_size: int) -> TaskPage:
        tasks, total = self.task_store.list_page_with_total(page_number, page_size)
        return TaskPage(
            page_number=page_number,
            page_size=page_size,
            total=total,
            tasks=tasks,
        )

    def get_task(self, task_id: int) -> TaskRecord:
        return self.task_store.get(task_id)

    def update_task_status(self, task_id: int, status: str) -> TaskUpdated:
        self.task_store.set_status(task_id, status)
        logger.info(f"Updated status of task {task_id} to '{status}'")
        return TaskUpdated(id=task_id, message="Task status updated.")

    def update_task_description(self, task_id: int, description: str) -> TaskUpdated:
        self.task_store.set_description(task_id, description)
        logger.info(f"Updated description of task {task_id}")
        return TaskUpdated(id=task_id, message="Task description updated.")

    def delete_task(self, task_id: int) -> None:
        self.task_store.remove(task_id)
        logger.info(f"Deleted task {task_id}")
