from enum import Enum
from pydantic import BaseModel


class TaskStatus(str, Enum):
    """Conventional status values. The store accepts any text."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"
    BACKLOG = "Backlog"


class Task(BaseModel):
    title: str
    description: str = ""
    status: str = TaskStatus.TODO.value


class TaskRecord(Task):
    id: int


class CreateTaskRequest(Task):
    pass


class UpdateTaskStatusRequest(BaseModel):
    status: str


class UpdateTaskDescriptionRequest(BaseModel):
    description: str


class TaskCreated(BaseModel):
    id: int
    message: str


class TaskUpdated(BaseModel):
    id: int
    message: str


class TaskPage(BaseModel):
    page_number: int
    page_size: int
    total: int
    tasks: list[TaskRecord]
