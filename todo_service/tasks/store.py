import itertools
import logging

from todo_service.common.exceptions import (
    InvalidArgumentException,
    ResourceNotFoundException,
    ResourceType,
)
from todo_service.lock.service import ReadWriteLock
from todo_service.tasks.schemas import Task, TaskRecord

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store keyed by store-generated ids.

    Ids come from a counter that starts at 1 and only moves forward, so an id
    is never handed out twice, even after the task holding it is removed.
    Records live in a dict, whose insertion order is therefore ascending id
    order; listing and pagination walk it directly.

    Reads take the shared side of a readers/writer lock and return copies.
    Mutations take the exclusive side.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, TaskRecord] = {}
        self._ids = itertools.count(1)
        self._lock = ReadWriteLock()

    def add(self, task: Task) -> int:
        with self._lock.write():
            task_id = next(self._ids)
            self._tasks[task_id] = TaskRecord(
                id=task_id,
                title=task.title,
                description=task.description,
                status=task.status,
            )
        logger.debug("Task added id=%s status=%s", task_id, task.status)
        return task_id

    def get(self, task_id: int) -> TaskRecord:
        with self._lock.read():
            task = self._tasks.get(task_id)
            if task is None:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)
            return task.model_copy()

    def count(self) -> int:
        with self._lock.read():
            return len(self._tasks)

    def list_all(self) -> list[TaskRecord]:
        with self._lock.read():
            return [task.model_copy() for task in self._tasks.values()]

    def list_page(self, page_number: int, page_size: int) -> list[TaskRecord]:
        tasks, _ = self.list_page_with_total(page_number, page_size)
        return tasks

    def list_page_with_total(
        self, page_number: int, page_size: int
    ) -> tuple[list[TaskRecord], int]:
        """
        Return the tasks at ranks ((page_number - 1) * page_size, page_number * page_size]
        of the live tasks in ascending id order, together with the live task
        count read under the same lock.

        Ranks are computed against the tasks that exist now, so removing a task
        shifts every later task one rank down.

        Page 1 always exists, even when the store is empty. Any later page whose
        first rank lies past the last live task raises ResourceNotFoundException.
        """
        if page_number < 1:
            raise InvalidArgumentException(
                "page_number", page_number, "page_number must be at least 1"
            )
        if page_size < 1:
            raise InvalidArgumentException(
                "page_size", page_size, "page_size must be at least 1"
            )

        start = (page_number - 1) * page_size
        with self._lock.read():
            if page_number > 1 and start >= len(self._tasks):
                raise ResourceNotFoundException(ResourceType.PAGE, page_number)
            total = len(self._tasks)
            # islice rejects stops above sys.maxsize
            stop = min(start + page_size, total)
            window = itertools.islice(self._tasks.values(), start, stop)
            return [task.model_copy() for task in window], total

    def set_status(self, task_id: int, status: str) -> None:
        with self._lock.write():
            self._get_for_update(task_id).status = status
        logger.debug("Task status updated id=%s status=%s", task_id, status)

    def set_description(self, task_id: int, description: str) -> None:
        with self._lock.write():
            self._get_for_update(task_id).description = description
        logger.debug("Task description updated id=%s", task_id)

    def remove(self, task_id: int) -> None:
        with self._lock.write():
            if self._tasks.pop(task_id, None) is None:
                logger.debug("Task not found for removal id=%s", task_id)
                raise ResourceNotFoundException(ResourceType.TASK, task_id)
        logger.debug("Task removed id=%s", task_id)

    def _get_for_update(self, task_id: int) -> TaskRecord:
        # Caller must hold the write lock.
        task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Task not found for update id=%s", task_id)
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return task
