"""Service for task listing and CRUD.

Task ids are human-readable (TASK-0001). A new task takes the next
number after the current row count, skipping ids that already exist.
If a concurrent insert claims the id first, the insert is rolled back
and the following number is tried, up to MAX_ID_ATTEMPTS times.
"""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from admin_backend.api.schemas import (
    TaskCreate,
    TaskListResponse,
    TaskResponse,
    TaskUpdate,
)
from admin_backend.db.models import Task, TaskPriority, TaskStatus, format_task_id
from admin_backend.errors import TaskNotFoundError
from admin_backend.services.listing import PageParams, contains, paginate
from admin_backend.services.mappers import task_to_response
from admin_backend.services.request_context import RequestContext

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5


class TaskService:
    """Listing and CRUD for tasks.

    Attributes:
        db: SQLAlchemy session for database operations.
        ctx: Cancellation state checked before each operation.
    """

    def __init__(self, db: Session, ctx: RequestContext | None = None) -> None:
        self.db = db
        self.ctx = ctx or RequestContext()

    def list_tasks(
        self,
        params: PageParams,
        status: list[TaskStatus] | None = None,
        priority: list[TaskPriority] | None = None,
        filter: str | None = None,
    ) -> TaskListResponse:
        """List tasks, newest first.

        Args:
            params: Requested page.
            status: Keep tasks whose status is in this list.
            priority: Keep tasks whose priority is in this list.
            filter: Case-insensitive substring of the title or the id.

        Returns:
            One page of tasks with pagination metadata.
        """
        self.ctx.ensure_active()
        query = self.db.query(Task)
        if status:
            query = query.filter(Task.status.in_([s.value for s in status]))
        if priority:
            query = query.filter(Task.priority.in_([p.value for p in priority]))
        if filter:
            query = query.filter(
                or_(contains(Task.title, filter), contains(Task.id, filter))
            )

        page = paginate(
            query, params, (Task.created_at.desc(), Task.id), task_to_response
        )
        logger.debug("Listed %d of %d tasks", len(page.data), page.meta.total)
        return TaskListResponse(data=page.data, meta=page.meta)

    def get_task(self, task_id: str) -> TaskResponse:
        """Get a task by id.

        Raises:
            TaskNotFoundError: No task has this id.
        """
        self.ctx.ensure_active()
        return task_to_response(self._get_or_raise(task_id))

    def create_task(self, req: TaskCreate) -> TaskResponse:
        """Create a task with the next sequential id.

        Args:
            req: Validated create request.

        Returns:
            The created task.

        Raises:
            IntegrityError: Every candidate id was taken.
        """
        self.ctx.ensure_active()
        number = self.db.query(Task).count() + 1

        for attempt in range(1, MAX_ID_ATTEMPTS + 1):
            # Deleted rows leave gaps, so the count can point at a live id.
            while self.db.get(Task, format_task_id(number)) is not None:
                number += 1
            task = Task(
                id=format_task_id(number),
                title=req.title,
                status=req.status.value,
                label=req.label.value,
                priority=req.priority.value,
                assignee=req.assignee or "",
                description=req.description or "",
                due_date=req.due_date.isoformat() if req.due_date else None,
            )
            self.db.add(task)
            try:
                self.db.commit()
                break
            except IntegrityError:
                self.db.rollback()
                if attempt == MAX_ID_ATTEMPTS:
                    raise
                logger.warning("Task id %s taken, trying next", task.id)
                number += 1

        self.db.refresh(task)
        logger.info("Created task %s", task.id)
        return task_to_response(task)

    def update_task(self, task_id: str, req: TaskUpdate) -> TaskResponse:
        """Apply the supplied fields to a task.

        Raises:
            TaskNotFoundError: No task has this id.
        """
        self.ctx.ensure_active()
        task = self._get_or_raise(task_id)
        changes = {
            k: v
            for k, v in req.model_dump(exclude_unset=True, mode="json").items()
            if v is not None
        }
        for field, value in changes.items():
            setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)
        logger.info("Updated task %s (%s)", task.id, ", ".join(sorted(changes)))
        return task_to_response(task)

    def delete_task(self, task_id: str) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: No task has this id.
        """
        self.ctx.ensure_active()
        task = self._get_or_raise(task_id)
        self.db.delete(task)
        self.db.commit()
        logger.info("Deleted task %s", task_id)

    def _get_or_raise(self, task_id: str) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
