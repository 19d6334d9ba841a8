"""API routes for task tracking.

All endpoints use /api/v1/tasks prefix. Task ids look like TASK-0001.
"""

from fastapi import APIRouter, Depends, Query

from admin_backend.api.dependencies import get_admin_handler, get_page_params
from admin_backend.api.schemas import (
    TaskCreate,
    TaskListResponse,
    TaskResponse,
    TaskUpdate,
)
from admin_backend.db.models import TaskPriority, TaskStatus
from admin_backend.services.admin_handler import AdminHandler
from admin_backend.services.listing import PageParams

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=TaskListResponse, response_model_exclude_none=True)
def list_tasks(
    status: list[TaskStatus] | None = Query(None),
    priority: list[TaskPriority] | None = Query(None),
    filter: str | None = None,
    params: PageParams = Depends(get_page_params),
    handler: AdminHandler = Depends(get_admin_handler),
) -> TaskListResponse:
    """List tasks, newest first.

    Args:
        status: Repeatable status filter.
        priority: Repeatable priority filter.
        filter: Case-insensitive substring of the title or id.
        params: Page and page size (injected).
        handler: AdminHandler (injected).

    Returns:
        One page of tasks with pagination metadata.
    """
    return handler.list_tasks(params, status=status, priority=priority, filter=filter)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    response_model_exclude_none=True,
)
def create_task(
    data: TaskCreate,
    handler: AdminHandler = Depends(get_admin_handler),
) -> TaskResponse:
    return handler.create_task(data)


@router.get("/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
def get_task(
    task_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> TaskResponse:
    return handler.get_task(task_id)


@router.put("/{task_id}", response_model=TaskResponse, response_model_exclude_none=True)
def update_task(
    task_id: str,
    data: TaskUpdate,
    handler: AdminHandler = Depends(get_admin_handler),
) -> TaskResponse:
    """Update the supplied fields of a task; omitted fields are kept."""
    return handler.update_task(task_id, data)


@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: str,
    handler: AdminHandler = Depends(get_admin_handler),
) -> None:
    handler.delete_task(task_id)
