"""Tests for TaskService."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from admin_backend.api.schemas import TaskCreate, TaskUpdate
from admin_backend.db.models import Task, TaskLabel, TaskPriority, TaskStatus
from admin_backend.errors import RequestTimeoutError, TaskNotFoundError
from admin_backend.services.listing import PageParams
from admin_backend.services.request_context import RequestContext
from admin_backend.services.task_service import MAX_ID_ATTEMPTS, TaskService


@pytest.fixture
def svc(test_db: Session) -> TaskService:
    return TaskService(test_db)


class TestCreateTask:
    def test_first_task_id(self, svc):
        task = svc.create_task(TaskCreate(title="First"))
        assert task.id == "TASK-0001"
        assert task.status == TaskStatus.todo
        assert task.label == TaskLabel.feature
        assert task.priority == TaskPriority.medium

    def test_skips_ids_left_by_manual_rows(self, svc, test_db):
        test_db.add(Task(id="TASK-0001", title="manual"))
        test_db.add(Task(id="TASK-0002", title="manual"))
        test_db.commit()
        test_db.delete(test_db.get(Task, "TASK-0001"))
        test_db.commit()

        task = svc.create_task(TaskCreate(title="next"))
        assert task.id == "TASK-0003"

    def test_due_date_stored_as_iso(self, svc, test_db):
        due = datetime(2026, 11, 30, 17, 0, tzinfo=UTC)
        task = svc.create_task(TaskCreate(title="due", due_date=due))
        assert task.due_date == due
        assert test_db.get(Task, task.id).due_date == due.isoformat()

    def test_optional_text_omitted(self, svc):
        task = svc.create_task(TaskCreate(title="bare"))
        assert task.assignee is None
        assert task.description is None
        assert task.due_date is None

    def test_retries_next_id_after_commit_conflict(self, svc, test_db, monkeypatch):
        real_commit = test_db.commit
        calls = []

        def commit():
            calls.append(1)
            if len(calls) == 1:
                raise IntegrityError("INSERT INTO tasks", {}, Exception("taken"))
            real_commit()

        monkeypatch.setattr(test_db, "commit", commit)
        task = svc.create_task(TaskCreate(title="raced"))
        assert task.id == "TASK-0002"
        assert len(calls) == 2

    def test_gives_up_after_max_attempts(self, svc, test_db, monkeypatch):
        calls = []

        def commit():
            calls.append(1)
            raise IntegrityError("INSERT INTO tasks", {}, Exception("taken"))

        monkeypatch.setattr(test_db, "commit", commit)
        with pytest.raises(IntegrityError):
            svc.create_task(TaskCreate(title="never"))
        assert len(calls) == MAX_ID_ATTEMPTS
        assert test_db.query(Task).count() == 0


class TestUpdateTask:
    def test_partial(self, svc):
        task = svc.create_task(TaskCreate(title="t", assignee="ada"))
        updated = svc.update_task(task.id, TaskUpdate(priority=TaskPriority.critical))
        assert updated.priority == TaskPriority.critical
        assert updated.assignee == "ada"
        assert updated.title == "t"

    def test_missing(self, svc):
        with pytest.raises(TaskNotFoundError):
            svc.update_task("TASK-0404", TaskUpdate(title="x"))


class TestDeleteTask:
    def test_missing(self, svc, test_db):
        svc.create_task(TaskCreate(title="keep"))
        with pytest.raises(TaskNotFoundError):
            svc.delete_task("TASK-0404")
        assert test_db.query(Task).count() == 1


class TestListTasks:
    def test_status_in_list(self, svc):
        svc.create_task(TaskCreate(title="a", status=TaskStatus.backlog))
        svc.create_task(TaskCreate(title="b", status=TaskStatus.canceled))
        svc.create_task(TaskCreate(title="c", status=TaskStatus.done))
        result = svc.list_tasks(
            PageParams(), status=[TaskStatus.backlog, TaskStatus.canceled]
        )
        assert sorted(t.title for t in result.data) == ["a", "b"]

    def test_unknown_stored_status_passes_through(self, svc, test_db):
        test_db.add(Task(id="TASK-0001", title="legacy", status="blocked"))
        test_db.commit()
        task = svc.get_task("TASK-0001")
        assert task.status == "blocked"


def test_expired_deadline_blocks_operation(test_db):
    svc = TaskService(test_db, RequestContext(deadline=0.0))
    with pytest.raises(RequestTimeoutError):
        svc.create_task(TaskCreate(title="late"))
    assert test_db.query(Task).count() == 0
