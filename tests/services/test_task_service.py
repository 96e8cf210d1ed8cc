"""Unit tests for TaskService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from tasklist.models import Task
from tasklist.repositories import StorageError
from tasklist.services.task_service import TaskService


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.get_tasks = AsyncMock(return_value=[])
    repo.save = AsyncMock()
    repo.save_all = AsyncMock()
    return repo


@pytest.fixture()
def seeded(make_repo, make_task, at):
    a = make_task("A", created=at(1))
    b = make_task("B", created=at(0), completed=at(5))
    c = make_task("C", created=at(2))
    repo = make_repo([a, b, c])
    return TaskService(repo), repo, (a, b, c)


# ---------------------------------------------------------------------------
# refresh
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_refresh_sorts_projection(seeded):
    service, _, (a, b, c) = seeded

    state = await service.refresh()

    assert state.tasks == [a, c, b]
    assert service.tasks == [a, c, b]
    assert state.is_empty is False


@pytest.mark.asyncio
async def test_refresh_empty_collection(mock_repo):
    service = TaskService(mock_repo)

    state = await service.refresh()

    assert state.is_empty is True
    mock_repo.get_tasks.assert_awaited_once()


@pytest.mark.asyncio
async def test_refresh_replaces_projection(seeded):
    service, repo, _ = seeded
    await service.refresh()
    repo.tasks = []

    state = await service.refresh()

    assert state.is_empty is True
    assert service.tasks == []


@pytest.mark.asyncio
async def test_refresh_propagates_storage_error(mock_repo):
    mock_repo.get_tasks.side_effect = StorageError("disk gone")
    service = TaskService(mock_repo)

    with pytest.raises(StorageError):
        await service.refresh()


# ---------------------------------------------------------------------------
# save_task / add_task / edit_task
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_save_task_upserts_and_refreshes(task_service, memory_repo):
    task = Task.new("Write report")

    state = await task_service.save_task(task)

    assert memory_repo.save_calls == [task]
    assert state.tasks == [task]


@pytest.mark.asyncio
async def test_save_task_with_existing_id_updates_in_place(seeded):
    service, repo, (a, b, c) = seeded
    renamed = a.edited(title="A2")

    await service.save_task(renamed)

    assert [t.title for t in repo.tasks] == ["A2", "B", "C"]
    assert len(service.tasks) == 3


@pytest.mark.asyncio
async def test_add_task_creates_incomplete_task(task_service, memory_repo, at):
    task = await task_service.add_task("Call mum", note="Sunday", due_date=at(18))

    assert task.is_complete is False
    assert task.note == "Sunday"
    assert task.due_date == at(18)
    assert memory_repo.tasks == [task]
    assert task_service.tasks == [task]


@pytest.mark.asyncio
async def test_edit_task_keeps_identity(seeded):
    service, repo, (a, _, _) = seeded

    edited = await service.edit_task(a, title="Renamed", note="n")

    assert edited.id == a.id
    assert edited.created_date == a.created_date
    assert next(t for t in repo.tasks if t.id == a.id).title == "Renamed"


# ---------------------------------------------------------------------------
# toggle_complete
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_toggle_marks_complete_and_moves_to_end(seeded):
    service, repo, (a, b, c) = seeded
    await service.refresh()

    state = await service.toggle_complete(a)

    stored = next(t for t in repo.tasks if t.id == a.id)
    assert stored.is_complete is True
    assert stored.completed_date is not None
    assert [t.id for t in state.tasks] == [c.id, b.id, a.id]


@pytest.mark.asyncio
async def test_toggle_reopens_completed_task(seeded):
    service, repo, (a, b, c) = seeded

    state = await service.toggle_complete(b)

    stored = next(t for t in repo.tasks if t.id == b.id)
    assert stored.is_complete is False
    assert stored.completed_date is None
    # B was created first, so it now leads the open tasks
    assert [t.id for t in state.tasks] == [b.id, a.id, c.id]


@pytest.mark.asyncio
async def test_toggle_saves_single_task(mock_repo, make_task):
    service = TaskService(mock_repo)
    task = make_task("x")

    await service.toggle_complete(task)

    mock_repo.save.assert_awaited_once()
    saved = mock_repo.save.call_args[0][0]
    assert saved.id == task.id
    assert saved.is_complete is True
    mock_repo.save_all.assert_not_awaited()


# ---------------------------------------------------------------------------
# delete_at / task_at
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_delete_at_removes_exactly_that_task(seeded):
    service, repo, (a, b, c) = seeded
    await service.refresh()

    removed = await service.delete_at(1)

    assert removed.id == c.id
    assert [t.id for t in repo.tasks] == [a.id, b.id]
    assert len(service.tasks) == 2


@pytest.mark.asyncio
async def test_delete_at_writes_whole_collection_without_refresh(mock_repo, make_task, at):
    tasks = [make_task("a", created=at(1)), make_task("b", created=at(2))]
    mock_repo.get_tasks.return_value = tasks
    service = TaskService(mock_repo)
    await service.refresh()
    mock_repo.get_tasks.reset_mock()

    await service.delete_at(0)

    mock_repo.save_all.assert_awaited_once_with([tasks[1]])
    mock_repo.get_tasks.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_at_out_of_range(task_service, memory_repo):
    with pytest.raises(IndexError):
        await task_service.delete_at(0)
    assert memory_repo.save_all_calls == []


@pytest.mark.asyncio
async def test_delete_at_keeps_projection_when_write_fails(mock_repo, make_task, at):
    tasks = [make_task("a", created=at(1)), make_task("b", created=at(2))]
    mock_repo.get_tasks.return_value = tasks
    mock_repo.save_all.side_effect = StorageError("read-only")
    service = TaskService(mock_repo)
    await service.refresh()

    with pytest.raises(StorageError):
        await service.delete_at(0)

    assert service.tasks == tasks


@pytest.mark.asyncio
async def test_task_at(seeded):
    service, _, (a, b, c) = seeded
    await service.refresh()

    assert service.task_at(2) == b
    with pytest.raises(IndexError):
        service.task_at(3)
