# tests/test_todo_list.py

from __future__ import annotations

import logging
import threading

import pytest

from app.client.cache import QueryCache
from app.client.todo_list import DELETE_LABEL, TodoList
from app.db.models.todos import TodoStatus


@pytest.fixture()
def cache() -> QueryCache:
    return QueryCache()


def _list(fake_api, cache, status=None) -> TodoList:
    todo_list = TodoList(fake_api, cache, status=status)
    todo_list.load()
    return todo_list


def test_load_requests_both_statuses(fake_api, cache) -> None:
    _list(fake_api, cache)
    assert fake_api.calls == [("get_all", (("completed", "pending"),))]


def test_checked_state_matches_status_after_fetch(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)
    for todo in todo_list.todos:
        assert todo_list.is_checked(todo.id) == (todo.status == TodoStatus.completed)


def test_no_filter_renders_both_rows_with_completed_styling(fake_api, cache) -> None:
    rows = _list(fake_api, cache).rows()

    assert [r.body for r in rows] == ["Buy milk", "Pay rent"]
    milk, rent = rows
    assert not milk.checked
    assert "line-through" not in milk.label_classes
    assert "bg-gray-100" not in milk.row_classes
    assert rent.checked
    assert "line-through" in rent.label_classes
    assert "text-gray-500" in rent.label_classes
    assert "bg-gray-100" in rent.row_classes
    assert rent.delete_label == DELETE_LABEL


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (TodoStatus.completed, [2]),
        (TodoStatus.pending, [1]),
        (None, [1, 2]),
    ],
)
def test_filter_renders_exact_subset(fake_api, cache, status, expected) -> None:
    todo_list = _list(fake_api, cache, status=status)
    assert [t.id for t in todo_list.visible_todos] == expected
    assert [r.id for r in todo_list.rows()] == expected


def test_toggle_flips_immediately_then_updates_and_refetches(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)
    seen: dict[str, bool] = {}

    def observe(name: str) -> None:
        if name == "update_status":
            seen["checked_during_update"] = todo_list.is_checked(1)

    fake_api.on_call = observe

    assert todo_list.toggle(1) is True

    assert seen["checked_during_update"] is True
    assert fake_api.calls[1:] == [
        ("update_status", (1, TodoStatus.completed)),
        ("get_all", (("completed", "pending"),)),
    ]
    assert todo_list.is_checked(1)
    assert todo_list.todos[0].status == TodoStatus.completed


def test_toggle_back_to_pending(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)
    todo_list.toggle(2)
    assert fake_api.calls[1] == ("update_status", (2, TodoStatus.pending))
    assert not todo_list.is_checked(2)


def test_toggle_failure_logs_and_rolls_back(fake_api, cache, caplog) -> None:
    todo_list = _list(fake_api, cache)
    before = dict(todo_list.checked)
    fake_api.failing.add("update_status")

    with caplog.at_level(logging.ERROR, logger="app.client.todo_list"):
        assert todo_list.toggle(1) is False

    assert dict(todo_list.checked) == before
    assert fake_api.names() == ["get_all", "update_status"]
    assert "Error updating status of todo 1" in caplog.text


def test_delete_calls_once_refetches_and_removes_row(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)

    assert todo_list.delete(2) is True

    assert fake_api.calls[1:] == [
        ("delete", (2,)),
        ("get_all", (("completed", "pending"),)),
    ]
    assert [r.id for r in todo_list.rows()] == [1]


def test_delete_failure_is_logged_without_refetch(fake_api, cache, caplog) -> None:
    todo_list = _list(fake_api, cache)

    with caplog.at_level(logging.ERROR, logger="app.client.todo_list"):
        assert todo_list.delete(42) is False

    assert fake_api.names() == ["get_all", "delete"]
    assert "Error deleting todo 42" in caplog.text


def test_resync_on_same_snapshot_keeps_checked_map(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)
    checked = todo_list.checked
    todo_list.load()
    assert todo_list.checked is checked
    assert fake_api.names() == ["get_all"]


def test_fetch_error_keeps_previous_rows(fake_api, cache, caplog) -> None:
    todo_list = _list(fake_api, cache)
    fake_api.failing.add("get_all")

    with caplog.at_level(logging.ERROR, logger="app.client.todo_list"):
        todo_list.delete(1)

    assert "Error refetching todos" in caplog.text
    assert [t.id for t in todo_list.todos] == [1, 2]


def test_lists_sharing_a_cache_see_the_same_refetch(fake_api, cache) -> None:
    all_list = _list(fake_api, cache)
    completed = _list(fake_api, cache, status=TodoStatus.completed)

    all_list.toggle(1)
    completed.load()

    assert [t.id for t in completed.visible_todos] == [1, 2]
    assert completed.is_checked(1)
    assert fake_api.names().count("get_all") == 2


def test_concurrent_toggles_on_shared_list_keep_both_flips(fake_api, cache) -> None:
    todo_list = _list(fake_api, cache)
    threads = [threading.Thread(target=todo_list.toggle, args=(i,)) for i in (1, 2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert dict(todo_list.checked) == {1: True, 2: False}
    assert sorted(args for name, args in fake_api.calls if name == "update_status") == [
        (1, TodoStatus.completed),
        (2, TodoStatus.pending),
    ]
