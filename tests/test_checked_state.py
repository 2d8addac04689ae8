# tests/test_checked_state.py

from __future__ import annotations

from app.client.checked_state import checked_from, reconcile_checked
from app.db.models.todos import TodoStatus
from app.features.todos.schemas import TodoOut


def test_checked_mirrors_completed_status(sample_todos) -> None:
    assert checked_from(sample_todos) == {1: False, 2: True}


def test_reconcile_from_empty_builds_new_map(sample_todos) -> None:
    prev: dict[int, bool] = {}
    nxt = reconcile_checked(prev, sample_todos)
    assert nxt == {1: False, 2: True}
    assert nxt is not prev


def test_reconcile_unchanged_result_keeps_same_object(sample_todos) -> None:
    first = reconcile_checked({}, sample_todos)
    second = reconcile_checked(first, sample_todos)
    assert second is first


def test_reconcile_replaces_map_when_one_entry_differs(sample_todos) -> None:
    prev = {1: True, 2: True}  # local flip not confirmed by the server
    nxt = reconcile_checked(prev, sample_todos)
    assert nxt == {1: False, 2: True}
    assert prev == {1: True, 2: True}


def test_vanished_ids_alone_do_not_trigger_update(sample_todos) -> None:
    prev = {1: False, 2: True, 99: True}
    assert reconcile_checked(prev, sample_todos) is prev


def test_new_todo_triggers_update_and_drops_stale_ids() -> None:
    prev = {1: False, 99: True}
    todos = [
        TodoOut(id=1, body="a", status=TodoStatus.pending),
        TodoOut(id=3, body="c", status=TodoStatus.completed),
    ]
    assert reconcile_checked(prev, todos) == {1: False, 3: True}
