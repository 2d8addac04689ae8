"""Réconciliation de l'état local des cases à cocher avec la liste renvoyée par le serveur."""

from typing import Iterable, Mapping

from app.features.todos.schemas import TodoOut

CheckedMap = Mapping[int, bool]


def checked_from(todos: Iterable[TodoOut]) -> dict[int, bool]:
    return {t.id: t.is_completed for t in todos}


def reconcile_checked(prev: CheckedMap, todos: Iterable[TodoOut]) -> CheckedMap:
    """
    Calcule la prochaine map id -> coché à partir de la collection faisant autorité.

    Renvoie `prev` lui-même si aucune entrée ne change (stabilité de référence),
    sinon une nouvelle map construite uniquement depuis `todos`. Les ids absents
    de `todos` ne déclenchent pas de mise à jour à eux seuls.
    """
    nxt = checked_from(todos)
    if any(prev.get(todo_id) != checked for todo_id, checked in nxt.items()):
        return nxt
    return prev
