"""
➡️ But : Modèle de vue de la liste de todos (une instance par onglet).

TodoList :

charge la collection complète (les deux statuts) via le QueryCache partagé,

garde une map locale id -> coché, réconciliée à chaque nouvel instantané,

filtre par statut si un filtre est fourni,

bascule le statut (écho optimiste, puis mutation, puis refetch),

supprime (mutation, puis refetch).

Les erreurs d'API sont loggées, jamais remontées à l'utilisateur ni rejouées.
Une bascule refusée par le serveur annule l'écho optimiste.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from app.client.api import ApiError, TodoApiClient
from app.client.cache import QueryCache, QueryKey
from app.client.checked_state import CheckedMap, reconcile_checked
from app.db.models.todos import TodoStatus
from app.features.todos.schemas import ALL_STATUSES, TodoOut

logger = logging.getLogger(__name__)

GET_ALL = "todo.getAll"
TODOS_KEY: QueryKey = (GET_ALL, tuple(sorted(s.value for s in ALL_STATUSES)))

DELETE_LABEL = "Delete todo"


@dataclass(frozen=True)
class TodoRow:
    """Ce que le template affiche pour une ligne."""
    id: int
    body: str
    checked: bool
    row_classes: str
    label_classes: str
    delete_label: str = DELETE_LABEL


class TodoList:
    def __init__(
        self,
        api: TodoApiClient,
        cache: QueryCache,
        status: Optional[TodoStatus] = None,
    ):
        self.api = api
        self.cache = cache
        self.status = status
        self.todos: Tuple[TodoOut, ...] = ()
        self.checked: CheckedMap = {}
        # L'Index est partagé par le threadpool du serveur : todos/checked changent sous ce verrou.
        self._lock = threading.RLock()

    # -------- Lecture --------

    def load(self, refresh: bool = False) -> Tuple[TodoOut, ...]:
        """
        Fetch-all via le cache. refresh=True (montage) interroge toujours l'API ;
        sinon l'instantané en cache est servi s'il existe.
        """
        with self._lock:
            try:
                todos = self.cache.fetch(TODOS_KEY, self._fetch_all, refresh=refresh)
            except ApiError as exc:
                logger.error("Error fetching todos: %s", exc)
                return self.todos
            self._sync(todos)
            return self.todos

    def _fetch_all(self) -> List[TodoOut]:
        return self.api.get_all(ALL_STATUSES)

    def _sync(self, todos: Tuple[TodoOut, ...]) -> None:
        # On ne réconcilie que si l'instantané a changé de référence.
        if todos is self.todos:
            return
        self.todos = todos
        self.checked = reconcile_checked(self.checked, todos)

    def _refetch(self) -> None:
        try:
            todos = self.cache.refetch(TODOS_KEY)
        except KeyError:
            # jamais chargé : premier fetch
            self.load()
            return
        except ApiError as exc:
            logger.error("Error refetching todos: %s", exc)
            return
        self._sync(todos)

    @property
    def visible_todos(self) -> List[TodoOut]:
        if self.status is None:
            return list(self.todos)
        return [t for t in self.todos if t.status == self.status]

    def is_checked(self, todo_id: int) -> bool:
        return bool(self.checked.get(todo_id, False))

    def rows(self) -> List[TodoRow]:
        out: List[TodoRow] = []
        for todo in self.visible_todos:
            checked = self.is_checked(todo.id)
            out.append(
                TodoRow(
                    id=todo.id,
                    body=todo.body,
                    checked=checked,
                    row_classes="todo-row bg-gray-100" if checked else "todo-row",
                    label_classes="text-gray-500 line-through" if checked else "text-black",
                )
            )
        return out

    # -------- Mutations --------

    def toggle(self, todo_id: int) -> bool:
        """
        Bascule le statut de `todo_id`. Retourne True si le serveur a confirmé.
        Sur erreur : log + retour à la valeur d'avant la bascule.
        """
        with self._lock:
            new_checked = not self.is_checked(todo_id)
            self.checked = {**self.checked, todo_id: new_checked}
            new_status = TodoStatus.completed if new_checked else TodoStatus.pending

            try:
                self.api.update_status(todo_id, new_status)
            except ApiError as exc:
                logger.error("Error updating status of todo %s: %s", todo_id, exc)
                self.checked = {**self.checked, todo_id: not new_checked}
                return False

            self._refetch()
            return True

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            try:
                self.api.delete(todo_id)
            except ApiError as exc:
                logger.error("Error deleting todo %s: %s", todo_id, exc)
                return False

            self._refetch()
            return True
