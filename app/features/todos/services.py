"""
➡️ But : Logique métier des todos, indépendante du web.

TodoService : lecture filtrée par statut, création, suppression.

TodoStatusService : changement de statut (procédure `todoStatus.update`).

Les services lèvent LookupError si le todo n'existe pas ; les routers traduisent en 404.
"""

import logging
from typing import Iterable, Sequence

from app.db.models.base import utcnow
from app.db.models.todos import Todo, TodoStatus
from app.db.repositories.todos import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def get_all(self, statuses: Iterable[TodoStatus]) -> Sequence[Todo]:
        return self.repo.list_by_statuses(statuses)

    def get(self, todo_id: int) -> Todo:
        todo = self.repo.get(todo_id)
        if not todo:
            raise LookupError(f"Todo {todo_id} not found")
        return todo

    def create(self, body: str) -> Todo:
        todo = self.repo.create(body=body, status=TodoStatus.pending)
        logger.info("todo %s created", todo.id)
        return todo

    def delete(self, todo_id: int) -> None:
        todo = self.get(todo_id)
        self.repo.delete(todo)
        logger.info("todo %s deleted", todo_id)


class TodoStatusService:
    def __init__(self, repo: TodoRepository):
        self.repo = repo

    def update(self, todo_id: int, status: TodoStatus) -> Todo:
        todo = self.repo.get(todo_id)
        if not todo:
            raise LookupError(f"Todo {todo_id} not found")
        todo = self.repo.update(todo, status=status, updated_at=utcnow())
        logger.info("todo %s -> %s", todo_id, status.value)
        return todo
