# app/db/repositories/todos.py
from typing import Iterable, Sequence

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.todos import Todo, TodoStatus


class TodoRepository(BaseRepository[Todo]):
    """CRUD Todos + filtrage par statut."""
    model = Todo

    def list_by_statuses(self, statuses: Iterable[TodoStatus]) -> Sequence[Todo]:
        """
        Retourne les todos dont le statut est dans `statuses`, triés par id croissant
        (ordre de création).
        """
        wanted = list(set(statuses))
        stmt = (
            select(Todo)
            .where(Todo.status.in_(wanted))
            .order_by(Todo.id.asc())
        )
        return self.session.exec(stmt).all()
