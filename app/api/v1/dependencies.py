"""
➡️ But : Centraliser les dépendances réutilisables des routes de l'API.

get_todo_repository() : crée un TodoRepository à partir d’une session DB.

get_todo_service() / get_todo_status_service() : services injectés dans les routes.

statuses_filter() : paramètre commun `statuses` de `todo.getAll`.
"""

from typing import List, Optional

from fastapi import Depends, Query
from sqlmodel import Session

from app.db.session import get_session
from app.db.models.todos import TodoStatus
from app.db.repositories.todos import TodoRepository
from app.features.todos.schemas import ALL_STATUSES
from app.features.todos.services import TodoService, TodoStatusService


def statuses_filter(
    statuses: Optional[List[TodoStatus]] = Query(
        None,
        description="Statuts à inclure (par défaut : tous)",
        examples=[["pending", "completed"]],
    ),
) -> List[TodoStatus]:
    return list(statuses) if statuses else list(ALL_STATUSES)


# -----------------------------
# Repositories
# -----------------------------
def get_todo_repository(session: Session = Depends(get_session)) -> TodoRepository:
    return TodoRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_todo_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoService:
    return TodoService(repo)

def get_todo_status_service(repo: TodoRepository = Depends(get_todo_repository)) -> TodoStatusService:
    return TodoStatusService(repo)
