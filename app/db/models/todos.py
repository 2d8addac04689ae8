"""Tâches de la todo list : un texte et un statut binaire (pending / completed)."""

from enum import Enum

from sqlmodel import Field

from .base import BaseModelDB


class TodoStatus(str, Enum):
    pending = "pending"
    completed = "completed"


class Todo(BaseModelDB, table=True):
    body: str = Field(description="Texte de la tâche")
    status: TodoStatus = Field(
        default=TodoStatus.pending,
        index=True,
        description="Statut : pending (à faire) ou completed (terminée)",
    )
