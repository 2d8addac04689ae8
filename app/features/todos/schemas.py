"""
➡️ But : Définir les formats d’entrée/sortie des procédures todo (couche validation).

TodoCreate → corps de `todo.create`

TodoStatusUpdate → corps de `todoStatus.update`

TodoOut → réponse de l’API, et type manipulé par le client (app.client)

Le client et le serveur partagent ces modèles : l'API est typée des deux côtés.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.db.models.todos import TodoStatus

ALL_STATUSES = (TodoStatus.completed, TodoStatus.pending)


# ---------- IN ----------

class TodoCreate(BaseModel):
    body: str = Field(..., min_length=1, examples=["Acheter du lait"])


class TodoStatusUpdate(BaseModel):
    status: TodoStatus = Field(..., examples=[TodoStatus.completed])


# ---------- OUT ----------

class TodoOut(BaseModel):
    id: int
    body: str
    status: TodoStatus
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True, "frozen": True}

    @property
    def is_completed(self) -> bool:
        return self.status == TodoStatus.completed
