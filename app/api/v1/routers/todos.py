"""
➡️ But : Exposer les procédures `todo.*` (getAll, create, delete).

Réceptionne les requêtes HTTP, appelle TodoService, retourne les schémas de sortie.

Les routes ne contiennent ni SQL ni logique métier.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.dependencies import get_todo_service, statuses_filter
from app.db.models.todos import TodoStatus
from app.features.todos.schemas import TodoCreate, TodoOut
from app.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les todos (todo.getAll)",
    description="Retourne les todos dont le statut est demandé, triés par id.",
    response_model=List[TodoOut],
    responses={
        200: {
            "description": "Liste des todos",
            "content": {
                "application/json": {
                    "example": [{"id": 1, "body": "Acheter du lait", "status": "pending",
                                 "created_at": "2025-01-01T10:00:00Z"}]
                }
            },
        }
    },
)
def get_all(
    statuses: List[TodoStatus] = Depends(statuses_filter),
    svc: TodoService = Depends(get_todo_service),
):
    return [TodoOut.model_validate(t) for t in svc.get_all(statuses)]

@router.post(
    "",
    summary="Créer un todo (todo.create)",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_todo_service)):
    return svc.create(body=payload.body)

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo (todo.delete)",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    try:
        svc.delete(todo_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return None
