from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.dependencies import get_todo_status_service
from app.features.todos.schemas import TodoOut, TodoStatusUpdate
from app.features.todos.services import TodoStatusService

router = APIRouter(
    prefix="/todo-status",
    tags=["todo-status"],
    responses={404: {"description": "Not Found"}},
)

@router.patch(
    "/{todo_id}",
    summary="Changer le statut d'un todo (todoStatus.update)",
    response_model=TodoOut,
)
def update_status(
    todo_id: int,
    payload: TodoStatusUpdate,
    svc: TodoStatusService = Depends(get_todo_status_service),
):
    try:
        return svc.update(todo_id, payload.status)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
