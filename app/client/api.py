"""
➡️ But : Client typé des procédures de l'API todo, utilisé par la couche vue.

TodoApiClient enveloppe un httpx.Client et renvoie des TodoOut validés :

get_all(statuses) → `todo.getAll`

create(body) → `todo.create`

delete(todo_id) → `todo.delete`

update_status(todo_id, status) → `todoStatus.update`

Toute erreur réseau ou réponse non-2xx devient une ApiError (code HTTP + détail).

🔹 Avantages :

Les vues ne connaissent ni les URLs ni httpx.

N'importe quel client compatible httpx peut être injecté (ex : TestClient de FastAPI).
"""

import logging
from typing import Iterable, List, Optional

import httpx
from pydantic import TypeAdapter

from app.core.config import settings
from app.db.models.todos import TodoStatus
from app.features.todos.schemas import TodoOut

logger = logging.getLogger(__name__)

_todo_list = TypeAdapter(List[TodoOut])


class ApiError(Exception):
    def __init__(self, status_code: Optional[int], detail: str):
        super().__init__(f"{status_code or 'network'}: {detail}")
        self.status_code = status_code
        self.detail = detail


def _detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)


class TodoApiClient:
    def __init__(self, http: httpx.Client):
        self.http = http

    # -------- Helpers --------

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            resp = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(None, str(exc)) from exc
        if resp.is_error:
            raise ApiError(resp.status_code, _detail(resp))
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    # -------- todo.* --------

    def get_all(self, statuses: Iterable[TodoStatus]) -> List[TodoOut]:
        params = {"statuses": sorted(TodoStatus(s).value for s in statuses)}
        resp = self._request("GET", "todos", params=params)
        return _todo_list.validate_python(resp.json())

    def create(self, body: str) -> TodoOut:
        resp = self._request("POST", "todos", json={"body": body})
        return TodoOut.model_validate(resp.json())

    def delete(self, todo_id: int) -> None:
        self._request("DELETE", f"todos/{todo_id}")

    # -------- todoStatus.* --------

    def update_status(self, todo_id: int, status: TodoStatus) -> TodoOut:
        resp = self._request("PATCH", f"todo-status/{todo_id}", json={"status": TodoStatus(status).value})
        return TodoOut.model_validate(resp.json())


def build_api_client(base_url: Optional[str] = None) -> TodoApiClient:
    """Client pointant sur settings.API_BASE_URL (l'API de ce même serveur par défaut)."""
    http = httpx.Client(
        base_url=base_url or settings.API_BASE_URL,
        timeout=settings.API_TIMEOUT_SECONDS,
    )
    return TodoApiClient(http)
