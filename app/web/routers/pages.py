"""
➡️ But : Pages HTML de la todo app (rendu Jinja2).

GET / : onglets, liste du panneau actif, formulaire de création.

POST /todos/{id}/toggle, POST /todos/{id}/delete, POST /todos : exécutent
l'opération puis redirigent (303) vers l'onglet courant.
"""

from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.client.index import DEFAULT_TAB, TABS, Index
from app.core.config import settings
from app.web.dependencies import get_index_page

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["pages"], include_in_schema=False)


def _back_to(page: Index, tab: str) -> RedirectResponse:
    query = urlencode({"tab": page.select(tab).value})
    return RedirectResponse(url=f"/?{query}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    tab: str = Query(DEFAULT_TAB),
    page: Index = Depends(get_index_page),
):
    active = page.select(tab)
    todo_list = page.open(active.value)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.APP_NAME,
            "tabs": TABS,
            "active": active,
            "rows": todo_list.rows(),
        },
    )


@router.post("/todos/{todo_id}/toggle")
def toggle(
    todo_id: int,
    tab: str = Query(DEFAULT_TAB),
    page: Index = Depends(get_index_page),
):
    todo_list = page.open(tab)
    todo_list.toggle(todo_id)
    return _back_to(page, tab)


@router.post("/todos/{todo_id}/delete")
def delete(
    todo_id: int,
    tab: str = Query(DEFAULT_TAB),
    page: Index = Depends(get_index_page),
):
    todo_list = page.open(tab)
    todo_list.delete(todo_id)
    return _back_to(page, tab)


@router.post("/todos")
def create(
    body: str = Form(""),
    tab: str = Form(DEFAULT_TAB),
    page: Index = Depends(get_index_page),
):
    page.create(body)
    return _back_to(page, tab)
