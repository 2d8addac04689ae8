"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (setup_logging)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers de l'API (/api/v1/todos, /api/v1/todo-status) et les pages web (/).

Initialise la base SQLite au démarrage.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging_setup import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import todos, todo_status
from app.web.routers import pages

import uvicorn

setup_logging()
logger = logging.getLogger(__name__)


# Démarrage
@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    logger.info("%s started (env=%s, api=%s)", settings.APP_NAME, settings.ENV, settings.API_BASE_URL)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "todos", "description": "Procédures todo.getAll / todo.create / todo.delete"},
        {"name": "todo-status", "description": "Procédure todoStatus.update"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Routers
app.include_router(todos.router, prefix="/api/v1")
app.include_router(todo_status.router, prefix="/api/v1")
app.include_router(pages.router)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))
