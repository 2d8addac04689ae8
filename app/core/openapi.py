"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

documenter la correspondance procédures ↔ routes HTTP,

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.

Tu peux y ajouter des conventions d’API (statuts, formats, etc.).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de la Todo App (FastAPI + SQLite).\n\n"
            "### Procédures\n"
            "- `todo.getAll` : `GET /api/v1/todos?statuses=...`\n"
            "- `todo.create` : `POST /api/v1/todos`\n"
            "- `todo.delete` : `DELETE /api/v1/todos/{id}`\n"
            "- `todoStatus.update` : `PATCH /api/v1/todo-status/{todo_id}`\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Statuts possibles : `pending`, `completed`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
