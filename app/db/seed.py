import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session, select

from app.db.models.todos import Todo, TodoStatus

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed Todos
# -----------------------------
def seed_todos(session: Session, data: Dict[str, Any]) -> int:
    """Insère les todos du YAML (clé 'todos') si la table est vide. Retourne le nombre inséré."""
    if session.exec(select(Todo)).first():
        logger.info("Les todos existent déjà, aucune insertion effectuée.")
        return 0

    todos: List[Dict[str, Any]] = data.get("todos", [])
    if not todos:
        logger.warning("Aucun todo dans le YAML (clé 'todos').")
        return 0

    session.add_all([
        Todo(
            body=t["body"],
            status=TodoStatus(t.get("status", TodoStatus.pending.value)),
        )
        for t in todos
    ])
    session.commit()
    logger.info("%d todos insérés.", len(todos))
    return len(todos)


def seed_all(session: Session, seed_path: str | Path) -> int:
    return seed_todos(session, load_seed_yaml(seed_path))
