"""
➡️ But : Composition de la page d'accueil : trois onglets + formulaire de création.

Onglets (un seul visible à la fois, `tab1` par défaut) :

tab1 "All" → TodoList sans filtre

tab2 "Pending" → TodoList filtrée sur pending

tab3 "Completed" → TodoList filtrée sur completed

Toutes les listes partagent le même QueryCache : un refetch déclenché depuis un
onglet met à jour les autres.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from app.client.api import ApiError, TodoApiClient
from app.client.cache import QueryCache
from app.client.todo_list import GET_ALL, TodoList
from app.db.models.todos import TodoStatus
from app.features.todos.schemas import TodoOut

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tab:
    value: str
    label: str
    status: Optional[TodoStatus]


TABS = (
    Tab("tab1", "All", None),
    Tab("tab2", "Pending", TodoStatus.pending),
    Tab("tab3", "Completed", TodoStatus.completed),
)
DEFAULT_TAB = TABS[0].value


class Index:
    def __init__(self, api: TodoApiClient, cache: Optional[QueryCache] = None):
        self.api = api
        self.cache = cache if cache is not None else QueryCache()
        self.panels: Dict[str, TodoList] = {
            tab.value: TodoList(api, self.cache, status=tab.status) for tab in TABS
        }

    def select(self, tab_value: Optional[str]) -> Tab:
        """Onglet correspondant à `tab_value` ; onglet par défaut si inconnu."""
        for tab in TABS:
            if tab.value == tab_value:
                return tab
        return TABS[0]

    def panel(self, tab_value: Optional[str]) -> TodoList:
        return self.panels[self.select(tab_value).value]

    def open(self, tab_value: Optional[str]) -> TodoList:
        """Monte le panneau actif : recharge sa liste depuis l'API et la renvoie."""
        todo_list = self.panel(tab_value)
        todo_list.load(refresh=True)
        return todo_list

    def create(self, body: str) -> Optional[TodoOut]:
        """
        Formulaire de création. Le nouveau todo apparaît dans All et Pending
        au prochain affichage (invalidation de `todo.getAll`).
        """
        body = (body or "").strip()
        if not body:
            logger.warning("Ignoring todo creation with an empty body")
            return None
        try:
            todo = self.api.create(body)
        except ApiError as exc:
            logger.error("Error creating todo: %s", exc)
            return None
        self.cache.invalidate(GET_ALL)
        return todo
