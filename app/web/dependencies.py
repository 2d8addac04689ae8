"""
➡️ But : Fournir aux pages web l'instance unique de la page Index.

L'Index (et son QueryCache) vit pour toute la durée du process : c'est l'état
"client" de l'application. Les tests remplacent get_index_page via
app.dependency_overrides.
"""

from functools import lru_cache

from app.client.api import build_api_client
from app.client.index import Index


# Instance unique partagée par le threadpool : chaque TodoList protège son état
# par un verrou, le QueryCache aussi.
@lru_cache(maxsize=1)
def get_index_page() -> Index:
    return Index(build_api_client())
