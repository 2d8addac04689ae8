"""
➡️ But : Cache de requêtes partagé par toutes les vues du process.

Chaque entrée est identifiée par une clé (procédure, paramètres), ex :

("todo.getAll", ("completed", "pending"))

fetch(key, loader, refresh=False) : renvoie l'instantané en cache, ou le charge ;
refresh=True recharge toujours (montage d'une vue).

refetch(key) : recharge une clé et remplace l'instantané en entier.

invalidate(procedure) : oublie toutes les clés d'une procédure ; le prochain fetch recharge.

Les instantanés sont des tuples : personne ne les modifie en place, on les remplace.

Le loader (requête HTTP) s'exécute sous le verrou : un `todo.getAll` lent bloque
les autres vues jusqu'à API_TIMEOUT_SECONDS. Acceptable pour un seul process de démo.
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

QueryKey = Tuple[str, Tuple[Any, ...]]
Loader = Callable[[], Iterable[Any]]


class QueryCache:
    def __init__(self):
        self._lock = threading.RLock()
        self._snapshots: Dict[QueryKey, Tuple[Any, ...]] = {}
        self._loaders: Dict[QueryKey, Loader] = {}

    def get(self, key: QueryKey) -> Optional[Tuple[Any, ...]]:
        with self._lock:
            return self._snapshots.get(key)

    def fetch(self, key: QueryKey, loader: Loader, refresh: bool = False) -> Tuple[Any, ...]:
        with self._lock:
            self._loaders[key] = loader
            if not refresh and key in self._snapshots:
                return self._snapshots[key]
            return self._load(key)

    def refetch(self, key: QueryKey) -> Tuple[Any, ...]:
        """Recharge `key` avec le dernier loader enregistré ; KeyError si la clé n'a jamais été fetch."""
        with self._lock:
            if key not in self._loaders:
                raise KeyError(key)
            return self._load(key)

    def invalidate(self, procedure: str) -> int:
        with self._lock:
            stale = [k for k in self._snapshots if k[0] == procedure]
            for k in stale:
                del self._snapshots[k]
        logger.debug("invalidated %d cache entries for %s", len(stale), procedure)
        return len(stale)

    def _load(self, key: QueryKey) -> Tuple[Any, ...]:
        # En cas d'erreur du loader, l'ancien instantané reste en place.
        snapshot = tuple(self._loaders[key]())
        self._snapshots[key] = snapshot
        logger.debug("loaded %s (%d items)", key[0], len(snapshot))
        return snapshot
