"""
➡️ But : Configurer les logs de l'application une seule fois, au démarrage.

setup_logging() installe :

un handler console lisible (niveau settings.LOG_LEVEL)

un handler fichier optionnel (si settings.LOG_DIR est défini)

Les modules loggent ensuite via logging.getLogger(__name__).

🔹 Avantages :

Un seul format de log pour le serveur, le client et les scripts.

Les librairies bavardes (httpx, sqlalchemy) ne polluent pas la console.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from app.core.config import settings

_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(
    *,
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    À appeler UNE fois, très tôt (avant le premier logger.info).
    Les handlers existants sont retirés pour éviter les doublons (reload uvicorn).
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_dir = log_dir if log_dir is not None else settings.LOG_DIR

    root = logging.getLogger()
    root.setLevel(level_name)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # Fichier (tout, en DEBUG)
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path / "todo-app.log"), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
