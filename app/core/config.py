"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, URL de l’API, logs, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo App"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur HTTP
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "todos.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    SEED_PATH: str = "scripts/seed_data.yaml"

    # -----------------------------
    # Client (pages web -> API)
    # -----------------------------
    # Par défaut : l'API servie par ce même process
    API_BASE_URL: Optional[str] = None
    API_TIMEOUT_SECONDS: float = 5.0

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # None = console uniquement

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # API_BASE_URL par défaut depuis HOST/PORT
        if not self.API_BASE_URL:
            object.__setattr__(self, "API_BASE_URL", f"http://{self.HOST}:{self.PORT}/api/v1")


# Instance globale importable partout
settings = Settings()
