"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, règles métier, logs...)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Golf-Club"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "golf_club.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres + asyncpg), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    SEED_PATH: str = "app/db/seed_data.yaml"

    # -----------------------------
    # Règles métier
    # -----------------------------
    SURNAME_MAX_LENGTH: int = 10
    # "any" : toute partie dont un joueur apparaît dans la partie éditée
    # "slot" : même joueur au même poste (Captain/Captain, Player2/Player2...)
    EDIT_CASCADE_MODE: Literal["any", "slot"] = "any"
    ID_ASSIGN_RETRIES: int = 5

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
            object.__setattr__(self, "DATABASE_URL", f"sqlite+aiosqlite:///{self.SQLITE_PATH}")


# Instance globale importable partout
settings = Settings()
