"""
➡️ But : Configurer la base (SQLite async par défaut) et gérer les sessions de base de données.

engine : connexion asynchrone à la base (sqlite+aiosqlite:///golf_club.db).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Import all models for creating all tables
from app.db.models.players import Player  # noqa: F401
from app.db.models.games import Game  # noqa: F401

from app.core.config import settings


def build_engine(url: str, *, echo: bool = False, **engine_kwargs) -> AsyncEngine:
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite")

    # aiosqlite gère déjà son propre thread : pas de check_same_thread ici
    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **engine_kwargs,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False : les objets restent lisibles après commit (rendu des cartes, réponses API)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# echo seulement en dev pour ne pas polluer les logs en prod
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=(settings.ENV == "dev"))
SessionFactory = build_session_factory(engine)


async def init_db(bind: AsyncEngine = engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    Pas d'outil de migration ici.
    """
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        async def route(..., session: AsyncSession = Depends(get_session)):
            ...
    """
    async with SessionFactory() as session:
        yield session
