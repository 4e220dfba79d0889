"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_player_service() : crée un PlayerService à partir d’une session DB.

get_game_service() : idem pour les parties.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).

FastAPI met les dépendances en cache par requête : tous les repositories
d'une même requête partagent la même session (donc la même transaction).
"""

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.db.session import get_session

from app.db.repositories.players import PlayerRepository
from app.db.repositories.games import GameRepository

from app.features.games.services import CascadeMode, GameService
from app.features.players.services import PlayerService


# -----------------------------
# Repositories
# -----------------------------
def get_player_repository(session: AsyncSession = Depends(get_session)) -> PlayerRepository:
    return PlayerRepository(session)

def get_game_repository(session: AsyncSession = Depends(get_session)) -> GameRepository:
    return GameRepository(session)


# -----------------------------
# Game service
# -----------------------------
def get_game_service(
    game_repo: GameRepository = Depends(get_game_repository),
    player_repo: PlayerRepository = Depends(get_player_repository),
) -> GameService:
    return GameService(
        game_repo=game_repo,
        player_repo=player_repo,
        cascade_mode=CascadeMode(settings.EDIT_CASCADE_MODE),
        id_retries=settings.ID_ASSIGN_RETRIES,
    )


# -----------------------------
# Player service
# -----------------------------
def get_player_service(
    player_repo: PlayerRepository = Depends(get_player_repository),
    game_repo: GameRepository = Depends(get_game_repository),
    game_svc: GameService = Depends(get_game_service),
) -> PlayerService:
    return PlayerService(
        player_repo=player_repo,
        game_repo=game_repo,
        game_svc=game_svc,
        surname_max_length=settings.SURNAME_MAX_LENGTH,
        id_retries=settings.ID_ASSIGN_RETRIES,
    )
