import asyncio
import logging

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import SessionFactory, init_db

from app.db.repositories.players import PlayerRepository
from app.db.repositories.games import GameRepository

from app.features.games.services import CascadeMode, GameService
from app.features.players.services import PlayerService

from app.db.seed import seed_all

logger = logging.getLogger("seed")

async def run_seed():
    await init_db()
    async with SessionFactory() as session:
        player_repo = PlayerRepository(session)
        game_repo = GameRepository(session)

        game_service = GameService(
            game_repo,
            player_repo,
            cascade_mode=CascadeMode(settings.EDIT_CASCADE_MODE),
            id_retries=settings.ID_ASSIGN_RETRIES,
        )
        player_service = PlayerService(
            player_repo,
            game_repo,
            game_service,
            surname_max_length=settings.SURNAME_MAX_LENGTH,
            id_retries=settings.ID_ASSIGN_RETRIES,
        )

        await seed_all(
            session=session,
            seed_path=settings.SEED_PATH,
            player_svc=player_service,
            game_svc=game_service,
        )
    logger.info("Seed terminé (%s)", settings.DATABASE_URL)

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(run_seed())
