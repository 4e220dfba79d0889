from pathlib import Path
from typing import Any, Dict, List
import logging

import yaml
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.db.models.games import Game
from app.db.models.players import Player
from app.features.games.schemas import GameIn
from app.features.games.services import GameService
from app.features.players.schemas import PlayerIn
from app.features.players.services import PlayerService

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
# Seed Players
# -----------------------------
async def seed_players(session: AsyncSession, svc: PlayerService, data: Dict[str, Any]) -> int:
    """
    Passe par PlayerService : mêmes règles et même attribution d'id qu'en prod.
    Un joueur refusé est loggé puis ignoré.
    """
    if (await session.exec(select(Player))).first():
        logger.info("ℹ️ Les joueurs existent déjà, aucune insertion effectuée.")
        return 0

    players: List[Dict[str, Any]] = data.get("players", [])
    if not players:
        logger.warning("⚠️ Aucun joueur dans le YAML (clé 'players').")
        return 0

    inserted = 0
    for p in players:
        message = await svc.create(PlayerIn(**p))
        if message.endswith(" added."):
            inserted += 1
        else:
            logger.warning("⚠️ Joueur ignoré (%s): %s", p.get("email"), message)

    logger.info("✅ %s joueurs insérés.", inserted)
    return inserted


# -----------------------------
# Seed Games
# -----------------------------
async def seed_games(session: AsyncSession, svc: GameService, data: Dict[str, Any]) -> int:
    if (await session.exec(select(Game))).first():
        logger.info("ℹ️ Les parties existent déjà, aucune insertion effectuée.")
        return 0

    games: List[Dict[str, Any]] = data.get("games", [])
    if not games:
        logger.warning("⚠️ Aucune partie dans le YAML (clé 'games').")
        return 0

    inserted = 0
    for g in games:
        result = await svc.create(GameIn(**g))
        if result.startswith("Game Id "):
            inserted += 1
        else:
            logger.warning("⚠️ Partie ignorée (%s): %s", g.get("game_time"), result)

    logger.info("✅ %s parties insérées.", inserted)
    return inserted


# -----------------------------
# Main entrypoint
# -----------------------------
async def seed_all(
    session: AsyncSession,
    seed_path: str | Path,
    player_svc: PlayerService,
    game_svc: GameService,
) -> None:
    data = load_seed_yaml(seed_path)

    # joueurs avant parties : les cartes ont besoin des noms
    await seed_players(session, player_svc, data)
    await seed_games(session, game_svc, data)
