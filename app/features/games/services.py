import logging
from datetime import time
from enum import Enum
from typing import Iterable, List, Optional

from app.db.models.base import utc_now
from app.db.models.games import SLOTS, Game
from app.db.repositories.games import GameRepository
from app.db.repositories.players import PlayerRepository
from app.domain.services import EntityService, Rule
from app.features.games.cards import (
    CARD_MAX_LENGTH,
    format_short_date,
    format_twelve_hour,
    render_game_card,
)
from app.features.games.schemas import GameIn

logger = logging.getLogger(__name__)


class CascadeMode(str, Enum):
    """
    Quelles parties voient leur carte recalculée quand une partie est éditée.
    - ANY  : toute partie dont un des 4 joueurs figure dans la partie éditée
    - SLOT : même joueur au même poste (Captain/Captain, Player2/Player2, ...)
    """
    ANY = "any"
    SLOT = "slot"


def shares_participant(edited: Game, other: Game, mode: CascadeMode) -> bool:
    if mode == CascadeMode.SLOT:
        return any(getattr(edited, slot) == getattr(other, slot) for slot in SLOTS)
    return bool(set(edited.participants()) & set(other.participants()))


class GameService(EntityService[Game, GameIn]):
    """
    Service métier Game : règles de réservation + cartes de partie.

    - create : règles dans l'ordre, la 1re violée donne le message (pas de cumul)
    - edit : pas de revalidation des réservations, recalcul des cartes concernées
    - les cartes dépendent aussi des joueurs : PlayerService appelle refresh_cards()
    """
    label = "Game"
    sort_keys = {
        "Id": lambda g: g.id,
        "Game Time": lambda g: g.game_time,
        "Captain": lambda g: g.captain,
        "Player2": lambda g: g.player2,
        "Player3": lambda g: g.player3,
        "Player4": lambda g: g.player4,
    }

    def __init__(
        self,
        game_repo: GameRepository,
        player_repo: PlayerRepository,
        *,
        cascade_mode: CascadeMode = CascadeMode.ANY,
        id_retries: int = 5,
    ):
        super().__init__(game_repo, id_retries=id_retries)
        self.games = game_repo
        self.players = player_repo
        self.cascade_mode = CascadeMode(cascade_mode)

    # ---------------------------------------------------------------------
    # Règles de réservation
    # ---------------------------------------------------------------------

    def create_rules(self) -> List[Rule]:
        return [
            self._players_unique,
            self._time_selected,
            self._time_available,
            self._captain_free,
        ]

    async def _players_unique(self, payload: GameIn) -> Optional[str]:
        ids = (payload.captain, payload.player2, payload.player3, payload.player4)
        if len(set(ids)) < len(ids):
            return "Players must be unique."
        return None

    async def _time_selected(self, payload: GameIn) -> Optional[str]:
        # minuit = valeur par défaut du sélecteur, "aucune heure choisie"
        if payload.game_time.time() == time.min:
            return "Select a valid time."
        return None

    async def _time_available(self, payload: GameIn) -> Optional[str]:
        if await self.games.get_by_time(payload.game_time):
            return (
                f"Game time of {format_twelve_hour(payload.game_time)} "
                f"on {format_short_date(payload.game_time)} is unavailable."
            )
        return None

    async def _captain_free(self, payload: GameIn) -> Optional[str]:
        booked = await self.games.list_for_captain_on(payload.captain, payload.game_time.date())
        if booked:
            return (
                f"Captain has existing booking on {format_short_date(payload.game_time)}. "
                f"(Game Id: {booked[0].id})"
            )
        return None

    # ---------------------------------------------------------------------
    # Cartes de partie
    # ---------------------------------------------------------------------

    async def generate_card(self, game: Game) -> str:
        players = await self.players.find_all()
        card = render_game_card(game, {p.id: p for p in players})
        if len(card) > CARD_MAX_LENGTH:
            # pas de troncature : on signale seulement
            logger.warning("Game %s card is %s chars (max %s)", game.id, len(card), CARD_MAX_LENGTH)
        return card

    async def refresh_cards(self, games: Iterable[Game]) -> List[Game]:
        """
        Recalcule et enregistre (sans commit) la carte de chaque partie.
        Le commit est laissé à l'appelant : une seule transaction pour tout le lot.
        """
        players = {p.id: p for p in await self.players.find_all()}
        refreshed = []
        for game in games:
            card = render_game_card(game, players)
            refreshed.append(
                await self.games.update(game, commit=False, game_card=card, updated_at=utc_now())
            )
        return refreshed

    # ---------------------------------------------------------------------
    # Commands
    # ---------------------------------------------------------------------

    async def _insert(self, new_id: int, payload: GameIn) -> Game:
        draft = Game(id=new_id, **payload.model_dump())
        card = await self.generate_card(draft)
        return await self.games.create(id=new_id, game_card=card, **payload.model_dump())

    async def create(self, payload: GameIn) -> str:
        """Retourne la carte de la partie créée, ou le message de refus."""
        game, rejection = await self._create_validated(payload)
        if rejection:
            return rejection
        return game.game_card

    async def edit(self, game_id: int, payload: GameIn) -> str:
        game = await self.get(game_id)
        await self.games.update(game, commit=False, updated_at=utc_now(), **payload.model_dump())

        affected = [
            g for g in await self.games.find_all()
            if g.id == game.id or shares_participant(game, g, self.cascade_mode)
        ]
        await self.refresh_cards(affected)
        await self.games.commit()

        logger.info("Game %s edited, %s card(s) refreshed", game.id, len(affected))
        return game.game_card

    async def delete(self, game_id: int) -> None:
        game = await self.get(game_id)
        await self.games.delete(game)
        logger.info("Game %s deleted", game_id)
