"""
➡️ But : Contenir la logique métier des joueurs : valider, attribuer l'id, répercuter sur les parties.

PlayerService :
- create / edit : règles dans l'ordre, la 1re violée donne le message (pas d'exception)
- edit : met à jour le joueur ET recalcule les cartes de toutes ses parties (un seul commit)
- delete : supprime d'abord toutes ses parties, puis le joueur (un seul commit)

Lève LookupError si le joueur n'existe pas (la route le traduit en 404).
"""

import logging
from typing import List, Optional

from app.db.models.base import utc_now
from app.db.models.players import Player
from app.db.repositories.games import GameRepository
from app.db.repositories.players import PlayerRepository
from app.domain.services import EntityService, Rule, first_violation
from app.domain.validation import (
    HANDICAP_MAX,
    HANDICAP_MIN,
    NAME_MAX_LENGTH,
    is_handicap_in_range,
    is_handicap_selected,
    is_valid_email,
    is_valid_gender,
    is_valid_name,
)
from app.features.games.services import GameService
from app.features.players.schemas import PlayerIn

logger = logging.getLogger(__name__)


class PlayerService(EntityService[Player, PlayerIn]):
    label = "Player"
    sort_keys = {
        "Id": lambda p: p.id,
        "Firstname": lambda p: p.firstname,
        "Surname": lambda p: p.surname,
        "Email": lambda p: p.email,
        "Gender": lambda p: p.gender,
        "Handicap": lambda p: p.handicap,
    }

    def __init__(
        self,
        player_repo: PlayerRepository,
        game_repo: GameRepository,
        game_svc: GameService,
        *,
        surname_max_length: int = NAME_MAX_LENGTH,
        id_retries: int = 5,
    ):
        super().__init__(player_repo, id_retries=id_retries)
        self.players = player_repo
        self.games = game_repo
        self.game_svc = game_svc
        self.surname_max_length = surname_max_length

    # -------- Règles --------

    def field_rules(self, *, exclude_id: Optional[int] = None) -> List[Rule]:
        async def names_valid(payload: PlayerIn) -> Optional[str]:
            if not is_valid_name(payload.firstname) or not is_valid_name(
                payload.surname, max_length=self.surname_max_length
            ):
                return f"Incorrect firstname or surname - max length {self.surname_max_length} each."
            return None

        async def email_valid(payload: PlayerIn) -> Optional[str]:
            if not is_valid_email(payload.email):
                return "Invalid email address - max length 30."
            return None

        async def email_unused(payload: PlayerIn) -> Optional[str]:
            if await self.players.email_taken(payload.email, exclude_id=exclude_id):
                return "A player with this email already exists."
            return None

        async def gender_selected(payload: PlayerIn) -> Optional[str]:
            if not payload.gender:
                return "Select gender."
            if not is_valid_gender(payload.gender):
                return "Gender must be either M, F or O."
            return None

        async def handicap_selected(payload: PlayerIn) -> Optional[str]:
            if not is_handicap_selected(payload.handicap):
                return "Select handicap."
            if not is_handicap_in_range(payload.handicap):
                return f"Handicap must be between {HANDICAP_MIN:g} and {HANDICAP_MAX:g}."
            return None

        return [names_valid, email_valid, email_unused, gender_selected, handicap_selected]

    def create_rules(self) -> List[Rule]:
        return self.field_rules()

    # -------- Commands --------

    async def _insert(self, new_id: int, payload: PlayerIn) -> Player:
        return await self.players.create(id=new_id, **payload.model_dump())

    async def create(self, payload: PlayerIn) -> str:
        player, rejection = await self._create_validated(payload)
        if rejection:
            return rejection
        return f"{player.firstname} {player.surname} added."

    async def edit(self, player_id: int, payload: PlayerIn) -> str:
        player = await self.get(player_id)

        rejection = await first_violation(self.field_rules(exclude_id=player.id), payload)
        if rejection:
            logger.info("Player %s edit rejected: %s", player_id, rejection)
            return rejection

        await self.players.update(player, commit=False, updated_at=utc_now(), **payload.model_dump())
        # le joueur est flushé : les cartes recalculées voient ses nouvelles valeurs
        games = await self.games.list_involving(player.id)
        await self.game_svc.refresh_cards(games)
        await self.players.commit()

        logger.info("Player %s edited, %s card(s) refreshed", player_id, len(games))
        return f"{player.firstname} {player.surname} updated."

    async def delete(self, player_id: int) -> None:
        player = await self.get(player_id)

        # parties d'abord, joueur ensuite
        games = await self.games.list_involving(player.id)
        for game in games:
            await self.games.delete(game, commit=False)
        await self.players.delete(player, commit=False)
        await self.players.commit()

        logger.info("Player %s deleted with %s game(s)", player_id, len(games))
