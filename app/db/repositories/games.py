from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from sqlalchemy import or_
from sqlmodel import select

from app.db.repositories.base import BaseRepository

from app.db.models.games import Game

class GameRepository(BaseRepository[Game]):
    model = Game

    async def get_by_time(self, game_time: datetime) -> Optional[Game]:
        stmt = select(Game).where(Game.game_time == game_time)
        return (await self.session.exec(stmt)).first()

    async def list_for_captain_on(self, captain_id: int, day: date) -> Sequence[Game]:
        """
        Parties déjà réservées par ce capitaine sur la journée `day`.
        Filtre par intervalle [00:00, lendemain 00:00[ pour rester indexable.
        """
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        stmt = (
            select(Game)
            .where(Game.captain == captain_id, Game.game_time >= start, Game.game_time < end)
            .order_by(Game.id.asc())
        )
        return (await self.session.exec(stmt)).all()

    async def list_involving(self, player_id: int) -> Sequence[Game]:
        """Parties où le joueur occupe n'importe lequel des 4 postes."""
        stmt = select(Game).where(
            or_(
                Game.captain == player_id,
                Game.player2 == player_id,
                Game.player3 == player_id,
                Game.player4 == player_id,
            )
        )
        return (await self.session.exec(stmt)).all()
