"""
➡️ But : Encapsuler les requêtes spécifiques à la table Player.

Ne contient aucune logique métier, juste de la persistance.
"""

from typing import Optional

from sqlmodel import select

from app.db.repositories.base import BaseRepository

from app.db.models.players import Player

class PlayerRepository(BaseRepository[Player]):
    model = Player

    async def email_taken(self, email: str, *, exclude_id: Optional[int] = None) -> bool:
        """Vrai si un autre joueur (hors exclude_id) utilise déjà cet email."""
        stmt = select(Player.id).where(Player.email == email)
        if exclude_id is not None:
            stmt = stmt.where(Player.id != exclude_id)
        return (await self.session.exec(stmt.limit(1))).first() is not None
