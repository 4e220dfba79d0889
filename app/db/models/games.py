"""
➡️ But : Table des parties (4 joueurs, un créneau, une carte de partie dénormalisée).

Les 4 postes ne sont pas des clés étrangères : une partie peut référencer un id
sans joueur (la carte affiche alors l'id seul). La suppression en cascade des
parties d'un joueur est faite par PlayerService.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field

from app.db.models.base import BaseModelDB

# Postes d'une partie, dans l'ordre d'affichage de la carte
SLOTS = ("captain", "player2", "player3", "player4")

class Game(BaseModelDB, table=True):
    captain: int = Field(index=True, nullable=False)
    player2: int = Field(index=True, nullable=False)
    player3: int = Field(index=True, nullable=False)
    player4: int = Field(index=True, nullable=False)

    # heure locale du club, sans fuseau
    game_time: datetime = Field(index=True, nullable=False, sa_type=DateTime(timezone=False))
    # 250 max "déclaré" : pas de troncature, GameService loggue un warning au-delà
    game_card: str = Field(default="", nullable=False)

    def participants(self) -> tuple:
        return tuple(getattr(self, slot) for slot in SLOTS)
