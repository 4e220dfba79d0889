"""
➡️ But : Table des joueurs du club.

L'email est unique côté base en plus du contrôle fait par PlayerService.
"""

from sqlmodel import Field

from app.db.models.base import BaseModelDB

class Player(BaseModelDB, table=True):
    firstname: str = Field(nullable=False, max_length=20)
    surname: str = Field(nullable=False, max_length=20)
    email: str = Field(index=True, unique=True, nullable=False, max_length=30)
    gender: str = Field(nullable=False, max_length=1)  # M | F | O
    handicap: float = Field(default=0.0, nullable=False)
