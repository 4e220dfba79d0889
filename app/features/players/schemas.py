"""
➡️ But : Définir les formats d’entrée/sortie pour les joueurs.

Volontairement permissif en entrée : c'est PlayerService qui valide et
renvoie un message lisible ("Select gender.", ...) plutôt qu'une 422.
"""

from pydantic import BaseModel


class PlayerIn(BaseModel):
    firstname: str = ""
    surname: str = ""
    email: str = ""
    gender: str = ""
    handicap: float = 0.0


class PlayerOut(BaseModel):
    id: int
    firstname: str
    surname: str
    email: str
    gender: str
    handicap: float

    model_config = {"from_attributes": True}


class MessageOut(BaseModel):
    message: str
