from datetime import datetime

from pydantic import BaseModel


# -----------------------------
# Game booking
# -----------------------------

class GameIn(BaseModel):
    captain: int
    player2: int
    player3: int
    player4: int
    game_time: datetime


class GameOut(BaseModel):
    id: int
    captain: int
    player2: int
    player3: int
    player4: int
    game_time: datetime
    game_card: str

    model_config = {"from_attributes": True}


# -----------------------------
# Card
# -----------------------------

class GameCardOut(BaseModel):
    id: int
    game_card: str
