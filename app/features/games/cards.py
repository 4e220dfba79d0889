"""
➡️ But : Rendu texte de la "carte de partie" (game card).

Format figé (l'UI et les tests s'appuient dessus) :

    Game Id   12
    Game Time Tuesday 30/01/2029 at 15:00 at 3.00 PM

    Captain Id 1          Jane Smith      F/12.5
    Player2 Id 2          John Doe        M/20
    Player3 Id 3          Ann Lee        F/7
    Player4 Id4          Bob Ray        M/30

- libellés alignés sur 10 colonnes ; "Player4 Id" n'a pas d'espace avant l'id (historique, conservé)
- id et nom de famille alignés sur 10 colonnes
- joueur introuvable : l'id brut seul, nom / genre / handicap vides
- pas de retour à la ligne final

Fonctions pures : aucun accès base, le service fournit les joueurs.
"""

from datetime import datetime
from typing import Mapping, Optional

from app.db.models.games import Game
from app.db.models.players import Player

LABEL_WIDTH = 10
CARD_MAX_LENGTH = 250

# Indépendant de la locale du serveur
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

SLOT_LABELS = (
    ("captain", "Captain Id"),
    ("player2", "Player2 Id"),
    ("player3", "Player3 Id"),
    ("player4", "Player4 Id"),
)


def format_short_date(value: datetime) -> str:
    return value.strftime("%d/%m/%Y")


def format_twelve_hour(value: datetime) -> str:
    """Ex : 15:05 -> '3.05 PM', 00:30 -> '12.30 AM'."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}.{value.minute:02d} {suffix}"


def format_game_time(value: datetime) -> str:
    return (
        f"{WEEKDAYS[value.weekday()]} {format_short_date(value)} at {value:%H:%M}"
        f" at {format_twelve_hour(value)}"
    )


def format_handicap(handicap: Optional[float]) -> str:
    # forme courte "culture invariante" : 12.0 -> '12', 12.5 -> '12.5'
    if handicap is None:
        return ""
    value = float(handicap)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _slot_line(label: str, player_id: int, player: Optional[Player], *, last: bool) -> str:
    firstname = player.firstname if player else ""
    surname = player.surname if player else ""
    gender = player.gender if player else ""
    handicap = format_handicap(player.handicap) if player else ""

    separator = "" if last else " "
    return (
        f"{label:<{LABEL_WIDTH}}{separator}{str(player_id):<{LABEL_WIDTH}} "
        f"{firstname} {surname:<{LABEL_WIDTH}} {gender}/{handicap}"
    )


def render_game_card(game: Game, players_by_id: Mapping[int, Player]) -> str:
    header = (
        f"{'Game Id ':<{LABEL_WIDTH}}{game.id}\n"
        f"{'Game Time ':<{LABEL_WIDTH}}{format_game_time(game.game_time)}"
    )

    lines = []
    for index, (slot, label) in enumerate(SLOT_LABELS):
        player_id = getattr(game, slot)
        lines.append(
            _slot_line(label, player_id, players_by_id.get(player_id), last=(index == len(SLOT_LABELS) - 1))
        )

    return header + "\n\n" + "\n".join(lines)
