"""
➡️ But : Règles de validation partagées (noms, emails, genres, handicap).

Fonctions pures : pas de session, pas d'I/O. Les services les composent
en règles ordonnées (voir app.domain.services).
"""

import re
from typing import Optional

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 10

EMAIL_MIN_LENGTH = 5
EMAIL_MAX_LENGTH = 30

GENDERS = ("M", "F", "O")

HANDICAP_MIN = 1.0
HANDICAP_MAX = 50.0

_NAME_RE = re.compile(r"[a-zA-Z \-]*")
_EMAIL_RE = re.compile(r"[\w\-.]+@([\w-]+\.)+[\w-]{2,4}")


def is_valid_name(name: Optional[str], *, max_length: int = NAME_MAX_LENGTH) -> bool:
    """Lettres, espaces et tirets uniquement, longueur 1..max_length."""
    if not name or not (NAME_MIN_LENGTH <= len(name) <= max_length):
        return False
    return _NAME_RE.fullmatch(name) is not None


def is_valid_email(email: Optional[str]) -> bool:
    if not email or not (EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH):
        return False
    return _EMAIL_RE.fullmatch(email) is not None


def is_valid_gender(gender: Optional[str]) -> bool:
    return gender in GENDERS


def is_handicap_selected(handicap: Optional[float]) -> bool:
    # 0.0 = valeur par défaut du formulaire, "rien choisi"
    return handicap is not None and handicap != 0.0


def is_handicap_in_range(handicap: float) -> bool:
    return HANDICAP_MIN <= handicap <= HANDICAP_MAX
