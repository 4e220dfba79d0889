"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

⚠️ L'id n'est PAS auto-incrémenté par la base : il est attribué par le service
(max + 1). La clé primaire garantit qu'un doublon d'id échoue à l'insert.

⚠️ Dates stockées sans fuseau (DateTime naïf) : horodatages en UTC, heures de
partie en heure locale du club.
"""

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Heure UTC courante, sans tzinfo (colonnes DateTime naïves)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"autoincrement": False})
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=False))
