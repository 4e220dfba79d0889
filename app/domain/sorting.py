"""
➡️ But : Tri des tableaux (joueurs, parties) par colonne.

sort_rows() est une fonction pure : (lignes, clé, sens) -> nouvelle liste.
SortToggler garde le comportement historique des écrans : sans sens explicite,
chaque appel inverse le sens (1er appel croissant, 2e décroissant, ...),
quelle que soit la colonne demandée.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

RowT = TypeVar("RowT")
SortKey = Callable[[Any], Any]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def sort_rows(rows: Sequence[RowT], key: SortKey, direction: SortDirection) -> List[RowT]:
    # sorted() est stable : les ex aequo gardent l'ordre du store
    return sorted(rows, key=key, reverse=(direction == SortDirection.DESC))


class SortToggler:
    def __init__(self, sort_keys: Dict[str, SortKey]):
        self.sort_keys = sort_keys
        self.ascending = False

    def next_direction(self) -> SortDirection:
        self.ascending = not self.ascending
        return SortDirection.ASC if self.ascending else SortDirection.DESC

    def sort(
        self,
        rows: Sequence[RowT],
        column: str,
        direction: Optional[SortDirection] = None,
    ) -> List[RowT]:
        """
        Trie `rows` selon `column`.
        - direction=None : le sens bascule à chaque appel (même si la colonne est inconnue).
        - colonne inconnue : la liste est renvoyée telle quelle.
        """
        if direction is None:
            direction = self.next_direction()
        key = self.sort_keys.get(column)
        if key is None:
            return list(rows)
        return sort_rows(rows, key, direction)
