"""
➡️ But : Logique métier commune à toutes les entités "validées" (joueurs, parties).

EntityService :
- applique des règles ordonnées (la 1re règle violée donne le message, pas de cumul),
- attribue l'id suivant (max + 1, ou 1 si la table est vide),
- rejoue la création si l'insert entre en collision (IntegrityError) avec un autre appel concurrent,
- fournit get / get_all / sort_tables.

Les services concrets (PlayerService, GameService) fournissent leurs règles,
leurs clés de tri et la façon d'insérer.

🔹 Avantages :

Une seule implémentation de la création validée et du tri.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy.exc import IntegrityError

from app.db.repositories.base import BaseRepository
from app.domain.sorting import SortDirection, SortKey, SortToggler

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
PayloadT = TypeVar("PayloadT")

# Une règle renvoie None si elle passe, sinon le message de refus
Rule = Callable[[PayloadT], Awaitable[Optional[str]]]


class ConflictError(Exception):
    """Conflit persistant côté store (ex : id déjà pris après plusieurs essais)."""
    pass


async def first_violation(rules: Sequence[Rule], payload: Any) -> Optional[str]:
    for rule in rules:
        message = await rule(payload)
        if message:
            return message
    return None


class EntityService(ABC, Generic[ModelT, PayloadT]):
    label: str = "Entity"
    sort_keys: Dict[str, SortKey] = {}

    def __init__(self, repo: BaseRepository, *, id_retries: int = 5):
        self.repo = repo
        self.id_retries = max(1, id_retries)
        self.sorter = SortToggler(self.sort_keys)

    # -------- à fournir par les services concrets --------

    def create_rules(self) -> List[Rule]:
        return []

    @abstractmethod
    async def _insert(self, new_id: int, payload: PayloadT) -> ModelT:
        """Persiste l'entité avec l'id fourni (sans valider : les règles sont déjà passées)."""

    # -------- Reads --------

    async def get_all(self) -> Sequence[ModelT]:
        return await self.repo.find_all()

    async def get(self, id_: int) -> ModelT:
        entity = await self.repo.get(id_)
        if not entity:
            raise LookupError(f"{self.label} not found.")
        return entity

    async def sort_tables(self, column: str, direction: Optional[SortDirection] = None) -> List[ModelT]:
        rows = await self.repo.find_all()
        return self.sorter.sort(rows, column, direction)

    # -------- Création validée --------

    async def next_id(self) -> int:
        current = await self.repo.max_of(self.repo.model.id)
        return 1 if current is None else current + 1

    async def _create_validated(self, payload: PayloadT) -> Tuple[Optional[ModelT], Optional[str]]:
        """
        Retourne (entité, None) si créée, (None, message) si refusée.
        Sur collision d'insert, rollback puis on recommence depuis la validation :
        l'état a changé, les règles doivent être réévaluées.
        """
        for attempt in range(1, self.id_retries + 1):
            rejection = await first_violation(self.create_rules(), payload)
            if rejection:
                logger.info("%s rejected: %s", self.label, rejection)
                return None, rejection

            new_id = await self.next_id()
            try:
                entity = await self._insert(new_id, payload)
            except IntegrityError:
                await self.repo.rollback()
                logger.warning(
                    "%s id %s collided on insert (attempt %s/%s)", self.label, new_id, attempt, self.id_retries
                )
                continue

            logger.info("%s %s created", self.label, new_id)
            return entity, None

        raise ConflictError(f"{self.label} id assignment failed after {self.id_retries} attempts.")
