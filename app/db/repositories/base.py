from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, select, func
from sqlmodel.ext.asyncio.session import AsyncSession

# Type générique pour le modèle (Player, Game, etc.)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards (asynchrone).

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, max.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    # ---------- READ ----------

    async def find_all(self, *predicates: Any) -> Sequence[ModelT]:
        """Retourne tous les enregistrements (filtrés si des prédicats sont fournis), ordre du store."""
        statement = select(self.model)
        if predicates:
            statement = statement.where(*predicates)
        return (await self.session.exec(statement)).all()

    async def max_of(self, column: Any) -> Optional[Any]:
        """Retourne le max d'une colonne, ou None si la table est vide."""
        return (await self.session.exec(select(func.max(column)))).one()

    async def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return await self.session.get(self.model, id_)

    # ---------- CREATE ----------

    async def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        self.session.add(entity)
        if commit:
            await self.session.commit()
            await self.session.refresh(entity)
        else:
            await self.session.flush()
        return entity

    # ---------- UPDATE ----------

    async def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Met à jour un enregistrement existant.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        if commit:
            await self.session.commit()
            await self.session.refresh(entity)
        else:
            await self.session.flush()
        return entity

    # ---------- DELETE ----------

    async def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        """
        Supprime un enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        await self.session.delete(entity)
        if commit:
            await self.session.commit()
        else:
            await self.session.flush()

    # ---------- TRANSACTION ----------

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
