from typing import Any, Generic, Optional, Type, TypeVar
from sqlmodel import SQLModel, Session

# Type générique pour le modèle (Todo, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base : persistance générique, aucune logique métier.

    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Chaque écriture est commitée immédiatement (une requête = une transaction).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- WRITE ----------

    def create(self, **fields) -> ModelT:
        entity = self.model(**fields)
        return self._save(entity)

    def update(self, entity: ModelT, **changes) -> ModelT:
        for key, value in changes.items():
            setattr(entity, key, value)
        return self._save(entity)

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self.session.commit()

    def _save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity
