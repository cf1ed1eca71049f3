from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.core.database import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Repositorio genérico con borrado lógico.

    Los registros con `deleted_at` no nulo son invisibles para todas las lecturas.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _active(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un registro activo por ID.

        Args:
            db: Sesión de base de datos
            id: UUID del registro

        Returns:
            Objeto del modelo o None si no existe o fue eliminado
        """
        return db.scalars(self._active().where(self.model.id == id)).first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        query = self._active().order_by(self.model.created_at).offset(skip).limit(limit)
        return list(db.scalars(query).all())

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar un registro existente.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto existente en la BD
            obj_in: Datos de actualización (schema o dict)

        Returns:
            Objeto actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field in ("id", "created_at", "deleted_at"):
                continue
            setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: Any) -> Optional[ModelType]:
        """
        Eliminar lógicamente un registro por ID.

        Returns:
            Objeto eliminado o None si no existía
        """
        obj = self.get(db, id=id)
        if obj:
            obj.deleted_at = utcnow()
            db.add(obj)
            db.commit()
        return obj
