from typing import Iterable, List
from uuid import UUID
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.product import Product, ProductFeature, ProductImage
from app.schemas.product import (
    ProductCreate, ProductFeatureIn, ProductImageIn, ProductUpdate
)
import logging

logger = logging.getLogger(__name__)


def _build_features(features: List[ProductFeatureIn]) -> List[ProductFeature]:
    return [
        ProductFeature(position=position, name=f.name, description=f.description)
        for position, f in enumerate(features)
    ]


def _build_images(images: List[ProductImageIn]) -> List[ProductImage]:
    return [
        ProductImage(position=position, url=str(i.url), description=i.description)
        for position, i in enumerate(images)
    ]


class CRUDProduct(CRUDBase[Product, ProductCreate, ProductUpdate]):
    def create(self, db: Session, *, obj_in: ProductCreate) -> Product:
        """
        Crea un nuevo producto junto con sus características e imágenes.
        """
        data = obj_in.model_dump(exclude={"features", "images"})
        db_obj = Product(
            **data,
            features=_build_features(obj_in.features),
            images=_build_images(obj_in.images),
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        logger.info(f"Producto creado: {db_obj.id}")
        return db_obj

    def update(
        self, db: Session, *, db_obj: Product, obj_in: ProductUpdate
    ) -> Product:
        """
        Actualiza un producto.

        Si llegan `features` o `images` reemplazan la colección completa; las
        filas que quedan fuera se eliminan (delete-orphan).
        """
        update_data = obj_in.model_dump(exclude_unset=True, exclude={"features", "images"})

        # id y user_id no son actualizables
        update_data.pop("user_id", None)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        if obj_in.features is not None:
            db_obj.features = _build_features(obj_in.features)
        if obj_in.images is not None:
            db_obj.images = _build_images(obj_in.images)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_many_by_ids(self, db: Session, *, ids: Iterable[UUID]) -> List[Product]:
        """
        Busca en una sola consulta todos los productos activos con los IDs dados.

        Los IDs inexistentes o eliminados simplemente no aparecen en el resultado.
        """
        ids = list(ids)
        if not ids:
            return []
        return list(db.scalars(self._active().where(Product.id.in_(ids))).all())


product = CRUDProduct(Product)
