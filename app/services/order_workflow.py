from typing import Any, Iterable
from uuid import UUID
from sqlalchemy.orm import Session
from app import crud
from app.core.exceptions import DomainError, InvalidOrderRequest, UserNotFound
from app.models.order import Order
from app.services.order_builder import build_order
from app.services.order_persister import OrderPersister, order_persister
from app.services.validation import validate_order_items
import logging

logger = logging.getLogger(__name__)


class OrderCreationWorkflow:
    """
    Crea una orden: resolver usuario y productos, validar, construir y persistir.

    Los colaboradores se reciben en el constructor; la instancia por defecto
    `order_workflow` usa los repositorios de `app.crud`.
    """

    def __init__(self, user_reader, catalog_reader, persister: OrderPersister):
        self.user_reader = user_reader
        self.catalog_reader = catalog_reader
        self.persister = persister

    def create_order(self, db: Session, user_id: UUID, items: Iterable[Any]) -> Order:
        """
        Args:
            db: Sesión de base de datos
            user_id: ID del usuario que compra
            items: Ítems `{product_id, quantity}` pedidos (al menos uno)

        Returns:
            `Order` persistida con ítems, total y estado IN_PROGRESS

        Raises:
            InvalidOrderRequest, UserNotFound, ProductNotFound,
            InsufficientStock, PersistenceConflict
        """
        items = list(items) if items is not None else []
        try:
            validation = validate_order_items(items)
            if not validation.ok:
                raise InvalidOrderRequest(validation.errors)
            logger.info(f"Creando orden para usuario {user_id} con {len(items)} ítems")

            db_user = self.user_reader.get(db, id=user_id)
            if db_user is None:
                raise UserNotFound(user_id)

            product_ids = {
                UUID(str(item["product_id"] if isinstance(item, dict) else item.product_id))
                for item in items
            }
            products = self.catalog_reader.get_many_by_ids(db, ids=product_ids)

            draft = build_order(db_user, items, products)
            created = self.persister.commit(db, draft)
        except DomainError as e:
            logger.warning(f"Orden rechazada para usuario {user_id}: {e.message}")
            raise

        logger.info(f"Orden {created.id} creada: total={created.total_value}, ítems={len(created.items)}")
        return created


order_workflow = OrderCreationWorkflow(
    user_reader=crud.user, catalog_reader=crud.product, persister=order_persister
)
