from uuid import UUID
from sqlalchemy.orm import Session
from app import crud
from app.core.exceptions import OrderNotFound
from app.models.order import Order, OrderStatus
import logging

logger = logging.getLogger(__name__)


class OrderStatusTransitioner:
    """
    Cambia el estado de una orden existente.

    No hay grafo de transiciones: cualquier estado es alcanzable desde cualquier otro.
    """

    def __init__(self, order_repository):
        self.order_repository = order_repository

    def update_status(self, db: Session, order_id: UUID, new_status: OrderStatus) -> Order:
        db_order = self.order_repository.get(db, id=order_id)
        if db_order is None:
            raise OrderNotFound(order_id)

        previous = db_order.status
        updated = self.order_repository.update_status(
            db, db_obj=db_order, status=OrderStatus(new_status)
        )
        logger.info(f"Orden {order_id}: {previous.value} -> {updated.status.value}")
        return updated


order_status = OrderStatusTransitioner(order_repository=crud.order)
