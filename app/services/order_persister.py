from typing import List, Tuple
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.database import utcnow
from app.core.exceptions import PersistenceConflict, StockConflict
from app.models.order import Order, OrderItem
from app.models.product import Product
from app.services.order_builder import OrderDraft
import logging

logger = logging.getLogger(__name__)


class OrderPersister:
    """
    Único punto de escritura de una orden.

    La orden, todos sus ítems y el descuento de stock de cada producto se
    escriben en una sola transacción: o se aplica todo o no se aplica nada.
    """

    def _decrement_stock(self, db: Session, draft: OrderDraft) -> None:
        # Orden fijo de IDs para que dos órdenes multi-producto no se bloqueen mutuamente
        for product_id in sorted(draft.stock_changes):
            change = draft.stock_changes[product_id]
            result = db.execute(
                update(Product)
                .where(
                    Product.id == product_id,
                    Product.deleted_at.is_(None),
                    Product.available_quantity >= change.quantity,
                )
                .values(
                    available_quantity=Product.available_quantity - change.quantity,
                    updated_at=utcnow(),
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StockConflict(product_id, change.quantity)

    def _build_rows(self, draft: OrderDraft) -> Tuple[Order, List[OrderItem]]:
        db_order = Order(
            user_id=draft.user_id,
            status=draft.status,
            total_value=draft.total_value,
        )
        db_items = [
            OrderItem(
                order=db_order,
                position=position,
                product_id=item.product_id,
                quantity=item.quantity,
                sale_price=item.sale_price,
            )
            for position, item in enumerate(draft.items)
        ]
        return db_order, db_items

    def commit(self, db: Session, draft: OrderDraft) -> Order:
        """
        Persiste el borrador de forma atómica.

        Args:
            db: Sesión de base de datos (la transacción se confirma aquí)
            draft: Orden construida por `build_order`

        Returns:
            `Order` persistida con sus ítems cargados

        Raises:
            StockConflict: el stock cambió o el producto fue eliminado desde la lectura
            PersistenceConflict: cualquier otra falla de la base de datos
        """
        try:
            self._decrement_stock(db, draft)
            db_order, db_items = self._build_rows(draft)
            db.add_all([db_order, *db_items])
            db.flush()
            db.commit()
        except StockConflict as e:
            db.rollback()
            logger.warning(f"Conflicto de stock al persistir orden: {e.message}")
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error persistiendo orden: {e}", exc_info=True)
            raise PersistenceConflict("The order could not be persisted.") from e

        db.refresh(db_order)
        return db_order


order_persister = OrderPersister()
