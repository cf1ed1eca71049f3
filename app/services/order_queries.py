from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
from app import crud
from app.core.exceptions import OrderNotFound, UserNotFound
from app.models.order import Order


class OrderQueryService:
    """Consultas de solo lectura sobre órdenes persistidas."""

    def __init__(self, user_reader, order_repository):
        self.user_reader = user_reader
        self.order_repository = order_repository

    def list_orders_for_user(self, db: Session, user_id: UUID) -> List[Order]:
        if self.user_reader.get(db, id=user_id) is None:
            raise UserNotFound(user_id)
        return self.order_repository.get_by_user(db, user_id=user_id)

    def get_order(self, db: Session, order_id: UUID) -> Order:
        db_order = self.order_repository.get_with_items(db, order_id=order_id)
        if db_order is None:
            raise OrderNotFound(order_id)
        return db_order


order_queries = OrderQueryService(user_reader=crud.user, order_repository=crud.order)
