from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload, selectinload
from app.crud.base import CRUDBase
from app.models.order import Order, OrderStatus
from app.schemas.order import OrderCreate, OrderStatusUpdate


class CRUDOrder(CRUDBase[Order, OrderCreate, OrderStatusUpdate]):
    def get_with_items(self, db: Session, *, order_id: UUID) -> Optional[Order]:
        query = (
            self._active()
            .options(selectinload(Order.items))
            .where(Order.id == order_id)
        )
        return db.scalars(query).first()

    def get_by_user(self, db: Session, *, user_id: UUID) -> List[Order]:
        query = (
            self._active()
            .options(joinedload(Order.user))
            .where(Order.user_id == user_id)
            .order_by(Order.created_at, Order.id)
        )
        return list(db.scalars(query).all())

    def update_status(self, db: Session, *, db_obj: Order, status: OrderStatus) -> Order:
        db_obj.status = status
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


order = CRUDOrder(Order)
