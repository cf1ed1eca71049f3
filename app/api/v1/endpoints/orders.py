from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.api import deps
from app.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate, OrderWithUser
from app.services.order_queries import order_queries
from app.services.order_status import order_status
from app.services.order_workflow import order_workflow

router = APIRouter()


@router.post("/", response_model=OrderResponse, status_code=201)
def create_order(
    *,
    db: Session = Depends(deps.get_db),
    user_id: UUID = Query(..., description="ID del usuario que realiza la orden"),
    order_in: OrderCreate,
):
    """
    Crear una nueva orden de compra.

    Valida el stock de cada producto, congela el precio de venta de cada ítem y
    descuenta el inventario en la misma transacción en la que se guarda la orden.

    Args:
        `db`: Sesión de base de datos
        `user_id`: ID del usuario que realiza la orden
        `order_in`: Ítems pedidos

    Returns:
        `OrderResponse`: Orden creada con sus ítems y el total calculado

    Raises:
        `404` si el usuario o algún producto no existe
        `400` si no hay suficiente stock
        `409` si el stock cambió mientras se guardaba la orden
    """
    return order_workflow.create_order(db, user_id, order_in.items)


@router.get("/", response_model=List[OrderWithUser])
def list_user_orders(
    db: Session = Depends(deps.get_db),
    user_id: UUID = Query(..., description="ID del usuario"),
):
    """
    Obtener todas las órdenes (no eliminadas) de un usuario.

    Raises:
        `404` si el usuario no existe
    """
    return order_queries.list_orders_for_user(db, user_id)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: UUID,
    db: Session = Depends(deps.get_db),
):
    """
    Obtener una orden específica por su ID, con sus ítems.
    """
    return order_queries.get_order(db, order_id)


@router.patch("/{order_id}", response_model=OrderResponse)
def update_order_status(
    *,
    db: Session = Depends(deps.get_db),
    order_id: UUID,
    status_update: OrderStatusUpdate,
):
    """
    Actualizar el estado de una orden.

    Args:
        `order_id`: ID de la orden a actualizar
        `status_update`: Nuevo estado (IN_PROGRESS, COMPLETED o CANCELLED)

    Returns:
        `OrderResponse`: Orden con el estado actualizado

    Raises:
        `404` si la orden no existe
    """
    return order_status.update_status(db, order_id, status_update.status)
