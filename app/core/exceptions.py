"""
Errores de dominio.

Los servicios los lanzan cuando se viola una regla de negocio; la capa HTTP
(`app.api.errors`) los traduce a respuestas con el código adecuado.
"""
from typing import Any, Dict, List, Optional
from uuid import UUID


class DomainError(Exception):
    """Base de todos los errores de dominio."""

    def __init__(self, message: str, detail: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class NotFoundError(DomainError):
    pass


class UserNotFound(NotFoundError):
    def __init__(self, user_id: UUID):
        super().__init__("User not found.", {"user_id": str(user_id)})
        self.user_id = user_id


class ProductNotFound(NotFoundError):
    def __init__(self, product_id: UUID):
        super().__init__(
            f"Product with ID {product_id} not found.", {"product_id": str(product_id)}
        )
        self.product_id = product_id


class OrderNotFound(NotFoundError):
    def __init__(self, order_id: UUID):
        super().__init__("Order not found.", {"order_id": str(order_id)})
        self.order_id = order_id


class BadRequestError(DomainError):
    """Entrada rechazada antes de cualquier escritura."""


class InsufficientStock(BadRequestError):
    def __init__(self, product_id: UUID, requested: int, available: int):
        super().__init__(
            f"Requested quantity ({requested}) exceeds available stock "
            f"({available}) for product {product_id}.",
            {
                "product_id": str(product_id),
                "requested": requested,
                "available": available,
            },
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InvalidOrderRequest(BadRequestError):
    def __init__(self, errors: List[str]):
        super().__init__("Invalid order request.", {"errors": list(errors)})
        self.errors = list(errors)


class EmailAlreadyRegistered(BadRequestError):
    def __init__(self, email: str):
        super().__init__("Email already registered.", {"email": email})
        self.email = email


class PersistenceConflict(DomainError):
    """El commit atómico falló; no quedó ningún cambio aplicado."""


class StockConflict(PersistenceConflict):
    def __init__(self, product_id: UUID, requested: int):
        super().__init__(
            f"Stock for product {product_id} changed while the order was being placed.",
            {"product_id": str(product_id), "requested": requested},
        )
        self.product_id = product_id
        self.requested = requested


class InvalidUserData(BadRequestError):
    def __init__(self, errors: List[str]):
        super().__init__("Invalid user data.", {"errors": list(errors)})
        self.errors = list(errors)
