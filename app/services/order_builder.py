"""
Construcción en memoria del agregado de una orden.

`build_order` no hace I/O: recibe el usuario, los ítems pedidos y los productos
ya resueltos, valida el stock y devuelve un `OrderDraft` listo para que
`OrderPersister` lo escriba en una sola transacción.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence
from uuid import UUID

from app.core.exceptions import InsufficientStock, InvalidOrderRequest, ProductNotFound
from app.models.order import OrderStatus
from app.services.validation import validate_order_items


@dataclass(frozen=True)
class OrderItemDraft:
    product_id: UUID
    quantity: int
    sale_price: int

    @property
    def subtotal(self) -> int:
        return self.quantity * self.sale_price


@dataclass(frozen=True)
class StockChange:
    product_id: UUID
    quantity: int
    remaining: int


@dataclass
class OrderDraft:
    user_id: UUID
    items: List[OrderItemDraft]
    total_value: int
    status: OrderStatus = OrderStatus.IN_PROGRESS
    stock_changes: Dict[UUID, StockChange] = field(default_factory=dict)


def _as_uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def _field(item: Any, name: str) -> Any:
    return item[name] if isinstance(item, dict) else getattr(item, name)


def build_order(user, requested_items: Sequence[Any], resolved_products: Sequence[Any]) -> OrderDraft:
    """
    Valida los ítems pedidos contra los productos resueltos y arma la orden.

    Args:
        user: Usuario dueño de la orden (solo se usa su `id`)
        requested_items: Ítems `{product_id, quantity}` en el orden pedido
        resolved_products: Productos devueltos por el catálogo

    Returns:
        `OrderDraft` con los ítems, el total y el descuento de stock por producto

    Raises:
        InvalidOrderRequest: lista vacía, cantidad no positiva o ID mal formado
        ProductNotFound: un `product_id` no está entre los productos resueltos
        InsufficientStock: la cantidad supera el stock restante del producto
    """
    validation = validate_order_items(requested_items)
    if not validation.ok:
        raise InvalidOrderRequest(validation.errors)

    products = {product.id: product for product in resolved_products}
    remaining = {product.id: product.available_quantity for product in resolved_products}

    items: List[OrderItemDraft] = []
    for requested in requested_items:
        product_id = _as_uuid(_field(requested, "product_id"))
        quantity = _field(requested, "quantity")

        product = products.get(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        # Un producto repetido se valida contra lo que dejaron las líneas anteriores
        available = remaining[product_id]
        if quantity > available:
            raise InsufficientStock(product_id, quantity, available)

        items.append(
            OrderItemDraft(product_id=product_id, quantity=quantity, sale_price=product.price)
        )
        remaining[product_id] = available - quantity

    stock_changes: Dict[UUID, StockChange] = {}
    for item in items:
        previous = stock_changes.get(item.product_id)
        ordered = item.quantity + (previous.quantity if previous else 0)
        stock_changes[item.product_id] = StockChange(
            product_id=item.product_id,
            quantity=ordered,
            remaining=remaining[item.product_id],
        )

    return OrderDraft(
        user_id=user.id,
        items=items,
        total_value=sum(item.subtotal for item in items),
        stock_changes=stock_changes,
    )
