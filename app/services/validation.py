"""
Validaciones explícitas de entrada.

Cada función devuelve un `ValidationResult` con la lista completa de errores
encontrados en lugar de lanzar en el primero; quien la invoca decide qué
excepción de dominio levantar.
"""
from dataclasses import dataclass, field
from typing import Any, List, Sequence
from uuid import UUID

MIN_PASSWORD_LENGTH = 6


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, message: str) -> None:
        self.errors.append(message)


def _get(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def is_well_formed_id(value: Any) -> bool:
    if isinstance(value, UUID):
        return True
    if not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def validate_order_items(items: Sequence[Any]) -> ValidationResult:
    """
    Valida la forma de los ítems pedidos: lista no vacía, `product_id` con
    formato UUID y `quantity` entero positivo.

    Acepta tanto esquemas pydantic como diccionarios.
    """
    result = ValidationResult()
    if not items:
        result.add("items must contain at least one element")
        return result

    for index, item in enumerate(items):
        product_id = _get(item, "product_id")
        quantity = _get(item, "quantity")
        if not is_well_formed_id(product_id):
            result.add(f"items[{index}].product_id is not a valid identifier")
        # bool es subclase de int
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            result.add(f"items[{index}].quantity must be an integer")
        elif quantity <= 0:
            result.add(f"items[{index}].quantity must be greater than zero")
    return result


def validate_new_user(name: str, email: str, password: str) -> ValidationResult:
    result = ValidationResult()
    if not name or not name.strip():
        result.add("name is required")
    if not email or "@" not in email:
        result.add("email is invalid")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        result.add(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    return result
