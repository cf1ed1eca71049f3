from .order import order
from .product import product
from .user import user
