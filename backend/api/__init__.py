from .menu import router as menu_router
from .orders import router as orders_router

__all__ = [
    "menu_router",
    "orders_router",
]
