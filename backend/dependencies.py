from fastapi import Depends
from supabase import Client

from repositories.menu_repository import MenuRepository
from repositories.order_repository import OrderRepository
from services.menu_service import MenuService
from services.orders_service import OrderService
from supabase_client import get_supabase


def get_menu_repository(client: Client = Depends(get_supabase)) -> MenuRepository:
    return MenuRepository(client)


def get_order_repository(client: Client = Depends(get_supabase)) -> OrderRepository:
    return OrderRepository(client)


def get_menu_service(
    menu_repository: MenuRepository = Depends(get_menu_repository),
) -> MenuService:
    return MenuService(menu_repository)


def get_order_service(
    menu_repository: MenuRepository = Depends(get_menu_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderService:
    return OrderService(menu_repository, order_repository)
