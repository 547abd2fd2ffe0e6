from fastapi import APIRouter, Depends

from dependencies import get_menu_service
from schemas import MenuItemsResponse
from services.menu_service import MenuService

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("", response_model=MenuItemsResponse)
async def read_menu(service: MenuService = Depends(get_menu_service)) -> MenuItemsResponse:
    items = await service.list_menu_items()
    return MenuItemsResponse(data=items)


@router.get("/sandwiches", response_model=MenuItemsResponse)
async def read_sandwiches(
    service: MenuService = Depends(get_menu_service),
) -> MenuItemsResponse:
    items = await service.list_sandwiches()
    return MenuItemsResponse(data=items)


@router.get("/extras", response_model=MenuItemsResponse)
async def read_extras(service: MenuService = Depends(get_menu_service)) -> MenuItemsResponse:
    items = await service.list_extras()
    return MenuItemsResponse(data=items)
