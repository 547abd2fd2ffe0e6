import asyncio
from typing import List

from repositories.menu_repository import MenuRepository
from schemas import MenuItem


class MenuService:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu = menu_repository

    async def list_menu_items(self) -> List[MenuItem]:
        rows = await asyncio.to_thread(self._menu.fetch_all)
        return [MenuItem(**row) for row in rows]

    async def list_sandwiches(self) -> List[MenuItem]:
        rows = await asyncio.to_thread(self._menu.fetch_by_type, "sandwich")
        return [MenuItem(**row) for row in rows]

    async def list_extras(self) -> List[MenuItem]:
        rows = await asyncio.to_thread(self._menu.fetch_by_type, "extra")
        return [MenuItem(**row) for row in rows]
