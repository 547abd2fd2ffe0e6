from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from errors import StoreError

TABLE_NAME = "menu_items"


class MenuRepository:
    def __init__(self, client: Client) -> None:
        self._client = client

    def _execute(self, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except APIError as exc:
            raise StoreError(f"Menu query failed: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"Menu query failed: {exc}") from exc
        return response.data or []

    def fetch_item(self, item_id: int, item_type: str) -> Optional[Dict[str, Any]]:
        items = self._execute(
            self._client.table(TABLE_NAME)
            .select("*")
            .eq("id", item_id)
            .eq("type", item_type)
            .limit(1)
        )
        return items[0] if items else None

    def fetch_item_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        items = self._execute(
            self._client.table(TABLE_NAME).select("*").eq("name", name).limit(1)
        )
        return items[0] if items else None

    def fetch_all(self) -> List[Dict[str, Any]]:
        return self._execute(
            self._client.table(TABLE_NAME).select("*").order("type").order("id")
        )

    def fetch_by_type(self, item_type: str) -> List[Dict[str, Any]]:
        return self._execute(
            self._client.table(TABLE_NAME)
            .select("*")
            .eq("type", item_type)
            .order("id")
        )

    def ping(self) -> None:
        self._execute(self._client.table(TABLE_NAME).select("id").limit(1))
