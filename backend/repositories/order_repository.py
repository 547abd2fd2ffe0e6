from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from errors import StoreError

TABLE_NAME = "orders"
SANDWICH_JOIN = "*, menu_items(name)"


def _flatten_sandwich_name(row: Dict[str, Any]) -> Dict[str, Any]:
    record = dict(row)
    sandwich = record.pop("menu_items", None)
    record["sandwich_name"] = sandwich.get("name") if isinstance(sandwich, dict) else None
    return record


class OrderRepository:
    def __init__(self, client: Client) -> None:
        self._client = client

    def _execute(self, query) -> List[Dict[str, Any]]:
        try:
            response = query.execute()
        except APIError as exc:
            raise StoreError(f"Order query failed: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"Order query failed: {exc}") from exc
        return response.data or []

    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        rows = self._execute(self._client.table(TABLE_NAME).insert(record))
        if not rows:
            raise StoreError("Failed to store order")
        return rows[0]

    def update(self, order_id: int, record: Dict[str, Any]) -> None:
        self._execute(self._client.table(TABLE_NAME).update(record).eq("id", order_id))

    def fetch(self, order_id: int) -> Optional[Dict[str, Any]]:
        rows = self._execute(
            self._client.table(TABLE_NAME).select("*").eq("id", order_id).limit(1)
        )
        return rows[0] if rows else None

    def fetch_all_with_sandwich_name(self) -> List[Dict[str, Any]]:
        rows = self._execute(
            self._client.table(TABLE_NAME)
            .select(SANDWICH_JOIN)
            .order("created_at", desc=True)
        )
        return [_flatten_sandwich_name(row) for row in rows]

    def delete(self, order_id: int) -> bool:
        rows = self._execute(self._client.table(TABLE_NAME).delete().eq("id", order_id))
        return bool(rows)
