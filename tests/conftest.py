import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

MENU = [
    {"id": 1, "name": "X Burger", "type": "sandwich", "price": 5.00},
    {"id": 2, "name": "X Egg", "type": "sandwich", "price": 4.50},
    {"id": 3, "name": "X Bacon", "type": "sandwich", "price": 7.00},
    {"id": 4, "name": "Fries", "type": "extra", "price": 2.00},
    {"id": 5, "name": "Soft drink", "type": "extra", "price": 2.50},
]


class InMemoryMenuRepository:
    def __init__(self, items: List[Dict[str, Any]]) -> None:
        self.items = [dict(item) for item in items]
        self.name_lookups: List[str] = []

    def fetch_item(self, item_id: int, item_type: str) -> Optional[Dict[str, Any]]:
        for item in self.items:
            if item["id"] == item_id and item["type"] == item_type:
                return dict(item)
        return None

    def fetch_item_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        self.name_lookups.append(name)
        for item in self.items:
            if item["name"] == name:
                return dict(item)
        return None

    def fetch_all(self) -> List[Dict[str, Any]]:
        return sorted(self.items, key=lambda item: (item["type"], item["id"]))

    def fetch_by_type(self, item_type: str) -> List[Dict[str, Any]]:
        return sorted(
            (item for item in self.items if item["type"] == item_type),
            key=lambda item: item["id"],
        )

    def ping(self) -> None:
        return None


class InMemoryOrderRepository:
    def __init__(self, menu: InMemoryMenuRepository) -> None:
        self.menu = menu
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.inserts = 0
        self.updates = 0
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        self.inserts += 1
        row = dict(record, id=self._next_id, created_at=self._clock)
        self.rows[row["id"]] = row
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        return dict(row)

    def update(self, order_id: int, record: Dict[str, Any]) -> None:
        self.updates += 1
        if order_id in self.rows:
            self.rows[order_id].update(record)

    def fetch(self, order_id: int) -> Optional[Dict[str, Any]]:
        row = self.rows.get(order_id)
        return dict(row) if row else None

    def fetch_all_with_sandwich_name(self) -> List[Dict[str, Any]]:
        names = {item["id"]: item["name"] for item in self.menu.items}
        rows = sorted(self.rows.values(), key=lambda row: row["created_at"], reverse=True)
        return [dict(row, sandwich_name=names.get(row["sandwich_id"])) for row in rows]

    def delete(self, order_id: int) -> bool:
        return self.rows.pop(order_id, None) is not None


@pytest.fixture()
def menu_repository():
    return InMemoryMenuRepository(MENU)


@pytest.fixture()
def order_repository(menu_repository):
    return InMemoryOrderRepository(menu_repository)
