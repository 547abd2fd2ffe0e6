import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from errors import NotFoundError, StoreError, ValidationError
from repositories.menu_repository import MenuRepository
from repositories.order_repository import OrderRepository
from schemas import Order, OrderCreated, OrderWithSandwich, PriceBreakdown
from services.pricing import PricedTotal, calculate_total, discount_percentage, round_money, to_decimal

logger = logging.getLogger("good-hamburger")

FRIES_TOKEN = "fries"
SOFT_DRINK_TOKEN = "soft_drink"
FRIES_ITEM_NAME = "Fries"
SOFT_DRINK_ITEM_NAME = "Soft drink"


@dataclass
class PricedSelection:
    sandwich_id: int
    has_fries: bool
    has_soft_drink: bool
    subtotal: Decimal
    percentage: Decimal
    priced: PricedTotal

    def to_record(self) -> Dict[str, Any]:
        return {
            "sandwich_id": self.sandwich_id,
            "has_fries": self.has_fries,
            "has_soft_drink": self.has_soft_drink,
            "subtotal": float(round_money(self.subtotal)),
            "discount_percentage": float(self.percentage * 100),
            "discount_amount": float(self.priced.discount_amount),
            "total": float(self.priced.total),
        }

    def breakdown(self) -> PriceBreakdown:
        return PriceBreakdown(
            subtotal=float(round_money(self.subtotal)),
            discountPercentage=float(self.percentage * 100),
            discountAmount=float(self.priced.discount_amount),
            total=float(self.priced.total),
        )


class OrderService:
    """Validates, prices and persists sandwich orders."""

    def __init__(self, menu_repository: MenuRepository, order_repository: OrderRepository) -> None:
        self._menu = menu_repository
        self._orders = order_repository

    async def _extra_price(self, item_name: str) -> Decimal:
        item = await asyncio.to_thread(self._menu.fetch_item_by_name, item_name)
        if not item:
            raise NotFoundError(f"{item_name} not found in menu items.")
        return to_decimal(item["price"])

    async def _price_selection(
        self,
        sandwich_id: Optional[int],
        extras: Optional[Sequence[str]],
        missing_sandwich_message: str,
    ) -> PricedSelection:
        if not sandwich_id:
            raise ValidationError(missing_sandwich_message)

        sandwich = await asyncio.to_thread(self._menu.fetch_item, sandwich_id, "sandwich")
        if not sandwich:
            raise NotFoundError("Selected sandwich not found.")

        extras = list(extras or [])
        if len(extras) != len(set(extras)):
            raise ValidationError(
                "Duplicate extras are not allowed. Each extra can be added only once."
            )

        # Unknown tokens are ignored rather than rejected.
        has_fries = FRIES_TOKEN in extras
        has_soft_drink = SOFT_DRINK_TOKEN in extras

        subtotal = to_decimal(sandwich["price"])
        if has_fries:
            subtotal += await self._extra_price(FRIES_ITEM_NAME)
        if has_soft_drink:
            subtotal += await self._extra_price(SOFT_DRINK_ITEM_NAME)

        percentage = discount_percentage(True, has_fries, has_soft_drink)
        return PricedSelection(
            sandwich_id=sandwich_id,
            has_fries=has_fries,
            has_soft_drink=has_soft_drink,
            subtotal=subtotal,
            percentage=percentage,
            priced=calculate_total(subtotal, percentage),
        )

    async def create_order(
        self, sandwich_id: Optional[int], extras: Optional[Sequence[str]] = None
    ) -> OrderCreated:
        selection = await self._price_selection(
            sandwich_id, extras, "A sandwich must be selected to create an order."
        )
        inserted = await asyncio.to_thread(self._orders.insert, selection.to_record())
        row = await asyncio.to_thread(self._orders.fetch, inserted["id"])
        if not row:
            raise StoreError(f"Order {inserted['id']} was not readable after insert")
        logger.info(
            "Created order %s (sandwich=%s, total=%s)",
            inserted["id"],
            selection.sandwich_id,
            selection.priced.total,
        )
        return OrderCreated(order=Order(**row), breakdown=selection.breakdown())

    async def update_order(
        self,
        order_id: int,
        sandwich_id: Optional[int],
        extras: Optional[Sequence[str]] = None,
    ) -> Order:
        existing = await asyncio.to_thread(self._orders.fetch, order_id)
        if not existing:
            raise NotFoundError("Order not found.")

        selection = await self._price_selection(
            sandwich_id, extras, "A sandwich must be selected."
        )
        await asyncio.to_thread(self._orders.update, order_id, selection.to_record())
        row = await asyncio.to_thread(self._orders.fetch, order_id)
        if not row:
            raise NotFoundError("Order not found.")
        logger.info("Updated order %s (total=%s)", order_id, selection.priced.total)
        return Order(**row)

    async def list_orders(self) -> List[OrderWithSandwich]:
        rows = await asyncio.to_thread(self._orders.fetch_all_with_sandwich_name)
        return [OrderWithSandwich(**row) for row in rows]

    async def delete_order(self, order_id: int) -> None:
        deleted = await asyncio.to_thread(self._orders.delete, order_id)
        if not deleted:
            raise NotFoundError("Order not found.")
        logger.info("Deleted order %s", order_id)
