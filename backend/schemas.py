from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field

MenuItemType = Literal["sandwich", "extra"]


class MenuItem(BaseModel):
    id: int
    name: str
    type: MenuItemType
    price: float


class MenuItemsResponse(BaseModel):
    success: bool = True
    data: List[MenuItem]


class OrderRequest(BaseModel):
    sandwich_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("sandwich_id", "sandwichId"),
        description="Identifier of the selected sandwich",
    )
    extras: Optional[List[str]] = Field(
        default=None, description="Extra tokens: 'fries', 'soft_drink'"
    )


class Order(BaseModel):
    id: int
    sandwich_id: int
    has_fries: bool
    has_soft_drink: bool
    subtotal: float
    discount_percentage: float
    discount_amount: float
    total: float
    created_at: Optional[datetime] = None


class OrderWithSandwich(Order):
    sandwich_name: Optional[str] = None


class PriceBreakdown(BaseModel):
    subtotal: float
    discountPercentage: float
    discountAmount: float
    total: float


class OrderCreated(BaseModel):
    order: Order
    breakdown: PriceBreakdown


class OrderCreatedResponse(BaseModel):
    success: bool = True
    data: OrderCreated


class OrderResponse(BaseModel):
    success: bool = True
    data: Order


class OrdersResponse(BaseModel):
    success: bool = True
    data: List[OrderWithSandwich]


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
