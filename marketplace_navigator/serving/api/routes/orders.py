"""
Orders API Endpoints

Customers' orders and order lines with the promotions applied to them.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from marketplace_navigator.navigation import RelationalNavigator
from marketplace_navigator.serving.api.dependencies import get_navigator, parse_identifier
from marketplace_navigator.snapshot import Record, TableName

router = APIRouter()


class OrderItemResponse(BaseModel):
    """Order line"""
    id: Any
    variant_id: Any = None
    product: Any = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    promotions: List[str]


class OrderResponse(BaseModel):
    """Order with its lines"""
    id: Any
    status: Optional[str] = None
    total_amount: Optional[float] = None
    items: List[OrderItemResponse]


class CustomerSummary(BaseModel):
    id: Any
    order_count: int
    shipping_addresses: int
    billing_addresses: int


def _item(navigator: RelationalNavigator, item: Record) -> OrderItemResponse:
    variant_id = item.get("variant_id")
    return OrderItemResponse(
        id=item.id,
        variant_id=variant_id,
        product=navigator.variant_product_name(variant_id) if variant_id is not None else None,
        quantity=item.get("quantity"),
        unit_price=item.get("unit_price"),
        promotions=[
            navigator.format_applied_promotion(applied)
            for applied in navigator.order_item_promotions(item.id)
        ],
    )


def _order(navigator: RelationalNavigator, order: Record) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        status=order.get("status"),
        total_amount=order.get("total_amount"),
        items=[_item(navigator, item) for item in navigator.order_items(order.id)],
    )


@router.get("/customers", response_model=List[CustomerSummary])
async def list_customers(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[CustomerSummary]:
    """List customers with order and address counts."""
    return [
        CustomerSummary(
            id=customer.id,
            order_count=len(navigator.customer_orders(customer.id)),
            shipping_addresses=len(navigator.customer_shipping_addresses(customer.id)),
            billing_addresses=len(navigator.customer_billing_addresses(customer.id)),
        )
        for customer in navigator.snapshot.table(TableName.CUSTOMERS)
    ]


@router.get("/customers/{customer_id}/orders", response_model=List[OrderResponse])
async def get_customer_orders(
    customer_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[OrderResponse]:
    """Orders of a customer, empty when the customer has none."""
    known = (o.get("customer_id") for o in navigator.snapshot.table(TableName.ORDERS))
    orders = navigator.customer_orders(parse_identifier(customer_id, known))
    return [_order(navigator, order) for order in orders]


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> OrderResponse:
    """Get one order with its lines."""
    known = (o.id for o in navigator.snapshot.table(TableName.ORDERS))
    order = navigator.find_by_id(TableName.ORDERS, parse_identifier(order_id, known))
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _order(navigator, order)
