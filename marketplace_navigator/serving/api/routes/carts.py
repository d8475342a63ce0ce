"""
Carts API Endpoints

Carts are derived from cart items; a cart id that no item carries is 404.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from marketplace_navigator.navigation import CartSummary, RelationalNavigator
from marketplace_navigator.serving.api.dependencies import get_navigator, parse_identifier

router = APIRouter()


class CartOverview(BaseModel):
    cart_id: Any
    item_count: int
    discount_total: float


class CartLineResponse(BaseModel):
    item: Dict[str, Any]
    product: Any = None
    discounts: List[str]
    discount_total: float


class CartDetail(CartOverview):
    lines: List[CartLineResponse]


def _overview(summary: CartSummary) -> CartOverview:
    return CartOverview(
        cart_id=summary.cart_id,
        item_count=summary.item_count,
        discount_total=summary.discount_total,
    )


@router.get("", response_model=List[CartOverview])
async def list_carts(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[CartOverview]:
    """Carts in order of first appearance."""
    return [_overview(navigator.cart_summary(cart_id)) for cart_id in navigator.cart_ids()]


@router.get("/{cart_id}", response_model=CartDetail)
async def get_cart(
    cart_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> CartDetail:
    """Cart lines with their discounts."""
    known = navigator.cart_ids()
    resolved = parse_identifier(cart_id, known)
    if resolved not in known:
        raise HTTPException(status_code=404, detail="Cart not found")
    
    summary = navigator.cart_summary(resolved)
    lines = [
        CartLineResponse(
            item=line.item.to_dict(),
            product=navigator.variant_product_name(line.item.get("variant_id")),
            discounts=[navigator.format_applied_promotion(d) for d in line.discounts],
            discount_total=line.discount_total,
        )
        for line in summary.lines
    ]
    return CartDetail(**_overview(summary).model_dump(), lines=lines)
