"""
Cart Aggregation

Carts have no table of their own; a cart exists when some cart item carries
its `cart_id`.
"""

from dataclasses import dataclass, field
from typing import Any, List

from marketplace_navigator.navigation.joins import cart_item_discounts, cart_items
from marketplace_navigator.navigation.promotions import is_amount
from marketplace_navigator.snapshot import Record, Snapshot, TableName


@dataclass
class CartLine:
    """A cart item with the discounts applied to it"""
    item: Record
    discounts: List[Record] = field(default_factory=list)
    
    @property
    def discount_total(self) -> float:
        return round(
            sum(d.get("discount_amount") for d in self.discounts if is_amount(d.get("discount_amount"))),
            2,
        )


@dataclass
class CartSummary:
    """All lines of one cart"""
    cart_id: Any
    lines: List[CartLine] = field(default_factory=list)
    
    @property
    def item_count(self) -> int:
        return len(self.lines)
    
    @property
    def discount_total(self) -> float:
        return round(sum(line.discount_total for line in self.lines), 2)


def cart_ids(snapshot: Snapshot) -> List[Any]:
    """Distinct cart ids in order of first appearance, items without a cart skipped"""
    seen = set()
    ids = []
    for item in snapshot.table(TableName.CART_ITEMS):
        cart_id = item.get("cart_id")
        if cart_id is None or cart_id in seen:
            continue
        seen.add(cart_id)
        ids.append(cart_id)
    return ids


def cart_summary(snapshot: Snapshot, cart_id: Any) -> CartSummary:
    """Items of a cart paired with their discounts"""
    lines = [
        CartLine(item=item, discounts=cart_item_discounts(snapshot, item.id))
        for item in cart_items(snapshot, cart_id)
    ]
    return CartSummary(cart_id=cart_id, lines=lines)
