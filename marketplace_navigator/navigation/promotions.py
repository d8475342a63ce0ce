"""
Promotion Summary & Applied-Promotion Formatting

Turns promotion rules into a one-line description and formats promotions
applied to order items and cart items.

Only the first rule of a promotion is described. Promotion conditions are
not interpreted; callers that understand them can pass a `ConditionDescriber`.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, List, Mapping, Optional

from pydantic import BaseModel

from marketplace_navigator.navigation.joins import promotion_conditions, promotion_rules
from marketplace_navigator.navigation.lookups import (
    category_name,
    promotion_by_id,
    variant_product_name,
)
from marketplace_navigator.snapshot import Record, Snapshot

MINUS_SIGN = "−"
DEFAULT_CURRENCY = "$"

# Extension point for promotion conditions: receives the promotion and its
# condition records, returns extra summary text or None.
ConditionDescriber = Callable[[Record, List[Record]], Optional[str]]


def format_number(value: Any) -> str:
    """Render a quantity or percentage, dropping a trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_amount(amount: float) -> str:
    """Two decimal places, halves rounded away from zero"""
    return str(Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _shown(value: Any) -> str:
    """Display form of a rule value, "?" when the rule leaves it out"""
    return "?" if value is None else format_number(value)


def is_amount(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _rule_summary(snapshot: Snapshot, promotion: Record) -> str:
    name = str(promotion.get("name", promotion.id))
    rules = promotion_rules(snapshot, promotion.id)
    if not rules:
        return name
    
    rule = rules[0]
    buy_quantity = rule.get("buy_quantity")
    get_quantity = rule.get("get_quantity")
    variant_id = rule.get("buy_variant_id")
    if is_amount(get_quantity) and get_quantity > 0:
        target = variant_product_name(snapshot, variant_id)
        return (
            f"Buy {_shown(buy_quantity)} get {format_number(get_quantity)} "
            f"free on {_shown(target)}"
        )
    
    percentage = rule.get("discount_percentage")
    category_id = rule.get("buy_category_id")
    if percentage and category_id is not None:
        return (
            f"Buy at least {_shown(buy_quantity)} in "
            f"{category_name(snapshot, category_id)}: {format_number(percentage)}% off"
        )
    
    return name


def promotion_summary(
    snapshot: Snapshot,
    promotion: Record,
    describe_conditions: Optional[ConditionDescriber] = None,
) -> str:
    """
    Describe a promotion in one sentence.
    
    Args:
        snapshot: Snapshot holding rules, variants, products and categories
        promotion: Promotion record
        describe_conditions: Optional hook rendering the promotion's conditions
        
    Returns:
        "Buy 2 get 1 free on Widget", "Buy at least 3 in Shoes: 20% off",
        or the promotion name when it has no rule of a known shape
    """
    summary = _rule_summary(snapshot, promotion)
    if describe_conditions is not None:
        detail = describe_conditions(promotion, promotion_conditions(snapshot, promotion.id))
        if detail:
            summary = f"{summary}; {detail}"
    return summary


def _embedded_name(record: Record) -> Optional[str]:
    embedded = record.get("promotion_snapshot")
    if isinstance(embedded, BaseModel):
        return getattr(embedded, "name", None)
    if isinstance(embedded, Mapping):
        return embedded.get("name")
    return None


def applied_promotion_name(snapshot: Snapshot, applied: Record) -> Any:
    """Embedded snapshot name, then live promotion name, then the raw promotion id"""
    embedded = _embedded_name(applied)
    if embedded:
        return embedded
    promotion_id = applied.get("promotion_id")
    promotion = promotion_by_id(snapshot, promotion_id)
    if promotion is not None and promotion.get("name"):
        return promotion.get("name")
    return promotion_id


def format_applied_promotion(
    snapshot: Snapshot,
    applied: Record,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """
    Display label for a promotion applied to an order item or cart item.
    
    Example:
        {discount_amount: 5.5, promotion_snapshot: {name: "Spring Sale"}}
        -> "Spring Sale (−$5.50)"
    """
    name = applied_promotion_name(snapshot, applied)
    amount = applied.get("discount_amount")
    if not is_amount(amount):
        return str(name)
    return f"{name} ({MINUS_SIGN}{currency}{format_amount(amount)})"
