"""
Relational Navigation Module
"""
from .attributes import AttributePair
from .carts import CartLine, CartSummary
from .hierarchy import CategoryIndex, category_path
from .lookups import display_name, filter_by, find_by_id
from .navigator import RelationalNavigator
from .promotions import ConditionDescriber, format_applied_promotion, promotion_summary

__all__ = [
    "AttributePair",
    "CartLine",
    "CartSummary",
    "CategoryIndex",
    "category_path",
    "display_name",
    "filter_by",
    "find_by_id",
    "RelationalNavigator",
    "ConditionDescriber",
    "format_applied_promotion",
    "promotion_summary",
]
