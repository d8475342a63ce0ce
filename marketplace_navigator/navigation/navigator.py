"""
Relational Navigator

Binds the navigation queries to one snapshot. The category index is built
the first time a path is requested and reused afterwards.
"""

from typing import Any, List, Optional

from marketplace_navigator.config import Settings, get_settings
from marketplace_navigator.navigation import (
    attributes,
    carts,
    hierarchy,
    joins,
    lookups,
    promotions,
    sections,
)
from marketplace_navigator.navigation.attributes import AttributePair
from marketplace_navigator.navigation.carts import CartSummary
from marketplace_navigator.navigation.hierarchy import CategoryIndex
from marketplace_navigator.navigation.promotions import ConditionDescriber
from marketplace_navigator.snapshot import Record, Snapshot
from marketplace_navigator.snapshot.store import TableKey


class RelationalNavigator:
    """
    Query facade over a single immutable snapshot.
    
    Example:
        navigator = RelationalNavigator(snapshot)
        navigator.category_path(12)              # "Apparel › Shoes"
        navigator.promotion_summary(promotion)   # "Buy 2 get 1 free on Widget"
    """
    
    def __init__(
        self,
        snapshot: Snapshot,
        settings: Optional[Settings] = None,
        describe_conditions: Optional[ConditionDescriber] = None,
    ):
        settings = settings or get_settings()
        self.snapshot = snapshot
        self.separator = settings.navigator.category_separator
        self.currency = settings.navigator.currency_symbol
        self.describe_conditions = describe_conditions
        self._category_index: Optional[CategoryIndex] = None
    
    @property
    def category_index(self) -> CategoryIndex:
        if self._category_index is None:
            self._category_index = CategoryIndex(self.snapshot)
        return self._category_index
    
    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    
    def find_by_id(self, table: TableKey, record_id: Any) -> Optional[Record]:
        return lookups.find_by_id(self.snapshot, table, record_id)
    
    def filter_by(self, table: TableKey, field: str, value: Any) -> List[Record]:
        return lookups.filter_by(self.snapshot, table, field, value)
    
    def display_name(self, table: TableKey, record_id: Any, field: str = "name") -> Any:
        return lookups.display_name(self.snapshot, table, record_id, field)
    
    def brand_name(self, brand_id: Any) -> Any:
        return lookups.brand_name(self.snapshot, brand_id)
    
    def seller_name(self, seller_id: Any) -> Any:
        return lookups.seller_name(self.snapshot, seller_id)
    
    def product_name(self, product_id: Any) -> Any:
        return lookups.product_name(self.snapshot, product_id)
    
    def category_name(self, category_id: Any) -> Any:
        return lookups.category_name(self.snapshot, category_id)
    
    def variant_by_id(self, variant_id: Any) -> Optional[Record]:
        return lookups.variant_by_id(self.snapshot, variant_id)
    
    def promotion_by_id(self, promotion_id: Any) -> Optional[Record]:
        return lookups.promotion_by_id(self.snapshot, promotion_id)
    
    def variant_product_name(self, variant_id: Any) -> Any:
        return lookups.variant_product_name(self.snapshot, variant_id)
    
    # -------------------------------------------------------------------------
    # Category hierarchy
    # -------------------------------------------------------------------------
    
    def category_path(self, category_id: Any) -> str:
        return hierarchy.category_path(
            self.snapshot, category_id, index=self.category_index, separator=self.separator
        )
    
    def product_category_ids(self, product_id: Any) -> List[Any]:
        return hierarchy.category_ids_for_product(self.snapshot, product_id)
    
    def product_category_paths(self, product_id: Any) -> List[str]:
        return hierarchy.category_paths_for_product(
            self.snapshot, product_id, index=self.category_index, separator=self.separator
        )
    
    # -------------------------------------------------------------------------
    # Joins
    # -------------------------------------------------------------------------
    
    def customer_orders(self, customer_id: Any) -> List[Record]:
        return joins.customer_orders(self.snapshot, customer_id)
    
    def order_items(self, order_id: Any) -> List[Record]:
        return joins.order_items(self.snapshot, order_id)
    
    def order_item_promotions(self, order_item_id: Any) -> List[Record]:
        return joins.order_item_promotions(self.snapshot, order_item_id)
    
    def promotion_rules(self, promotion_id: Any) -> List[Record]:
        return joins.promotion_rules(self.snapshot, promotion_id)
    
    def promotion_conditions(self, promotion_id: Any) -> List[Record]:
        return joins.promotion_conditions(self.snapshot, promotion_id)
    
    def product_images(self, product_id: Any) -> List[Record]:
        return joins.product_images(self.snapshot, product_id)
    
    def product_variants(self, product_id: Any) -> List[Record]:
        return joins.product_variants(self.snapshot, product_id)
    
    def product_base_attribute_links(self, product_id: Any) -> List[Record]:
        return joins.product_base_attribute_links(self.snapshot, product_id)
    
    def variant_attribute_links(self, variant_id: Any) -> List[Record]:
        return joins.variant_attribute_links(self.snapshot, variant_id)
    
    def variant_inventory(self, variant_id: Any) -> List[Record]:
        return joins.variant_inventory(self.snapshot, variant_id)
    
    def customer_shipping_addresses(self, customer_id: Any) -> List[Record]:
        return joins.customer_shipping_addresses(self.snapshot, customer_id)
    
    def customer_billing_addresses(self, customer_id: Any) -> List[Record]:
        return joins.customer_billing_addresses(self.snapshot, customer_id)
    
    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------
    
    def attribute_value(self, attribute_value_id: Any) -> Optional[Record]:
        return attributes.attribute_value(self.snapshot, attribute_value_id)
    
    def attribute_name_from_value(self, attribute_value_id: Any) -> Any:
        return attributes.attribute_name_from_value(self.snapshot, attribute_value_id)
    
    def base_attributes_for_product(self, product_id: Any) -> List[AttributePair]:
        return attributes.base_attributes_for_product(self.snapshot, product_id)
    
    def variant_attributes_for_variant(self, variant_id: Any) -> List[AttributePair]:
        return attributes.variant_attributes_for_variant(self.snapshot, variant_id)
    
    # -------------------------------------------------------------------------
    # Promotions
    # -------------------------------------------------------------------------
    
    def promotion_summary(self, promotion: Record) -> str:
        return promotions.promotion_summary(
            self.snapshot, promotion, describe_conditions=self.describe_conditions
        )
    
    def format_applied_promotion(self, applied: Record) -> str:
        return promotions.format_applied_promotion(self.snapshot, applied, currency=self.currency)
    
    # -------------------------------------------------------------------------
    # Carts
    # -------------------------------------------------------------------------
    
    def cart_ids(self) -> List[Any]:
        return carts.cart_ids(self.snapshot)
    
    def cart_items(self, cart_id: Any) -> List[Record]:
        return joins.cart_items(self.snapshot, cart_id)
    
    def cart_item_discounts(self, cart_item_id: Any) -> List[Record]:
        return joins.cart_item_discounts(self.snapshot, cart_item_id)
    
    def cart_summary(self, cart_id: Any) -> CartSummary:
        return carts.cart_summary(self.snapshot, cart_id)
    
    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------
    
    def sections(self) -> List[str]:
        return sections.sections()
    
    def format_section(self, name: TableKey) -> str:
        return sections.format_section(self.snapshot, name)
