"""
Table Catalog

The closed set of marketplace tables and the foreign-key relationships
between them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union


class TableName(str, Enum):
    """Marketplace tables, in board display order"""
    CATEGORIES = "CATEGORIES"
    BRANDS = "BRANDS"
    PRODUCTS = "PRODUCTS"
    PRODUCT_CATEGORIES = "PRODUCT_CATEGORIES"
    USERS = "USERS"
    CUSTOMERS = "CUSTOMERS"
    SELLERS = "SELLERS"
    PRODUCT_VARIANTS = "PRODUCT_VARIANTS"
    PRODUCT_IMAGES = "PRODUCT_IMAGES"
    PRODUCT_ATTRIBUTES = "PRODUCT_ATTRIBUTES"
    PRODUCT_ATTRIBUTE_VALUES = "PRODUCT_ATTRIBUTE_VALUES"
    PRODUCT_BASE_ATTRIBUTES = "PRODUCT_BASE_ATTRIBUTES"
    PRODUCT_VARIANT_ATTRIBUTES = "PRODUCT_VARIANT_ATTRIBUTES"
    INVENTORY = "INVENTORY"
    ADDRESSES = "ADDRESSES"
    CUSTOMER_SHIPPING_ADDRESSES = "CUSTOMER_SHIPPING_ADDRESSES"
    CUSTOMER_BILLING_ADDRESSES = "CUSTOMER_BILLING_ADDRESSES"
    ORDERS = "ORDERS"
    ORDER_ITEMS = "ORDER_ITEMS"
    ORDER_ITEM_PROMOTIONS = "ORDER_ITEM_PROMOTIONS"
    PROMOTIONS = "PROMOTIONS"
    PROMOTION_RULES = "PROMOTION_RULES"
    PROMOTION_CONDITIONS = "PROMOTION_CONDITIONS"
    PLATFORM_ADMINS = "PLATFORM_ADMINS"
    CART_ITEMS = "CART_ITEMS"
    CART_ITEM_DISCOUNTS = "CART_ITEM_DISCOUNTS"
    
    @classmethod
    def parse(cls, name: Union[str, "TableName"]) -> Optional["TableName"]:
        """Resolve a table name case-insensitively, None if unknown"""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class ForeignKey:
    """A `<entity>_id` field and the table it references"""
    table: TableName
    column: str
    references: TableName
    
    @property
    def label(self) -> str:
        return f"{self.table.value}.{self.column} -> {self.references.value}.id"


def _fk(table: TableName, column: str, references: TableName) -> ForeignKey:
    return ForeignKey(table=table, column=column, references=references)


T = TableName

FOREIGN_KEYS: Tuple[ForeignKey, ...] = (
    _fk(T.CATEGORIES, "parent_id", T.CATEGORIES),
    _fk(T.PRODUCTS, "brand_id", T.BRANDS),
    _fk(T.PRODUCTS, "seller_id", T.SELLERS),
    _fk(T.PRODUCT_CATEGORIES, "product_id", T.PRODUCTS),
    _fk(T.PRODUCT_CATEGORIES, "category_id", T.CATEGORIES),
    _fk(T.CUSTOMERS, "user_id", T.USERS),
    _fk(T.SELLERS, "user_id", T.USERS),
    _fk(T.PLATFORM_ADMINS, "user_id", T.USERS),
    _fk(T.PRODUCT_VARIANTS, "product_id", T.PRODUCTS),
    _fk(T.PRODUCT_IMAGES, "product_id", T.PRODUCTS),
    _fk(T.PRODUCT_ATTRIBUTE_VALUES, "attribute_id", T.PRODUCT_ATTRIBUTES),
    _fk(T.PRODUCT_BASE_ATTRIBUTES, "product_id", T.PRODUCTS),
    _fk(T.PRODUCT_BASE_ATTRIBUTES, "attribute_value_id", T.PRODUCT_ATTRIBUTE_VALUES),
    _fk(T.PRODUCT_VARIANT_ATTRIBUTES, "variant_id", T.PRODUCT_VARIANTS),
    _fk(T.PRODUCT_VARIANT_ATTRIBUTES, "attribute_value_id", T.PRODUCT_ATTRIBUTE_VALUES),
    _fk(T.INVENTORY, "variant_id", T.PRODUCT_VARIANTS),
    _fk(T.CUSTOMER_SHIPPING_ADDRESSES, "customer_id", T.CUSTOMERS),
    _fk(T.CUSTOMER_SHIPPING_ADDRESSES, "address_id", T.ADDRESSES),
    _fk(T.CUSTOMER_BILLING_ADDRESSES, "customer_id", T.CUSTOMERS),
    _fk(T.CUSTOMER_BILLING_ADDRESSES, "address_id", T.ADDRESSES),
    _fk(T.ORDERS, "customer_id", T.CUSTOMERS),
    _fk(T.ORDER_ITEMS, "order_id", T.ORDERS),
    _fk(T.ORDER_ITEMS, "variant_id", T.PRODUCT_VARIANTS),
    _fk(T.ORDER_ITEM_PROMOTIONS, "order_item_id", T.ORDER_ITEMS),
    _fk(T.ORDER_ITEM_PROMOTIONS, "promotion_id", T.PROMOTIONS),
    _fk(T.PROMOTION_RULES, "promotion_id", T.PROMOTIONS),
    _fk(T.PROMOTION_RULES, "buy_variant_id", T.PRODUCT_VARIANTS),
    _fk(T.PROMOTION_RULES, "buy_category_id", T.CATEGORIES),
    _fk(T.PROMOTION_CONDITIONS, "promotion_id", T.PROMOTIONS),
    _fk(T.CART_ITEMS, "variant_id", T.PRODUCT_VARIANTS),
    _fk(T.CART_ITEM_DISCOUNTS, "cart_item_id", T.CART_ITEMS),
    _fk(T.CART_ITEM_DISCOUNTS, "promotion_id", T.PROMOTIONS),
)


def foreign_keys_for(table: TableName) -> List[ForeignKey]:
    """Foreign keys declared on a table"""
    return [fk for fk in FOREIGN_KEYS if fk.table == table]
