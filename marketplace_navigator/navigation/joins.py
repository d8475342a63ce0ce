"""
Join-Derived Collections

Single-table filter joins keyed by one foreign-key field. Each returns the
matching records in table order.
"""

from typing import Any, List

from marketplace_navigator.navigation.lookups import filter_by, find_by_id
from marketplace_navigator.snapshot import Record, Snapshot, TableName


def customer_orders(snapshot: Snapshot, customer_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.ORDERS, "customer_id", customer_id)


def order_items(snapshot: Snapshot, order_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.ORDER_ITEMS, "order_id", order_id)


def order_item_promotions(snapshot: Snapshot, order_item_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.ORDER_ITEM_PROMOTIONS, "order_item_id", order_item_id)


def promotion_rules(snapshot: Snapshot, promotion_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PROMOTION_RULES, "promotion_id", promotion_id)


def promotion_conditions(snapshot: Snapshot, promotion_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PROMOTION_CONDITIONS, "promotion_id", promotion_id)


def product_images(snapshot: Snapshot, product_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PRODUCT_IMAGES, "product_id", product_id)


def product_variants(snapshot: Snapshot, product_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PRODUCT_VARIANTS, "product_id", product_id)


def product_base_attribute_links(snapshot: Snapshot, product_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PRODUCT_BASE_ATTRIBUTES, "product_id", product_id)


def variant_attribute_links(snapshot: Snapshot, variant_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.PRODUCT_VARIANT_ATTRIBUTES, "variant_id", variant_id)


def variant_inventory(snapshot: Snapshot, variant_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.INVENTORY, "variant_id", variant_id)


def cart_items(snapshot: Snapshot, cart_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.CART_ITEMS, "cart_id", cart_id)


def cart_item_discounts(snapshot: Snapshot, cart_item_id: Any) -> List[Record]:
    return filter_by(snapshot, TableName.CART_ITEM_DISCOUNTS, "cart_item_id", cart_item_id)


def _customer_addresses(snapshot: Snapshot, link_table: TableName, customer_id: Any) -> List[Record]:
    addresses = []
    for link in filter_by(snapshot, link_table, "customer_id", customer_id):
        address = find_by_id(snapshot, TableName.ADDRESSES, link.get("address_id"))
        # Dangling links are skipped
        if address is not None:
            addresses.append(address)
    return addresses


def customer_shipping_addresses(snapshot: Snapshot, customer_id: Any) -> List[Record]:
    """Addresses linked to a customer for shipping"""
    return _customer_addresses(snapshot, TableName.CUSTOMER_SHIPPING_ADDRESSES, customer_id)


def customer_billing_addresses(snapshot: Snapshot, customer_id: Any) -> List[Record]:
    """Addresses linked to a customer for billing"""
    return _customer_addresses(snapshot, TableName.CUSTOMER_BILLING_ADDRESSES, customer_id)
