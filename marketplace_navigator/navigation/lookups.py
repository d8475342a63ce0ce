"""
Point & Filter Lookup Primitives

Every lookup tolerates absent tables and dangling keys: point lookups return
None, filters return an empty list and display helpers echo the raw id.
"""

from typing import Any, List, Optional

from marketplace_navigator.snapshot import Record, Snapshot, TableName
from marketplace_navigator.snapshot.store import TableKey


def find_by_id(snapshot: Snapshot, table: TableKey, record_id: Any) -> Optional[Record]:
    """First record of `table` whose id equals `record_id`, None if absent"""
    if record_id is None:
        return None
    for record in snapshot.table(table):
        if record.id == record_id:
            return record
    return None


def filter_by(snapshot: Snapshot, table: TableKey, field: str, value: Any) -> List[Record]:
    """Records of `table` whose `field` equals `value`, in table order"""
    return [record for record in snapshot.table(table) if record.get(field) == value]


def display_name(
    snapshot: Snapshot,
    table: TableKey,
    record_id: Any,
    field: str = "name",
) -> Any:
    """
    Resolve a record id to a display label.
    
    Falls back to the raw id when the record or its label field is missing.
    """
    record = find_by_id(snapshot, table, record_id)
    if record is None:
        return record_id
    label = record.get(field)
    return record_id if label is None else label


def brand_name(snapshot: Snapshot, brand_id: Any) -> Any:
    return display_name(snapshot, TableName.BRANDS, brand_id)


def seller_name(snapshot: Snapshot, seller_id: Any) -> Any:
    return display_name(snapshot, TableName.SELLERS, seller_id)


def product_name(snapshot: Snapshot, product_id: Any) -> Any:
    return display_name(snapshot, TableName.PRODUCTS, product_id)


def category_name(snapshot: Snapshot, category_id: Any) -> Any:
    return display_name(snapshot, TableName.CATEGORIES, category_id)


def variant_by_id(snapshot: Snapshot, variant_id: Any) -> Optional[Record]:
    return find_by_id(snapshot, TableName.PRODUCT_VARIANTS, variant_id)


def promotion_by_id(snapshot: Snapshot, promotion_id: Any) -> Optional[Record]:
    return find_by_id(snapshot, TableName.PROMOTIONS, promotion_id)


def variant_product_name(snapshot: Snapshot, variant_id: Any) -> Any:
    """Product name behind a variant, the raw variant id if the variant is missing"""
    variant = variant_by_id(snapshot, variant_id)
    if variant is None:
        return variant_id
    return product_name(snapshot, variant.get("product_id"))
