"""
Attribute Name Resolution

Attribute links point at attribute values, which in turn point at their
attribute template. Both hops degrade to the unresolved id.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from marketplace_navigator.navigation.joins import (
    product_base_attribute_links,
    variant_attribute_links,
)
from marketplace_navigator.navigation.lookups import find_by_id
from marketplace_navigator.snapshot import Record, Snapshot, TableName


@dataclass(frozen=True)
class AttributePair:
    """Resolved attribute name with its value"""
    name: Any
    value: Any = None


def attribute_value(snapshot: Snapshot, attribute_value_id: Any) -> Optional[Record]:
    return find_by_id(snapshot, TableName.PRODUCT_ATTRIBUTE_VALUES, attribute_value_id)


def attribute_name_from_value(snapshot: Snapshot, attribute_value_id: Any) -> Any:
    """
    Name of the attribute behind an attribute value.
    
    Returns the value id when the value record is missing, and the value's
    attribute id when the attribute record is missing.
    """
    value = attribute_value(snapshot, attribute_value_id)
    if value is None:
        return attribute_value_id
    attribute_id = value.get("attribute_id")
    attribute = find_by_id(snapshot, TableName.PRODUCT_ATTRIBUTES, attribute_id)
    if attribute is None:
        return attribute_id
    return attribute.get("name", attribute_id)


def _resolve_links(snapshot: Snapshot, links: List[Record]) -> List[AttributePair]:
    pairs = []
    for link in links:
        value_id = link.get("attribute_value_id")
        value = attribute_value(snapshot, value_id)
        pairs.append(
            AttributePair(
                name=attribute_name_from_value(snapshot, value_id),
                value=value.get("value") if value is not None else None,
            )
        )
    return pairs


def base_attributes_for_product(snapshot: Snapshot, product_id: Any) -> List[AttributePair]:
    """Attributes shared by every variant of a product, in link order"""
    return _resolve_links(snapshot, product_base_attribute_links(snapshot, product_id))


def variant_attributes_for_variant(snapshot: Snapshot, variant_id: Any) -> List[AttributePair]:
    """Attributes specific to one variant, in link order"""
    return _resolve_links(snapshot, variant_attribute_links(snapshot, variant_id))
