"""
Category Hierarchy Resolution

Categories form a forest through `parent_id`. Nothing in the data prevents a
cycle, so every upward walk is capped at the size of the category table.
"""

from typing import Any, Dict, List, Optional

import structlog

from marketplace_navigator.snapshot import Record, Snapshot, TableName

logger = structlog.get_logger(__name__)

DEFAULT_SEPARATOR = " › "


class CategoryIndex:
    """
    Id to category index over one snapshot.
    
    Build once per snapshot and pass to `category_path` to avoid rescanning
    the category table on every call. The first record wins when ids repeat.
    """
    
    def __init__(self, snapshot: Snapshot):
        self._by_id: Dict[Any, Record] = {}
        for category in snapshot.table(TableName.CATEGORIES):
            if category.id is not None and category.id not in self._by_id:
                self._by_id[category.id] = category
        self.size = len(snapshot.table(TableName.CATEGORIES))
    
    def get(self, category_id: Any) -> Optional[Record]:
        if category_id is None:
            return None
        return self._by_id.get(category_id)
    
    def __len__(self) -> int:
        return len(self._by_id)
    
    def ancestry(self, category_id: Any) -> List[Record]:
        """
        Categories from `category_id` up to its root, leaf first.
        
        Stops at the first repeated category and never takes more than `size`
        steps, so a cyclic chain yields a partial result.
        """
        chain: List[Record] = []
        seen = set()
        current = self.get(category_id)
        while current is not None:
            if current.id in seen or len(chain) >= self.size:
                logger.warning(
                    "Category hierarchy cycle detected",
                    category_id=category_id,
                    steps=len(chain),
                )
                break
            chain.append(current)
            seen.add(current.id)
            current = self.get(current.get("parent_id"))
        return chain


def category_path(
    snapshot: Snapshot,
    category_id: Any,
    index: Optional[CategoryIndex] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Root-to-leaf category names joined by `separator`.
    
    Args:
        snapshot: Snapshot to read categories from
        category_id: Leaf category id
        index: Prebuilt index for `snapshot`, built on the fly when omitted
        separator: Text between path segments
        
    Returns:
        Path such as "Apparel › Shoes", or "" for an unknown category
    """
    if index is None:
        index = CategoryIndex(snapshot)
    names = [str(category.get("name", category.id)) for category in index.ancestry(category_id)]
    names.reverse()
    return separator.join(names)


def category_ids_for_product(snapshot: Snapshot, product_id: Any) -> List[Any]:
    """Category ids linked to a product, in link-table order"""
    return [
        link.get("category_id")
        for link in snapshot.table(TableName.PRODUCT_CATEGORIES)
        if link.get("product_id") == product_id
    ]


def category_paths_for_product(
    snapshot: Snapshot,
    product_id: Any,
    index: Optional[CategoryIndex] = None,
    separator: str = DEFAULT_SEPARATOR,
) -> List[str]:
    """
    Category path of every category a product is linked to.
    
    A link to an unknown category yields the raw category id.
    """
    if index is None:
        index = CategoryIndex(snapshot)
    paths = []
    for category_id in category_ids_for_product(snapshot, product_id):
        path = category_path(snapshot, category_id, index=index, separator=separator)
        paths.append(path or str(category_id))
    return paths
