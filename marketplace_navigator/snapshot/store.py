"""
Table Snapshot Store

An immutable mapping from table name to an ordered tuple of typed records.
A table that was never loaded reads as empty.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

import structlog

from marketplace_navigator.snapshot.models import TABLE_MODELS, Record
from marketplace_navigator.snapshot.tables import TableName

logger = structlog.get_logger(__name__)

TableKey = Union[str, TableName]


class Snapshot(Mapping):
    """
    Read-only set of tables for one navigation session.
    
    Example:
        snapshot = Snapshot.from_raw({"BRANDS": [{"id": 1, "name": "Acme"}]})
        snapshot.table("brands")        # (Brand(id=1, name='Acme'),)
        snapshot.table("ORDERS")        # ()
    """
    
    def __init__(self, tables: Optional[Mapping[TableKey, Iterable[Record]]] = None):
        resolved: Dict[TableName, Tuple[Record, ...]] = {}
        for key, records in (tables or {}).items():
            name = TableName.parse(key)
            if name is None:
                logger.warning("Skipping unknown table", table=str(key))
                continue
            resolved[name] = tuple(records)
        self._tables = MappingProxyType(resolved)
    
    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Snapshot":
        """
        Build a snapshot from parsed JSON.
        
        Args:
            raw: Mapping of table name to a list of record objects
            
        Returns:
            Snapshot with every record validated into its table's model
            
        Raises:
            ValueError: A table is not a list, or a record fails validation
        """
        tables: Dict[TableName, Tuple[Record, ...]] = {}
        for key, rows in raw.items():
            name = TableName.parse(key)
            if name is None:
                logger.warning("Skipping unknown table", table=str(key))
                continue
            if rows is None:
                continue
            if not isinstance(rows, list):
                raise ValueError(f"Table {name.value} must be a list, got {type(rows).__name__}")
            model = TABLE_MODELS[name]
            tables[name] = tuple(model.model_validate(row) for row in rows)
        
        snapshot = cls(tables)
        logger.debug(
            "Snapshot built",
            tables=len(snapshot),
            records=snapshot.record_count,
        )
        return snapshot
    
    def table(self, name: TableKey) -> Tuple[Record, ...]:
        """Records of a table in load order, empty when absent or unknown"""
        table = TableName.parse(name)
        if table is None:
            return ()
        return self._tables.get(table, ())
    
    @property
    def record_count(self) -> int:
        return sum(len(records) for records in self._tables.values())
    
    def __getitem__(self, name: TableKey) -> Tuple[Record, ...]:
        table = TableName.parse(name)
        if table is None:
            raise KeyError(name)
        return self._tables.get(table, ())
    
    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, TableName)):
            return False
        table = TableName.parse(name)
        return table is not None and table in self._tables
    
    def __iter__(self) -> Iterator[TableName]:
        return iter(self._tables)
    
    def __len__(self) -> int:
        return len(self._tables)
    
    def __repr__(self) -> str:
        sizes = ", ".join(f"{name.value}={len(rows)}" for name, rows in self._tables.items())
        return f"Snapshot({sizes})"
