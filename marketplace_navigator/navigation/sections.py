"""
Raw table sections, as shown on the board's data panels.
"""

import json
from typing import List

from marketplace_navigator.snapshot import Snapshot, TableName
from marketplace_navigator.snapshot.store import TableKey


def sections() -> List[str]:
    """Table names in display order"""
    return [table.value for table in TableName]


def format_section(snapshot: Snapshot, name: TableKey) -> str:
    """Table records as indented JSON, "[]" for an absent or unknown table"""
    records = snapshot.table(name)
    if not records:
        return "[]"
    return json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)
