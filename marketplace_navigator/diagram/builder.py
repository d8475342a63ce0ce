"""
ER diagram source generated from the table catalog, used when no diagram
file is available.
"""

from typing import List, Optional

from marketplace_navigator.snapshot.models import TABLE_MODELS, Number, RawNumber
from marketplace_navigator.snapshot.tables import FOREIGN_KEYS, TableName


def _attribute_type(name: str, annotation: object) -> str:
    if name == "id" or name.endswith("_id"):
        return "id"
    if annotation in (Optional[Number], Optional[RawNumber]):
        return "number"
    return "string"


def _entity_block(table: TableName) -> List[str]:
    model = TABLE_MODELS[table]
    foreign = {fk.column for fk in FOREIGN_KEYS if fk.table == table}
    lines = [f"    {table.value} {{"]
    for name, info in model.model_fields.items():
        marker = " PK" if name == "id" else (" FK" if name in foreign else "")
        lines.append(f"        {_attribute_type(name, info.annotation)} {name}{marker}")
    lines.append("    }")
    return lines


def build_er_diagram(include_attributes: bool = True) -> str:
    """
    Mermaid `erDiagram` source for the marketplace schema.
    
    Every foreign key becomes a one-to-many relationship from the referenced
    table to the referencing one, labelled with the key column.
    """
    lines = ["erDiagram"]
    if include_attributes:
        for table in TableName:
            lines.extend(_entity_block(table))
    for fk in FOREIGN_KEYS:
        lines.append(f'    {fk.references.value} ||--o{{ {fk.table.value} : "{fk.column}"')
    return "\n".join(lines) + "\n"
