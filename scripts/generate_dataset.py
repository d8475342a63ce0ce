"""
Sample Snapshot Generator
Writes a marketplace snapshot JSON and a matching Mermaid ER diagram.

Usage:
    python scripts/generate_dataset.py --products 50 --orders 200
"""

import argparse
from pathlib import Path

from marketplace_navigator.config.logging import configure_logging
from marketplace_navigator.data import SnapshotGenerator
from marketplace_navigator.diagram import build_er_diagram
from marketplace_navigator.quality import validate_snapshot
from marketplace_navigator.snapshot import Snapshot

ROOT_DIR = Path(__file__).parent.parent


def main():
    parser = argparse.ArgumentParser(description="Generate a sample marketplace snapshot")
    parser.add_argument("--output", type=Path, default=ROOT_DIR / "data" / "sample-data.json")
    parser.add_argument(
        "--diagram",
        type=Path,
        default=ROOT_DIR / "mermaid" / "marketplace-erd-updated.mermaid",
    )
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--customers", type=int, default=10)
    parser.add_argument("--sellers", type=int, default=3)
    parser.add_argument("--products", type=int, default=15)
    parser.add_argument("--orders", type=int, default=20)
    parser.add_argument("--carts", type=int, default=5)
    args = parser.parse_args()
    
    configure_logging(log_level="INFO")
    
    print("=" * 50)
    print("🚀 MARKETPLACE SNAPSHOT GENERATOR")
    print("=" * 50)
    
    generator = SnapshotGenerator(seed=args.seed)
    tables = generator.generate(
        n_customers=args.customers,
        n_sellers=args.sellers,
        n_products=args.products,
        n_orders=args.orders,
        n_carts=args.carts,
    )
    generator.save(args.output, tables)
    
    args.diagram.parent.mkdir(parents=True, exist_ok=True)
    args.diagram.write_text(build_er_diagram(), encoding="utf-8")
    
    result = validate_snapshot(Snapshot.from_raw(tables))
    
    print(f"\n✅ Snapshot: {args.output}")
    print(f"✅ Diagram:  {args.diagram}")
    print(f"   Tables: {len(tables)}, records: {sum(len(rows) for rows in tables.values()):,}")
    print(f"   Integrity: {result.status.value} ({result.passed_checks}/{result.total_checks} checks)")


if __name__ == "__main__":
    main()
