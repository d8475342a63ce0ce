"""
Synthetic Snapshot Generator

Generates a small, referentially consistent marketplace snapshot for
development and tests. Output has the same shape as the snapshot JSON file:
table name -> list of records.
"""

import json
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
from faker import Faker

from marketplace_navigator.snapshot import Snapshot, TableName

logger = structlog.get_logger(__name__)

Tables = Dict[str, List[Dict[str, Any]]]


# =============================================================================
# CONFIGURATION
# =============================================================================

CATEGORY_TREE = [
    ("Electronics", ["Phones", "Laptops", "Headphones"]),
    ("Apparel", ["Shoes", "Jackets", "Shirts"]),
    ("Home", ["Kitchen", "Bedding"]),
]

BRANDS = ["TechPro", "StyleMax", "HomeEase", "SportFit", "ValueChoice"]

ATTRIBUTES = {
    "Color": ["Black", "White", "Red", "Blue"],
    "Size": ["S", "M", "L"],
    "Material": ["Cotton", "Aluminium", "Leather"],
}

ORDER_STATUSES = ["pending", "shipped", "delivered", "cancelled"]


class SnapshotGenerator:
    """
    Builds every marketplace table with consistent foreign keys.
    
    Example:
        tables = SnapshotGenerator(seed=7).generate(n_products=20)
        snapshot = Snapshot.from_raw(tables)
    """
    
    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self._tables: Tables = {}
    
    def _add(self, table: TableName, record: Dict[str, Any]) -> Dict[str, Any]:
        rows = self._tables.setdefault(table.value, [])
        record = {"id": len(rows) + 1, **record}
        rows.append(record)
        return record
    
    def _ids(self, table: TableName) -> List[int]:
        return [row["id"] for row in self._tables.get(table.value, [])]
    
    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------
    
    def _generate_categories(self) -> List[int]:
        leaves = []
        for root_name, children in CATEGORY_TREE:
            root = self._add(TableName.CATEGORIES, {"name": root_name, "parent_id": None})
            for child in children:
                leaf = self._add(TableName.CATEGORIES, {"name": child, "parent_id": root["id"]})
                leaves.append(leaf["id"])
        return leaves
    
    def _generate_parties(self, n_customers: int, n_sellers: int) -> None:
        for _ in range(n_customers):
            user = self._add(TableName.USERS, {"email": self.fake.email(), "role": "customer"})
            customer = self._add(TableName.CUSTOMERS, {
                "user_id": user["id"],
                "first_name": self.fake.first_name(),
                "last_name": self.fake.last_name(),
            })
            address = self._add(TableName.ADDRESSES, {
                "line1": self.fake.street_address(),
                "city": self.fake.city(),
                "country": self.fake.country_code(),
            })
            link = {"customer_id": customer["id"], "address_id": address["id"]}
            self._add(TableName.CUSTOMER_SHIPPING_ADDRESSES, dict(link))
            self._add(TableName.CUSTOMER_BILLING_ADDRESSES, dict(link))
        
        for _ in range(n_sellers):
            user = self._add(TableName.USERS, {"email": self.fake.company_email(), "role": "seller"})
            self._add(TableName.SELLERS, {"user_id": user["id"], "name": self.fake.company()})
        
        admin = self._add(TableName.USERS, {"email": self.fake.email(), "role": "admin"})
        self._add(TableName.PLATFORM_ADMINS, {"user_id": admin["id"]})
    
    def _generate_products(self, n_products: int, leaf_categories: List[int]) -> None:
        for brand in BRANDS:
            self._add(TableName.BRANDS, {"name": brand})
        
        value_ids: Dict[str, List[int]] = {}
        for attribute_name, values in ATTRIBUTES.items():
            attribute = self._add(TableName.PRODUCT_ATTRIBUTES, {"name": attribute_name})
            value_ids[attribute_name] = [
                self._add(TableName.PRODUCT_ATTRIBUTE_VALUES, {
                    "attribute_id": attribute["id"],
                    "value": value,
                })["id"]
                for value in values
            ]
        
        brand_ids = self._ids(TableName.BRANDS)
        seller_ids = self._ids(TableName.SELLERS)
        for _ in range(n_products):
            product = self._add(TableName.PRODUCTS, {
                "name": f"{self.fake.word().title()} {self.rng.choice(['Pro', 'Lite', 'Max', 'Mini'])}",
                "brand_id": self.rng.choice(brand_ids),
                "seller_id": self.rng.choice(seller_ids),
                "description": self.fake.sentence(nb_words=10),
            })
            for category_id in self.rng.sample(leaf_categories, k=self.rng.randint(1, 2)):
                self._add(TableName.PRODUCT_CATEGORIES, {
                    "product_id": product["id"],
                    "category_id": category_id,
                })
            self._add(TableName.PRODUCT_IMAGES, {
                "product_id": product["id"],
                "url": self.fake.image_url(),
                "position": 0,
            })
            self._add(TableName.PRODUCT_BASE_ATTRIBUTES, {
                "product_id": product["id"],
                "attribute_value_id": self.rng.choice(value_ids["Material"]),
            })
            
            base_price = round(self.rng.uniform(10, 500), 2)
            for color_value in self.rng.sample(value_ids["Color"], k=2):
                variant = self._add(TableName.PRODUCT_VARIANTS, {
                    "product_id": product["id"],
                    "sku": f"SKU-{self.fake.unique.random_number(digits=8)}",
                    "price": base_price,
                })
                self._add(TableName.PRODUCT_VARIANT_ATTRIBUTES, {
                    "variant_id": variant["id"],
                    "attribute_value_id": color_value,
                })
                self._add(TableName.INVENTORY, {
                    "variant_id": variant["id"],
                    "quantity": self.rng.randint(0, 200),
                })
    
    # -------------------------------------------------------------------------
    # Promotions, orders and carts
    # -------------------------------------------------------------------------
    
    def _generate_promotions(self, leaf_categories: List[int]) -> None:
        variant_ids = self._ids(TableName.PRODUCT_VARIANTS)
        
        bogo = self._add(TableName.PROMOTIONS, {"name": "Multibuy Deal", "active": True})
        self._add(TableName.PROMOTION_RULES, {
            "promotion_id": bogo["id"],
            "buy_variant_id": self.rng.choice(variant_ids),
            "buy_quantity": 2,
            "get_quantity": 1,
        })
        
        seasonal = self._add(TableName.PROMOTIONS, {"name": "Seasonal Sale", "active": True})
        self._add(TableName.PROMOTION_RULES, {
            "promotion_id": seasonal["id"],
            "buy_category_id": self.rng.choice(leaf_categories),
            "buy_quantity": 3,
            "discount_percentage": 20,
        })
        self._add(TableName.PROMOTION_CONDITIONS, {
            "promotion_id": seasonal["id"],
            "condition_type": "min_order_total",
            "value": 50,
        })
        
        self._add(TableName.PROMOTIONS, {"name": "Welcome Offer", "active": False})
    
    def _generate_orders(self, n_orders: int) -> None:
        customer_ids = self._ids(TableName.CUSTOMERS)
        variants = self._tables[TableName.PRODUCT_VARIANTS.value]
        promotions = self._tables[TableName.PROMOTIONS.value]
        
        for _ in range(n_orders):
            order = self._add(TableName.ORDERS, {
                "customer_id": self.rng.choice(customer_ids),
                "status": self.rng.choice(ORDER_STATUSES),
                "placed_at": self.fake.date_time_this_year().isoformat(),
            })
            total = 0.0
            for variant in self.rng.sample(variants, k=min(len(variants), self.rng.randint(1, 3))):
                quantity = self.rng.randint(1, 4)
                item = self._add(TableName.ORDER_ITEMS, {
                    "order_id": order["id"],
                    "variant_id": variant["id"],
                    "quantity": quantity,
                    "unit_price": variant["price"],
                })
                total += quantity * variant["price"]
                if self.rng.random() < 0.3:
                    promotion = self.rng.choice(promotions)
                    applied = {
                        "order_item_id": item["id"],
                        "promotion_id": promotion["id"],
                        "discount_amount": round(variant["price"] * 0.1, 2),
                    }
                    if self.rng.random() < 0.5:
                        applied["promotion_snapshot"] = {"name": promotion["name"]}
                    self._add(TableName.ORDER_ITEM_PROMOTIONS, applied)
            order["total_amount"] = round(total, 2)
    
    def _generate_carts(self, n_carts: int) -> None:
        variants = self._tables[TableName.PRODUCT_VARIANTS.value]
        promotion_ids = self._ids(TableName.PROMOTIONS)
        
        for cart_id in range(1, n_carts + 1):
            for variant in self.rng.sample(variants, k=min(len(variants), self.rng.randint(1, 3))):
                item = self._add(TableName.CART_ITEMS, {
                    "cart_id": cart_id,
                    "variant_id": variant["id"],
                    "quantity": self.rng.randint(1, 3),
                })
                if self.rng.random() < 0.4:
                    self._add(TableName.CART_ITEM_DISCOUNTS, {
                        "cart_item_id": item["id"],
                        "promotion_id": self.rng.choice(promotion_ids),
                        "discount_amount": round(variant["price"] * 0.05, 2),
                    })
    
    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------
    
    def generate(
        self,
        n_customers: int = 10,
        n_sellers: int = 3,
        n_products: int = 15,
        n_orders: int = 20,
        n_carts: int = 5,
    ) -> Tables:
        """Generate raw tables, every table of the catalog included"""
        self._tables = {table.value: [] for table in TableName}
        
        leaf_categories = self._generate_categories()
        self._generate_parties(n_customers, n_sellers)
        self._generate_products(n_products, leaf_categories)
        self._generate_promotions(leaf_categories)
        self._generate_orders(n_orders)
        self._generate_carts(n_carts)
        
        logger.info(
            "Synthetic snapshot generated",
            tables=len(self._tables),
            records=sum(len(rows) for rows in self._tables.values()),
        )
        return self._tables
    
    def build(self, **sizes: int) -> Snapshot:
        """Generate and validate into a Snapshot"""
        return Snapshot.from_raw(self.generate(**sizes))
    
    def save(self, path: Union[str, Path], tables: Optional[Tables] = None) -> Path:
        """Write tables (generated when omitted) as snapshot JSON"""
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json.dumps(tables if tables is not None else self.generate(), indent=2),
            encoding="utf-8",
        )
        logger.info("Snapshot written", path=str(output))
        return output
