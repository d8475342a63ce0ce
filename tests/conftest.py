"""
Test Suite Configuration
"""
from typing import Any, Dict

import pytest

from marketplace_navigator.config import Settings
from marketplace_navigator.config.settings import NavigatorSettings
from marketplace_navigator.navigation import RelationalNavigator
from marketplace_navigator.snapshot import Snapshot


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Create test settings pointing at temporary files"""
    return Settings(
        app_env="testing",
        debug=True,
        navigator=NavigatorSettings(
            snapshot_path=str(tmp_path / "sample-data.json"),
            diagram_path=str(tmp_path / "marketplace.mermaid"),
        ),
    )


@pytest.fixture
def marketplace_raw() -> Dict[str, Any]:
    """Small hand-built marketplace snapshot, with a few dangling references"""
    return {
        "CATEGORIES": [
            {"id": 1, "name": "Apparel", "parent_id": None},
            {"id": 2, "name": "Shoes", "parent_id": 1},
            {"id": 3, "name": "Running", "parent_id": 2},
            {"id": 4, "name": "Electronics", "parent_id": None},
        ],
        "BRANDS": [{"id": 1, "name": "Acme"}],
        "SELLERS": [{"id": 1, "name": "Widget World", "user_id": 1}],
        "USERS": [{"id": 1, "email": "a@example.com"}, {"id": 2, "email": "b@example.com"}],
        "CUSTOMERS": [{"id": 1, "user_id": 1}, {"id": 2, "user_id": 2}],
        "PRODUCTS": [
            {"id": 10, "name": "Widget", "brand_id": 1, "seller_id": 1, "description": "A widget"},
            {"id": 11, "name": "Sneaker", "brand_id": 99, "seller_id": 1},
        ],
        "PRODUCT_CATEGORIES": [
            {"product_id": 10, "category_id": 4},
            {"product_id": 11, "category_id": 3},
            {"product_id": 11, "category_id": 77},
        ],
        "PRODUCT_VARIANTS": [
            {"id": 100, "product_id": 10, "sku": "W-1", "price": 9.99},
            {"id": 101, "product_id": 11, "sku": "S-1", "price": 59.0},
            {"id": 102, "product_id": 999, "sku": "X-1"},
        ],
        "PRODUCT_IMAGES": [
            {"id": 1, "product_id": 10, "url": "https://img.example.com/w.png"},
            {"id": 2, "product_id": 11, "url": "https://img.example.com/s.png"},
        ],
        "PRODUCT_ATTRIBUTES": [{"id": 1, "name": "Color"}, {"id": 2, "name": "Size"}],
        "PRODUCT_ATTRIBUTE_VALUES": [
            {"id": 1, "attribute_id": 1, "value": "Red"},
            {"id": 2, "attribute_id": 2, "value": "M"},
            {"id": 3, "attribute_id": 99, "value": "Orphan"},
        ],
        "PRODUCT_BASE_ATTRIBUTES": [
            {"product_id": 10, "attribute_value_id": 2},
            {"product_id": 10, "attribute_value_id": 1},
            {"product_id": 10, "attribute_value_id": 3},
            {"product_id": 10, "attribute_value_id": 404},
        ],
        "PRODUCT_VARIANT_ATTRIBUTES": [{"variant_id": 100, "attribute_value_id": 1}],
        "INVENTORY": [
            {"id": 1, "variant_id": 100, "quantity": 5},
            {"id": 2, "variant_id": 100, "quantity": 3},
        ],
        "ADDRESSES": [{"id": 1, "line1": "1 Main St", "city": "Springfield", "country": "US"}],
        "CUSTOMER_SHIPPING_ADDRESSES": [
            {"customer_id": 1, "address_id": 1},
            {"customer_id": 1, "address_id": 9},
        ],
        "CUSTOMER_BILLING_ADDRESSES": [{"customer_id": 1, "address_id": 1}],
        "ORDERS": [
            {"id": 1, "customer_id": 1, "status": "delivered", "total_amount": 78.98},
            {"id": 2, "customer_id": 1, "status": "pending"},
            {"id": 3, "customer_id": 2, "status": "shipped"},
        ],
        "ORDER_ITEMS": [
            {"id": 1, "order_id": 1, "variant_id": 100, "quantity": 2, "unit_price": 9.99},
            {"id": 2, "order_id": 1, "variant_id": 101, "quantity": 1, "unit_price": 59.0},
            {"id": 3, "order_id": 2, "variant_id": 102, "quantity": 1},
        ],
        "ORDER_ITEM_PROMOTIONS": [
            {
                "id": 1,
                "order_item_id": 1,
                "promotion_id": 1,
                "discount_amount": 5.5,
                "promotion_snapshot": {"name": "Spring Sale"},
            },
            {"id": 2, "order_item_id": 1, "promotion_id": 2},
            {"id": 3, "order_item_id": 2, "promotion_id": 42, "discount_amount": 1},
        ],
        "PROMOTIONS": [
            {"id": 1, "name": "Widget Multibuy"},
            {"id": 2, "name": "Shoe Week"},
            {"id": 3, "name": "Mystery Deal"},
            {"id": 4, "name": "Plain"},
        ],
        "PROMOTION_RULES": [
            {"id": 1, "promotion_id": 1, "buy_variant_id": 100, "buy_quantity": 2, "get_quantity": 1},
            {"id": 2, "promotion_id": 1, "buy_category_id": 2, "buy_quantity": 5, "discount_percentage": 50},
            {"id": 3, "promotion_id": 2, "buy_category_id": 2, "buy_quantity": 3, "discount_percentage": 20},
            {"id": 4, "promotion_id": 3, "buy_quantity": 1},
        ],
        "PROMOTION_CONDITIONS": [
            {"id": 1, "promotion_id": 2, "condition_type": "min_order_total", "value": 50},
        ],
        "PLATFORM_ADMINS": [{"id": 1, "user_id": 2}],
        "CART_ITEMS": [
            {"id": 1, "cart_id": 1, "variant_id": 100, "quantity": 1},
            {"id": 2, "cart_id": 2, "variant_id": 101, "quantity": 2},
            {"id": 3, "cart_id": 1, "variant_id": 102, "quantity": 1},
        ],
        "CART_ITEM_DISCOUNTS": [
            {"id": 1, "cart_item_id": 1, "promotion_id": 1, "discount_amount": 2.5},
            {"id": 2, "cart_item_id": 1, "promotion_id": 2, "discount_amount": 1.25},
            {"id": 3, "cart_item_id": 3, "promotion_id": 99, "discount_amount": 0.5},
        ],
    }


@pytest.fixture
def snapshot(marketplace_raw) -> Snapshot:
    """Validated snapshot of the hand-built marketplace"""
    return Snapshot.from_raw(marketplace_raw)


@pytest.fixture
def empty_snapshot() -> Snapshot:
    """Snapshot without any table"""
    return Snapshot()


@pytest.fixture
def navigator(snapshot, test_settings) -> RelationalNavigator:
    """Navigator bound to the hand-built snapshot"""
    return RelationalNavigator(snapshot, settings=test_settings)
