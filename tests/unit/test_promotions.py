"""
Unit Tests - Promotion Summaries and Applied Promotions
"""
import pytest

from marketplace_navigator.navigation import format_applied_promotion, promotion_summary
from marketplace_navigator.navigation.promotions import format_amount, format_number
from marketplace_navigator.snapshot import Snapshot, TableName
from marketplace_navigator.snapshot.models import CartItemDiscount, OrderItemPromotion


def _promotion(snapshot, promotion_id):
    return snapshot.table(TableName.PROMOTIONS)[promotion_id - 1]


class TestPromotionSummary:
    """Tests for rule-based promotion descriptions"""
    
    def test_buy_get_free(self):
        snapshot = Snapshot.from_raw({
            "PRODUCTS": [{"id": "P", "name": "Widget"}],
            "PRODUCT_VARIANTS": [{"id": "V", "product_id": "P"}],
            "PROMOTIONS": [{"id": 1, "name": "Multibuy"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "get_quantity": 1, "buy_quantity": 2, "buy_variant_id": "V"},
            ],
        })
        promotion = snapshot.table(TableName.PROMOTIONS)[0]
        
        assert promotion_summary(snapshot, promotion) == "Buy 2 get 1 free on Widget"
    
    def test_percentage_off(self):
        snapshot = Snapshot.from_raw({
            "CATEGORIES": [{"id": "C", "name": "Shoes"}],
            "PROMOTIONS": [{"id": 1, "name": "Shoe Week"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "discount_percentage": 20, "buy_category_id": "C", "buy_quantity": 3},
            ],
        })
        promotion = snapshot.table(TableName.PROMOTIONS)[0]
        
        assert promotion_summary(snapshot, promotion) == "Buy at least 3 in Shoes: 20% off"
    
    def test_first_rule_wins(self, snapshot):
        assert promotion_summary(snapshot, _promotion(snapshot, 1)) == "Buy 2 get 1 free on Widget"
    
    def test_no_rules_is_bare_name(self, snapshot):
        assert promotion_summary(snapshot, _promotion(snapshot, 4)) == "Plain"
    
    def test_unrecognized_rule_is_bare_name(self, snapshot):
        assert promotion_summary(snapshot, _promotion(snapshot, 3)) == "Mystery Deal"
    
    def test_unresolved_variant_echoes_id(self):
        snapshot = Snapshot.from_raw({
            "PROMOTIONS": [{"id": 1, "name": "Ghost"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "get_quantity": 1, "buy_quantity": 2, "buy_variant_id": 77},
            ],
        })
        
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Buy 2 get 1 free on 77"
    
    def test_unresolved_category_echoes_id(self):
        snapshot = Snapshot.from_raw({
            "PROMOTIONS": [{"id": 1, "name": "Ghost"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "discount_percentage": 15.5, "buy_category_id": 8, "buy_quantity": 1.0},
            ],
        })
        
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Buy at least 1 in 8: 15.5% off"
    
    def test_free_items_without_variant_or_quantity(self):
        """A positive get_quantity alone selects the buy-get-free wording"""
        snapshot = Snapshot.from_raw({
            "CATEGORIES": [{"id": "C", "name": "Shoes"}],
            "PROMOTIONS": [{"id": 1, "name": "P"}],
            "PROMOTION_RULES": [
                {
                    "promotion_id": 1,
                    "get_quantity": 1,
                    "buy_quantity": 2,
                    "discount_percentage": 10,
                    "buy_category_id": "C",
                },
            ],
        })
        
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Buy 2 get 1 free on ?"
    
    def test_percentage_without_buy_quantity(self):
        snapshot = Snapshot.from_raw({
            "CATEGORIES": [{"id": "C", "name": "Shoes"}],
            "PROMOTIONS": [{"id": 1, "name": "P"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "discount_percentage": 20, "buy_category_id": "C"},
            ],
        })
        
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Buy at least ? in Shoes: 20% off"
    
    def test_text_get_quantity_is_not_a_quantity(self):
        snapshot = Snapshot.from_raw({
            "PROMOTIONS": [{"id": 1, "name": "Loose"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "get_quantity": "1", "buy_quantity": 2, "buy_variant_id": 1},
            ],
        })
        rule = snapshot.table("PROMOTION_RULES")[0]
        
        assert rule.get_quantity == "1"
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Loose"
    
    def test_zero_get_quantity_falls_through(self):
        snapshot = Snapshot.from_raw({
            "PROMOTIONS": [{"id": 1, "name": "Nothing Free"}],
            "PROMOTION_RULES": [
                {"promotion_id": 1, "get_quantity": 0, "buy_quantity": 2, "buy_variant_id": 1},
            ],
        })
        
        assert promotion_summary(snapshot, snapshot.table("PROMOTIONS")[0]) == "Nothing Free"
    
    def test_condition_describer_hook(self, snapshot):
        """Conditions are only rendered through an explicit describer"""
        def describe(promotion, conditions):
            return ", ".join(c.get("condition_type") for c in conditions) or None
        
        shoe_week = _promotion(snapshot, 2)
        
        assert promotion_summary(snapshot, shoe_week) == "Buy at least 3 in Shoes: 20% off"
        assert (
            promotion_summary(snapshot, shoe_week, describe_conditions=describe)
            == "Buy at least 3 in Shoes: 20% off; min_order_total"
        )
        assert promotion_summary(snapshot, _promotion(snapshot, 4), describe_conditions=describe) == "Plain"


class TestAppliedPromotion:
    """Tests for order item and cart item promotion labels"""
    
    def test_snapshot_name_with_amount(self, empty_snapshot):
        applied = OrderItemPromotion(discount_amount=5.5, promotion_snapshot={"name": "Spring Sale"})
        
        assert format_applied_promotion(empty_snapshot, applied) == "Spring Sale (−$5.50)"
    
    def test_no_amount_is_bare_name(self, empty_snapshot):
        applied = OrderItemPromotion(promotion_snapshot={"name": "Spring Sale"})
        
        assert format_applied_promotion(empty_snapshot, applied) == "Spring Sale"
    
    def test_snapshot_takes_precedence(self, snapshot):
        applied = snapshot.table(TableName.ORDER_ITEM_PROMOTIONS)[0]
        
        assert format_applied_promotion(snapshot, applied) == "Spring Sale (−$5.50)"
    
    def test_live_lookup(self, snapshot):
        applied = snapshot.table(TableName.ORDER_ITEM_PROMOTIONS)[1]
        
        assert format_applied_promotion(snapshot, applied) == "Shoe Week"
    
    def test_raw_id_fallback(self, snapshot):
        applied = snapshot.table(TableName.ORDER_ITEM_PROMOTIONS)[2]
        
        assert format_applied_promotion(snapshot, applied) == "42 (−$1.00)"
    
    def test_empty_snapshot_name_falls_back(self, snapshot):
        applied = OrderItemPromotion(promotion_id=2, promotion_snapshot={"name": ""})
        
        assert format_applied_promotion(snapshot, applied) == "Shoe Week"
    
    def test_cart_discount(self, snapshot):
        discount = CartItemDiscount(promotion_id=1, discount_amount=2.5)
        
        assert format_applied_promotion(snapshot, discount, currency="€") == "Widget Multibuy (−€2.50)"
    
    def test_text_amount_is_not_shown(self, empty_snapshot):
        applied = OrderItemPromotion.model_validate(
            {"discount_amount": "5.5", "promotion_snapshot": {"name": "Spring Sale"}}
        )
        
        assert applied.discount_amount == "5.5"
        assert format_applied_promotion(empty_snapshot, applied) == "Spring Sale"
    
    def test_boolean_amount_is_not_shown(self, empty_snapshot):
        applied = CartItemDiscount.model_validate({"promotion_id": 7, "discount_amount": True})
        
        assert format_applied_promotion(empty_snapshot, applied) == "7"
    
    def test_zero_amount_shown(self, empty_snapshot):
        applied = OrderItemPromotion(promotion_id=7, discount_amount=0)
        
        assert format_applied_promotion(empty_snapshot, applied) == "7 (−$0.00)"
    
    @pytest.mark.parametrize(
        "amount, expected",
        [(5.5, "5.50"), (0.125, "0.13"), (2.675, "2.67"), (10, "10.00")],
    )
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected
    
    def test_format_number(self):
        assert format_number(3.0) == "3"
        assert format_number(2.5) == "2.5"
        assert format_number(4) == "4"
