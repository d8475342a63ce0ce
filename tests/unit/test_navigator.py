"""
Unit Tests - Relational Navigator Facade
"""
from marketplace_navigator.config import Settings
from marketplace_navigator.config.settings import NavigatorSettings
from marketplace_navigator.navigation import AttributePair, RelationalNavigator
from marketplace_navigator.snapshot import TableName


class TestRelationalNavigator:
    """Tests for the snapshot-bound query facade"""
    
    def test_default_settings(self, navigator):
        assert navigator.category_path(3) == "Apparel › Shoes › Running"
        assert navigator.product_category_paths(10) == ["Electronics"]
    
    def test_custom_separator_and_currency(self, snapshot):
        settings = Settings(
            navigator=NavigatorSettings(category_separator=" > ", currency_symbol="£"),
        )
        navigator = RelationalNavigator(snapshot, settings=settings)
        applied = snapshot.table(TableName.ORDER_ITEM_PROMOTIONS)[0]
        
        assert navigator.category_path(3) == "Apparel > Shoes > Running"
        assert navigator.format_applied_promotion(applied) == "Spring Sale (−£5.50)"
    
    def test_condition_describer(self, snapshot, test_settings):
        navigator = RelationalNavigator(
            snapshot,
            settings=test_settings,
            describe_conditions=lambda promotion, conditions: f"{len(conditions)} condition(s)",
        )
        promotion = navigator.promotion_by_id(2)
        
        assert navigator.promotion_summary(promotion) == "Buy at least 3 in Shoes: 20% off; 1 condition(s)"
    
    def test_name_helpers(self, navigator):
        assert navigator.brand_name(1) == "Acme"
        assert navigator.brand_name(99) == 99
        assert navigator.seller_name(1) == "Widget World"
        assert navigator.product_name(10) == "Widget"
        assert navigator.category_name(2) == "Shoes"
        assert navigator.variant_product_name(100) == "Widget"
    
    def test_order_walk(self, navigator):
        """Customer to orders to items to promotion labels"""
        orders = navigator.customer_orders(1)
        items = navigator.order_items(orders[0].id)
        labels = [
            navigator.format_applied_promotion(applied)
            for item in items
            for applied in navigator.order_item_promotions(item.id)
        ]
        
        assert labels == ["Spring Sale (−$5.50)", "Shoe Week", "42 (−$1.00)"]
    
    def test_attributes(self, navigator):
        assert navigator.attribute_name_from_value(2) == "Size"
        assert navigator.variant_attributes_for_variant(100) == [AttributePair("Color", "Red")]
    
    def test_carts(self, navigator):
        assert navigator.cart_ids() == [1, 2]
        assert [i.id for i in navigator.cart_items(1)] == [1, 3]
        assert [d.id for d in navigator.cart_item_discounts(1)] == [1, 2]
        assert navigator.cart_summary(1).discount_total == 4.25
    
    def test_sections(self, navigator):
        assert navigator.sections()[0] == "CATEGORIES"
        assert navigator.format_section("PLATFORM_ADMINS") == '[\n  {\n    "id": 1,\n    "user_id": 2\n  }\n]'
    
    def test_addresses(self, navigator):
        assert [a.id for a in navigator.customer_shipping_addresses(1)] == [1]
        assert [a.id for a in navigator.customer_billing_addresses(1)] == [1]
        assert navigator.customer_billing_addresses(2) == []
    
    def test_attribute_links(self, navigator):
        assert len(navigator.product_base_attribute_links(10)) == 4
        assert navigator.variant_attribute_links(101) == []
        assert navigator.attribute_value(3).value == "Orphan"
