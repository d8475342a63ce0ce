"""
Snapshot Record Models

Typed records for each marketplace table. Fields that take part in joins are
declared explicitly; any other field in the source data is kept as an extra
so a record always round-trips to what was loaded.
"""

from typing import Any, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

from marketplace_navigator.snapshot.tables import TableName

Identifier = Union[int, str]
Number = Union[int, float]
# Amounts and rule quantities keep their loaded type; only real numbers count
RawNumber = Union[StrictInt, StrictFloat, Any]


class Record(BaseModel):
    """Base class for all snapshot records"""
    
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)
    
    id: Optional[Identifier] = None
    
    def get(self, field: str, default: Any = None) -> Any:
        """Read a declared or extra field, `default` when absent or null"""
        if field in type(self).model_fields:
            value = getattr(self, field)
        else:
            value = (self.model_extra or {}).get(field)
        return default if value is None else value
    
    def to_dict(self) -> Dict[str, Any]:
        """Fields as they were loaded"""
        return self.model_dump(mode="json", exclude_unset=True)


# =============================================================================
# CATALOG
# =============================================================================

class Category(Record):
    name: Optional[str] = None
    parent_id: Optional[Identifier] = None


class Brand(Record):
    name: Optional[str] = None


class Product(Record):
    name: Optional[str] = None
    brand_id: Optional[Identifier] = None
    seller_id: Optional[Identifier] = None
    description: Optional[str] = None


class ProductCategory(Record):
    """Junction between products and categories"""
    product_id: Optional[Identifier] = None
    category_id: Optional[Identifier] = None


class ProductVariant(Record):
    product_id: Optional[Identifier] = None
    sku: Optional[str] = None
    price: Optional[Number] = None


class ProductImage(Record):
    product_id: Optional[Identifier] = None
    url: Optional[str] = None


class ProductAttribute(Record):
    """Attribute template, e.g. Color or Size"""
    name: Optional[str] = None


class ProductAttributeValue(Record):
    """Concrete value of an attribute"""
    attribute_id: Optional[Identifier] = None
    value: Any = None


class ProductBaseAttribute(Record):
    """Attaches an attribute value to a product"""
    product_id: Optional[Identifier] = None
    attribute_value_id: Optional[Identifier] = None


class ProductVariantAttribute(Record):
    """Attaches an attribute value to a single variant"""
    variant_id: Optional[Identifier] = None
    attribute_value_id: Optional[Identifier] = None


class Inventory(Record):
    variant_id: Optional[Identifier] = None
    quantity: Optional[Number] = None


# =============================================================================
# PARTIES
# =============================================================================

class User(Record):
    email: Optional[str] = None


class Customer(Record):
    user_id: Optional[Identifier] = None


class Seller(Record):
    user_id: Optional[Identifier] = None
    name: Optional[str] = None


class PlatformAdmin(Record):
    user_id: Optional[Identifier] = None


class Address(Record):
    line1: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class CustomerAddress(Record):
    """Shipping or billing address link"""
    customer_id: Optional[Identifier] = None
    address_id: Optional[Identifier] = None


# =============================================================================
# ORDERS & PROMOTIONS
# =============================================================================

class Order(Record):
    customer_id: Optional[Identifier] = None
    status: Optional[str] = None
    total_amount: Optional[Number] = None


class OrderItem(Record):
    order_id: Optional[Identifier] = None
    variant_id: Optional[Identifier] = None
    quantity: Optional[Number] = None
    unit_price: Optional[Number] = None


class PromotionSnapshot(BaseModel):
    """Promotion as it was when applied to an order item"""
    
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)
    
    name: Optional[str] = None


class OrderItemPromotion(Record):
    order_item_id: Optional[Identifier] = None
    promotion_id: Optional[Identifier] = None
    discount_amount: Optional[RawNumber] = None
    promotion_snapshot: Optional[PromotionSnapshot] = None


class Promotion(Record):
    name: Optional[str] = None


class PromotionRule(Record):
    """
    One reward rule of a promotion.
    
    Either buy-N-get-M-free on a variant (`buy_variant_id`, `get_quantity`)
    or a percentage off within a category (`buy_category_id`,
    `discount_percentage`), both gated by `buy_quantity`.
    """
    promotion_id: Optional[Identifier] = None
    buy_variant_id: Optional[Identifier] = None
    buy_category_id: Optional[Identifier] = None
    buy_quantity: Optional[RawNumber] = None
    get_quantity: Optional[RawNumber] = None
    discount_percentage: Optional[RawNumber] = None


class PromotionCondition(Record):
    promotion_id: Optional[Identifier] = None


# =============================================================================
# CARTS
# =============================================================================

class CartItem(Record):
    cart_id: Optional[Identifier] = None
    variant_id: Optional[Identifier] = None
    quantity: Optional[Number] = None


class CartItemDiscount(Record):
    cart_item_id: Optional[Identifier] = None
    promotion_id: Optional[Identifier] = None
    discount_amount: Optional[RawNumber] = None


TABLE_MODELS: Dict[TableName, Type[Record]] = {
    TableName.CATEGORIES: Category,
    TableName.BRANDS: Brand,
    TableName.PRODUCTS: Product,
    TableName.PRODUCT_CATEGORIES: ProductCategory,
    TableName.USERS: User,
    TableName.CUSTOMERS: Customer,
    TableName.SELLERS: Seller,
    TableName.PRODUCT_VARIANTS: ProductVariant,
    TableName.PRODUCT_IMAGES: ProductImage,
    TableName.PRODUCT_ATTRIBUTES: ProductAttribute,
    TableName.PRODUCT_ATTRIBUTE_VALUES: ProductAttributeValue,
    TableName.PRODUCT_BASE_ATTRIBUTES: ProductBaseAttribute,
    TableName.PRODUCT_VARIANT_ATTRIBUTES: ProductVariantAttribute,
    TableName.INVENTORY: Inventory,
    TableName.ADDRESSES: Address,
    TableName.CUSTOMER_SHIPPING_ADDRESSES: CustomerAddress,
    TableName.CUSTOMER_BILLING_ADDRESSES: CustomerAddress,
    TableName.ORDERS: Order,
    TableName.ORDER_ITEMS: OrderItem,
    TableName.ORDER_ITEM_PROMOTIONS: OrderItemPromotion,
    TableName.PROMOTIONS: Promotion,
    TableName.PROMOTION_RULES: PromotionRule,
    TableName.PROMOTION_CONDITIONS: PromotionCondition,
    TableName.PLATFORM_ADMINS: PlatformAdmin,
    TableName.CART_ITEMS: CartItem,
    TableName.CART_ITEM_DISCOUNTS: CartItemDiscount,
}
