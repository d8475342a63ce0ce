"""
Catalog API Endpoints

Products with their brand, seller, category paths, images, attributes and
variants, plus the category tree.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from marketplace_navigator.navigation import AttributePair, RelationalNavigator
from marketplace_navigator.serving.api.dependencies import get_navigator, parse_identifier
from marketplace_navigator.snapshot import Record, TableName

router = APIRouter()


class AttributeResponse(BaseModel):
    name: Any
    value: Any = None


class VariantResponse(BaseModel):
    id: Any
    sku: Optional[str] = None
    price: Optional[float] = None
    stock: int = 0
    attributes: List[AttributeResponse]


class ProductSummary(BaseModel):
    """Product as listed on the board"""
    id: Any
    name: Any
    brand: Any = None
    seller: Any = None
    categories: List[str]


class ProductDetail(ProductSummary):
    """Product with everything joined to it"""
    description: Optional[str] = None
    images: List[Dict[str, Any]]
    attributes: List[AttributeResponse]
    variants: List[VariantResponse]


class CategoryResponse(BaseModel):
    id: Any
    name: Any
    parent_id: Any = None
    path: str


def _attributes(pairs: List[AttributePair]) -> List[AttributeResponse]:
    return [AttributeResponse(name=pair.name, value=pair.value) for pair in pairs]


def _summary(navigator: RelationalNavigator, product: Record) -> ProductSummary:
    brand_id = product.get("brand_id")
    seller_id = product.get("seller_id")
    return ProductSummary(
        id=product.id,
        name=product.get("name", product.id),
        brand=navigator.brand_name(brand_id) if brand_id is not None else None,
        seller=navigator.seller_name(seller_id) if seller_id is not None else None,
        categories=navigator.product_category_paths(product.id),
    )


def _variant(navigator: RelationalNavigator, variant: Record) -> VariantResponse:
    stock = sum(
        int(row.get("quantity", 0)) for row in navigator.variant_inventory(variant.id)
    )
    return VariantResponse(
        id=variant.id,
        sku=variant.get("sku"),
        price=variant.get("price"),
        stock=stock,
        attributes=_attributes(navigator.variant_attributes_for_variant(variant.id)),
    )


@router.get("/products", response_model=List[ProductSummary])
async def list_products(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[ProductSummary]:
    """List products in snapshot order."""
    return [_summary(navigator, product) for product in navigator.snapshot.table(TableName.PRODUCTS)]


@router.get("/products/{product_id}", response_model=ProductDetail)
async def get_product(
    product_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> ProductDetail:
    """Get product details."""
    known = (p.id for p in navigator.snapshot.table(TableName.PRODUCTS))
    product = navigator.find_by_id(TableName.PRODUCTS, parse_identifier(product_id, known))
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    
    summary = _summary(navigator, product)
    return ProductDetail(
        **summary.model_dump(),
        description=product.get("description"),
        images=[image.to_dict() for image in navigator.product_images(product.id)],
        attributes=_attributes(navigator.base_attributes_for_product(product.id)),
        variants=[_variant(navigator, v) for v in navigator.product_variants(product.id)],
    )


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[CategoryResponse]:
    """List categories with their full path."""
    return [
        CategoryResponse(
            id=category.id,
            name=category.get("name", category.id),
            parent_id=category.get("parent_id"),
            path=navigator.category_path(category.id),
        )
        for category in navigator.snapshot.table(TableName.CATEGORIES)
    ]


@router.get("/categories/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> CategoryResponse:
    """Get one category with its path."""
    known = (c.id for c in navigator.snapshot.table(TableName.CATEGORIES))
    category = navigator.find_by_id(TableName.CATEGORIES, parse_identifier(category_id, known))
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return CategoryResponse(
        id=category.id,
        name=category.get("name", category.id),
        parent_id=category.get("parent_id"),
        path=navigator.category_path(category.id),
    )
