"""
Promotions API Endpoints
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from marketplace_navigator.navigation import RelationalNavigator
from marketplace_navigator.serving.api.dependencies import get_navigator, parse_identifier
from marketplace_navigator.snapshot import Record, TableName

router = APIRouter()


class PromotionResponse(BaseModel):
    """Promotion with its one-line summary"""
    id: Any
    name: Any
    summary: str
    rules: List[Dict[str, Any]]
    conditions: List[Dict[str, Any]]


def _promotion(navigator: RelationalNavigator, promotion: Record) -> PromotionResponse:
    return PromotionResponse(
        id=promotion.id,
        name=promotion.get("name", promotion.id),
        summary=navigator.promotion_summary(promotion),
        rules=[rule.to_dict() for rule in navigator.promotion_rules(promotion.id)],
        conditions=[c.to_dict() for c in navigator.promotion_conditions(promotion.id)],
    )


@router.get("", response_model=List[PromotionResponse])
async def list_promotions(
    navigator: RelationalNavigator = Depends(get_navigator),
) -> List[PromotionResponse]:
    """List promotions with summaries."""
    return [
        _promotion(navigator, promotion)
        for promotion in navigator.snapshot.table(TableName.PROMOTIONS)
    ]


@router.get("/{promotion_id}", response_model=PromotionResponse)
async def get_promotion(
    promotion_id: str,
    navigator: RelationalNavigator = Depends(get_navigator),
) -> PromotionResponse:
    """Get one promotion."""
    known = (p.id for p in navigator.snapshot.table(TableName.PROMOTIONS))
    promotion = navigator.promotion_by_id(parse_identifier(promotion_id, known))
    if promotion is None:
        raise HTTPException(status_code=404, detail="Promotion not found")
    return _promotion(navigator, promotion)
