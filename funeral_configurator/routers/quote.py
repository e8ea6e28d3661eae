"""
Stateless quoting — price a full Selections payload in one call.

POST /api/quote/price — Itemized breakdown plus the out-of-pocket amount
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..errors import UnknownTierError
from ..pricing_engine import amount_due, resolve_price
from ..schemas import PriceBreakdown, Selections

router = APIRouter(prefix="/quote", tags=["quote"])


class QuoteResponse(BaseModel):
    breakdown: PriceBreakdown
    amount_due: int


@router.post("/price", response_model=QuoteResponse)
def price_selections(selections: Selections):
    try:
        breakdown = resolve_price(selections)
    except UnknownTierError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return QuoteResponse(breakdown=breakdown, amount_due=amount_due(breakdown.total))
