import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from cashdesk.models.constants import CASH_PAYMENT_METHOD, PAYMENT_METHODS
from cashdesk.services.money import settle_cash_amount

router = APIRouter(prefix="/rounding", tags=["rounding"])
logger = logging.getLogger("cashdesk.rounding")


class RoundingPreviewIn(BaseModel):
    amount: float = Field(..., ge=0, description="Amount due before rounding")
    payment_method: str = Field(CASH_PAYMENT_METHOD, description="cash | card | transfer")

    @field_validator("payment_method")
    @classmethod
    def valid_payment_method(cls, v: str) -> str:
        v = v.lower()
        if v not in PAYMENT_METHODS:
            raise ValueError("unsupported payment method")
        return v


class RoundingPreviewOut(BaseModel):
    amount: float
    rounded: float
    adjustment: float
    payment_method: str


@router.post(
    "/preview",
    response_model=RoundingPreviewOut,
    summary="Preview the amount collected for a payment",
)
async def preview(payload: RoundingPreviewIn):
    settlement = settle_cash_amount(payload.amount, payload.payment_method)
    logger.debug(
        "rounding preview",
        extra={
            "event": "rounding_preview",
            "amount": settlement.amount,
            "rounded": settlement.rounded,
            "adjustment": settlement.adjustment,
            "payment_method": settlement.payment_method,
        },
    )
    return RoundingPreviewOut(
        amount=settlement.amount,
        rounded=settlement.rounded,
        adjustment=settlement.adjustment,
        payment_method=settlement.payment_method,
    )
