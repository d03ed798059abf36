"""Request/response schemas for the coin ledger endpoint."""

from pydantic import BaseModel, Field

from coinhub.schemas.common import CamelModel

# Upper bound of a 32-bit signed integer column.
MAX_COIN_AMOUNT = 2_147_483_647


class DeductCoinsRequest(BaseModel):
    """Amount to take from the caller's balance. Must be a positive integer."""

    amount: int = Field(..., strict=True, gt=0, le=MAX_COIN_AMOUNT)


class DeductCoinsResponse(CamelModel):
    new_balance: int
    message: str
