"""Endpoints acting on the caller's own account."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from coinhub.api.deps import require_token
from coinhub.core.database import get_db
from coinhub.core.security import TokenIdentity
from coinhub.schemas.users import DeductCoinsRequest, DeductCoinsResponse
from coinhub.services.accounts import UserNotFoundError
from coinhub.services.ledger import InsufficientCoinsError, InvalidAmountError, deduct_coins

router = APIRouter()


@router.post("/deduct-coins", response_model=DeductCoinsResponse)
def post_deduct_coins(
    body: DeductCoinsRequest,
    identity: Annotated[TokenIdentity, Depends(require_token)],
    db: Annotated[Session, Depends(get_db)],
) -> DeductCoinsResponse:
    """Spend coins from the caller's balance. Fails without changes if the balance is too low."""
    try:
        new_balance = deduct_coins(db, identity.user_id, body.amount)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except (InsufficientCoinsError, InvalidAmountError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return DeductCoinsResponse(
        new_balance=new_balance,
        message=f"Deducted {body.amount} coins successfully",
    )
