"""Coin ledger: race-safe balance deductions."""

import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from coinhub.models.user import User
from coinhub.services.accounts import UserNotFoundError

logger = logging.getLogger(__name__)


class InsufficientCoinsError(Exception):
    """Raised when a deduction is larger than the current balance. Balance is unchanged."""

    def __init__(self, message: str = "Insufficient coins") -> None:
        self.message = message
        super().__init__(message)


class InvalidAmountError(Exception):
    """Raised when the amount is not a positive integer."""

    def __init__(self, message: str = "Amount must be a positive integer") -> None:
        self.message = message
        super().__init__(message)


def deduct_coins(db: Session, user_id: str, amount: int) -> int:
    """
    Subtract amount from the user's balance and return the new balance.

    The check and the subtraction are one conditional UPDATE, so concurrent
    deductions can never take the balance below zero. When no row matches, a
    second lookup tells a missing user (UserNotFoundError) from an insufficient
    balance (InsufficientCoinsError).
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidAmountError()

    stmt = (
        update(User)
        .where(User.user_id == user_id, User.coins >= amount)
        .values(coins=User.coins - amount)
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    if result.rowcount == 0:
        db.rollback()
        exists = db.execute(select(User.id).where(User.user_id == user_id)).first()
        if exists is None:
            raise UserNotFoundError()
        raise InsufficientCoinsError()

    new_balance = db.execute(
        select(User.coins).where(User.user_id == user_id)
    ).scalar_one()
    db.commit()
    logger.info(
        "Coins deducted: user_id=%s amount=%s new_balance=%s",
        user_id,
        amount,
        new_balance,
    )
    return new_balance
