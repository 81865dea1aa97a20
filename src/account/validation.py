"""
Validation rules shared by deposit and withdrawal.
"""
import math
from typing import Optional, Sequence

from ..domain.asset import AssetKind, TransactionAction, MAX_SHARE_UNITS
from ..domain.errors import (
    InvalidAmountError,
    UnsupportedAssetKindError,
    UnitOverflowError,
)


def require_positive(amount: float, action: TransactionAction) -> float:
    """Reject non-numeric, non-positive (and NaN or infinite) amounts."""
    if isinstance(amount, bool):
        raise InvalidAmountError(f"{action.label} amount must be a number.")
    try:
        positive = amount > 0  # False for NaN
    except TypeError:
        raise InvalidAmountError(f"{action.label} amount must be a number.") from None
    if not positive:
        raise InvalidAmountError(f"{action.label} amount must be positive.")
    if isinstance(amount, float) and math.isinf(amount):
        raise InvalidAmountError(f"{action.label} amount must be a finite number.")
    return amount


def to_cash_amount(amount: float, action: TransactionAction) -> float:
    """Convert a validated amount to a finite float."""
    try:
        value = float(amount)
    except (OverflowError, TypeError):
        raise InvalidAmountError(f"{action.label} amount must be a finite number.") from None
    if not math.isfinite(value):
        raise InvalidAmountError(f"{action.label} amount must be a finite number.")
    return value


def require_finite_balance(balance: float) -> float:
    """Reject a deposit whose resulting cash balance is not representable."""
    if not math.isfinite(balance):
        raise InvalidAmountError("Deposit exceeds the maximum cash balance.")
    return balance


def require_supported(
    kind: AssetKind,
    supported: Optional[Sequence[AssetKind]] = None,
    message: str = "Unsupported transaction type."
) -> AssetKind:
    """
    Reject kinds the account system does not handle, or that fall
    outside a variant's own subset.
    """
    if not AssetKind.is_supported(kind):
        raise UnsupportedAssetKindError(message)
    if supported is not None and kind not in supported:
        raise UnsupportedAssetKindError(message)
    return kind


def to_share_units(amount: float, action: TransactionAction) -> int:
    """
    Convert a stock amount to a whole unit count.

    Raises:
        InvalidAmountError: if the amount is fractional
        UnitOverflowError: if the count exceeds MAX_SHARE_UNITS
    """
    noun = action.label.lower()
    if amount % 1 != 0:
        raise InvalidAmountError(f"Stock {noun}s must be whole numbers.")

    units = int(amount)
    if units > MAX_SHARE_UNITS:
        raise UnitOverflowError(f"Stock {noun} exceeds allowed number of shares.")
    return units
