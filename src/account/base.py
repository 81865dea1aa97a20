"""
Abstract account base class and transaction outcome.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple
from loguru import logger

from ..domain.asset import AssetKind, TransactionAction
from ..domain.transaction import TransactionRecord
from ..domain.errors import AccountError


@dataclass(frozen=True)
class TransactionResult:
    """Outcome of a deposit or withdrawal."""
    success: bool
    message: str
    code: str = "OK"
    record: Optional[TransactionRecord] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def accepted(cls, message: str, record: Optional[TransactionRecord] = None) -> "TransactionResult":
        return cls(success=True, message=message, record=record)

    @classmethod
    def rejected(cls, error: AccountError) -> "TransactionResult":
        return cls(success=False, message=error.message, code=error.code)


def opening_balance(initial_cash: float) -> float:
    """Clamp a negative opening balance to zero, with a warning."""
    if initial_cash < 0:
        logger.warning("Initial balance cannot be negative.")
        return 0.0
    return float(initial_cash)


class Account(ABC):
    """
    Abstract base class for accounts.

    Subclasses implement _execute, which validates and applies a single
    transaction. Validation failures raise AccountError before any state
    is touched, so a rejected operation is a no-op.
    """

    def deposit(self, amount: float, kind: AssetKind) -> TransactionResult:
        """Add funds or shares to the account."""
        return self._run(TransactionAction.DEPOSIT, amount, kind)

    def withdraw(self, amount: float, kind: AssetKind) -> TransactionResult:
        """Remove funds or shares from the account."""
        return self._run(TransactionAction.WITHDRAWAL, amount, kind)

    def _run(self, action: TransactionAction, amount: float, kind: AssetKind) -> TransactionResult:
        try:
            message, record = self._execute(action, amount, kind)
        except AccountError as e:
            logger.warning(f"{action.label} rejected [{e.code}]: {e.message}")
            return TransactionResult.rejected(e)

        logger.info(message)
        return TransactionResult.accepted(message, record)

    @abstractmethod
    def _execute(
        self,
        action: TransactionAction,
        amount: float,
        kind: AssetKind
    ) -> Tuple[str, Optional[TransactionRecord]]:
        """
        Validate and apply one transaction.

        Returns:
            Success message and the record produced (None if the
            account does not keep history)

        Raises:
            AccountError: if the transaction is rejected
        """
        pass

    @abstractmethod
    def get_balance(self) -> float:
        """Total account value."""
        pass

    @abstractmethod
    def get_history(self) -> str:
        """Printable transaction history."""
        pass
