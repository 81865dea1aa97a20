"""
Transactional account - manages cash, ACME shares, and session history.
"""
from typing import List, Optional, Tuple
import pandas as pd

from ..domain.asset import AssetKind, TransactionAction, STOCK_PRICE, MAX_SHARE_UNITS
from ..domain.transaction import TransactionRecord
from ..domain.errors import (
    InsufficientFundsError,
    InsufficientSharesError,
    UnitOverflowError,
)
from .base import Account, opening_balance
from .validation import (
    require_positive,
    require_supported,
    require_finite_balance,
    to_cash_amount,
    to_share_units,
)


class TransactionalAccount(Account):
    """
    Account holding cash and ACME shares at a fixed price.
    Validates every transaction and records successful ones in order.
    """

    def __init__(self, initial_cash: float = 0.0):
        self._cash_balance = opening_balance(initial_cash)
        self._stock_shares = 0
        self._history: List[TransactionRecord] = []

    def __repr__(self) -> str:
        return (
            f"TransactionalAccount(cash={self._cash_balance:.2f}, "
            f"shares={self._stock_shares}, transactions={len(self._history)})"
        )

    @property
    def cash_balance(self) -> float:
        return self._cash_balance

    @property
    def stock_shares(self) -> int:
        return self._stock_shares

    @property
    def history(self) -> Tuple[TransactionRecord, ...]:
        return tuple(self._history)

    def _execute(
        self,
        action: TransactionAction,
        amount: float,
        kind: AssetKind
    ) -> Tuple[str, Optional[TransactionRecord]]:
        require_positive(amount, action)
        require_supported(kind)

        if kind is AssetKind.CASH:
            return self._move_cash(action, to_cash_amount(amount, action))
        return self._move_shares(action, to_share_units(amount, action))

    def _move_cash(self, action: TransactionAction, amount: float) -> Tuple[str, TransactionRecord]:
        if action is TransactionAction.WITHDRAWAL:
            if amount > self._cash_balance:
                raise InsufficientFundsError()
            self._cash_balance -= amount
            message = f"Cash withdrawn: ${amount:.2f}"
        else:
            self._cash_balance = require_finite_balance(self._cash_balance + amount)
            message = f"Cash deposited: ${amount:.2f}"

        return message, self._record(AssetKind.CASH, action, amount)

    def _move_shares(self, action: TransactionAction, units: int) -> Tuple[str, TransactionRecord]:
        if action is TransactionAction.WITHDRAWAL:
            if units > self._stock_shares:
                raise InsufficientSharesError()
            self._stock_shares -= units
            message = f"Stocks withdrawn: {units} shares."
        else:
            # Holding must stay within the unit range too
            if self._stock_shares + units > MAX_SHARE_UNITS:
                raise UnitOverflowError("Stock deposit exceeds allowed number of shares.")
            self._stock_shares += units
            message = f"Stocks deposited: {units}"

        return message, self._record(AssetKind.STOCK, action, units)

    def _record(self, kind: AssetKind, action: TransactionAction, amount) -> TransactionRecord:
        record = TransactionRecord(kind=kind, action=action, amount=amount)
        self._history.append(record)
        return record

    def get_balance(self) -> float:
        """Total balance = cash + shares * STOCK_PRICE."""
        return self._cash_balance + self._stock_shares * STOCK_PRICE

    def get_history(self) -> str:
        """Numbered list of all transactions for the session."""
        return "\n".join(
            f"{seq}. {record}" for seq, record in enumerate(self._history, start=1)
        )

    def get_history_frame(self) -> pd.DataFrame:
        """Get transaction history as DataFrame."""
        if not self._history:
            return pd.DataFrame()

        records = [
            {
                "seq": seq,
                "kind": t.kind.label,
                "action": t.action.label,
                "amount": t.amount,
                "value": t.value,
            }
            for seq, t in enumerate(self._history, start=1)
        ]
        return pd.DataFrame(records)
