"""
Account errors raised during transaction validation.

These never leave an account: deposit and withdraw catch them and
report a rejected TransactionResult instead.
"""


class AccountError(Exception):
    """Base class for rejected account operations."""

    def __init__(self, message: str, code: str = "ACCOUNT_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidAmountError(AccountError):
    """Amount is non-positive, or fractional where whole units are required."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_AMOUNT")


class UnsupportedAssetKindError(AccountError):
    """Asset kind is not handled by the account."""

    def __init__(self, message: str = "Unsupported transaction type."):
        super().__init__(message, code="UNSUPPORTED_ASSET_KIND")


class InsufficientFundsError(AccountError):

    def __init__(self, message: str = "Insufficient funds."):
        super().__init__(message, code="INSUFFICIENT_FUNDS")


class InsufficientSharesError(AccountError):

    def __init__(self, message: str = "Insufficient shares."):
        super().__init__(message, code="INSUFFICIENT_SHARES")


class UnitOverflowError(AccountError):
    """Share count cannot be represented without exceeding the unit range."""

    def __init__(self, message: str):
        super().__init__(message, code="UNIT_OVERFLOW")
