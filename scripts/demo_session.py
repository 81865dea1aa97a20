"""
Scripted session: replay a fixed set of transactions and log the outcome.
"""
import sys
from loguru import logger

from src.domain import AssetKind
from src.account import TransactionalAccount

INITIAL_CASH = 100.00

# (operation, amount, kind)
SCRIPT = [
    ("deposit", 50.00, AssetKind.CASH),
    ("deposit", -10.00, AssetKind.CASH),
    ("deposit", 3, AssetKind.STOCK),
    ("deposit", 2.5, AssetKind.STOCK),
    ("withdraw", 30.00, AssetKind.CASH),
    ("withdraw", 2, AssetKind.STOCK),
    ("withdraw", 10, AssetKind.STOCK),
]


def main():
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    account = TransactionalAccount(INITIAL_CASH)
    logger.info(f"Initial balance: ${account.get_balance():.2f}")

    rejected = 0
    for operation, amount, kind in SCRIPT:
        result = getattr(account, operation)(amount, kind)
        if not result:
            rejected += 1

    logger.info(f"Current total balance: ${account.get_balance():.2f}")
    logger.info(f"{len(account.history)} accepted, {rejected} rejected")
    logger.info("Transaction history:\n" + account.get_history())


if __name__ == "__main__":
    main()
