"""
Interactive session: open an account and run the menu until exit.
"""
import sys
from loguru import logger

from src.account import TransactionalAccount
from src.app import AccountMenu

INITIAL_CASH = 1000.00
LOG_LEVEL = "ERROR"  # Advisories are already printed by the menu


def main():
    logger.remove()
    logger.add(sys.stderr, level=LOG_LEVEL)

    account = TransactionalAccount(INITIAL_CASH)
    AccountMenu(account).run()


if __name__ == "__main__":
    main()
