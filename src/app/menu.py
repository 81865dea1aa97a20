"""
Menu-driven command line interface for a single account.
"""
from typing import Callable, Dict, Tuple

from ..domain.asset import AssetKind
from ..account.base import Account

MENU_TEXT = """
-- Acme Financial Menu --
1. Cash - Deposit
2. Cash - Withdraw
3. Stock - Deposit
4. Stock - Withdraw
5. Check Balance
6. Get History
7. Exit
Choose an option: """

EXIT_CHOICE = 7

# choice -> (prompt, operation name, asset kind)
TRANSACTION_CHOICES: Dict[int, Tuple[str, str, AssetKind]] = {
    1: ("Cash - Enter amount to deposit: ", "deposit", AssetKind.CASH),
    2: ("Cash - Enter amount to withdraw: ", "withdraw", AssetKind.CASH),
    3: ("Stock - Enter number of shares to deposit: ", "deposit", AssetKind.STOCK),
    4: ("Stock - Enter the number of shares to withdraw: ", "withdraw", AssetKind.STOCK),
}


class AccountMenu:
    """
    Text menu that routes user choices to an account.
    Input and output are injectable so sessions can be scripted.
    """

    def __init__(
        self,
        account: Account,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.account = account
        self._input = input_func
        self._output = output_func

    def run(self) -> None:
        """Loop until the user exits or input ends."""
        while True:
            try:
                raw = self._input(MENU_TEXT)
            except EOFError:
                break

            try:
                choice = int(raw.strip())
            except ValueError:
                self._output("Invalid input! Please enter a number from 1 to 7.")
                continue

            try:
                if not self.handle(choice):
                    break
            except EOFError:
                break

    def handle(self, choice: int) -> bool:
        """
        Perform one menu action.
        Returns: False when the session should end
        """
        if choice in TRANSACTION_CHOICES:
            prompt, operation, kind = TRANSACTION_CHOICES[choice]
            self._transact(prompt, operation, kind)
        elif choice == 5:
            self._output(f"Current Balance: ${self.account.get_balance():.2f}")
        elif choice == 6:
            self._output("Transaction History:\n" + self.account.get_history())
        elif choice == EXIT_CHOICE:
            self._output("Exiting the program...")
            return False
        else:
            self._output("Invalid choice! Please choose a valid option.")
        return True

    def _transact(self, prompt: str, operation: str, kind: AssetKind) -> None:
        raw = self._input(prompt)
        try:
            amount = float(raw.strip())
        except ValueError:
            self._output("Invalid amount! Please enter a numeric value.")
            return

        result = getattr(self.account, operation)(amount, kind)
        self._output(result.message)
