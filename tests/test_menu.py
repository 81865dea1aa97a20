"""
Tests for the menu interface.
"""
import pytest

from src.account.basic import BasicAccount
from src.account.transactional import TransactionalAccount
from src.app.menu import AccountMenu


def scripted_menu(account, answers):
    """Build a menu fed from a list of answers, collecting output lines."""
    answers = iter(answers)
    output = []

    def fake_input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    menu = AccountMenu(account, input_func=fake_input, output_func=output.append)
    return menu, output


class TestAccountMenu:
    """Tests for AccountMenu."""

    @pytest.fixture
    def sample_account(self):
        return TransactionalAccount(1000.0)

    def test_cash_and_stock_session(self, sample_account):
        menu, output = scripted_menu(
            sample_account,
            ["1", "50", "3", "4", "2", "20", "4", "1", "5", "7"],
        )
        menu.run()

        assert sample_account.cash_balance == 1030.0
        assert sample_account.stock_shares == 3
        assert "Current Balance: $1045.00" in output
        assert output[-1] == "Exiting the program..."

    def test_history_output(self, sample_account):
        menu, output = scripted_menu(sample_account, ["1", "25", "6", "7"])
        menu.run()
        assert "Transaction History:\n1. Cash - Deposit - $25.00" in output

    def test_invalid_menu_input(self, sample_account):
        menu, output = scripted_menu(sample_account, ["abc", "9", "7"])
        menu.run()
        assert "Invalid input! Please enter a number from 1 to 7." in output
        assert "Invalid choice! Please choose a valid option." in output

    def test_invalid_amount_does_not_crash(self, sample_account):
        menu, output = scripted_menu(sample_account, ["1", "ten", "5", "7"])
        menu.run()
        assert "Invalid amount! Please enter a numeric value." in output
        assert sample_account.history == ()
        assert "Current Balance: $1000.00" in output

    def test_rejection_message_shown(self, sample_account):
        menu, output = scripted_menu(sample_account, ["3", "2.5", "7"])
        menu.run()
        assert "Stock deposits must be whole numbers." in output

    def test_end_of_input_exits(self, sample_account):
        menu, output = scripted_menu(sample_account, ["5"])
        menu.run()
        assert output == ["Current Balance: $1000.00"]

    def test_end_of_input_at_amount_prompt(self, sample_account):
        menu, output = scripted_menu(sample_account, ["1"])
        menu.run()
        assert output == []

    def test_handle_returns_false_on_exit(self, sample_account):
        menu, _ = scripted_menu(sample_account, [])
        assert menu.handle(5) is True
        assert menu.handle(7) is False

    def test_basic_account(self):
        account = BasicAccount(10.0)
        menu, output = scripted_menu(account, ["3", "1", "6", "7"])
        menu.run()
        assert "Only cash deposits are supported." in output
        assert "Transaction History:\nTransactional history not available." in output
        assert account.get_balance() == 10.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
