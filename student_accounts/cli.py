"""
Menu Interface Module

Text menu for viewing, crediting and debiting the account. Only parses
what the user types and prints what the ledger answers; every business
rule lives in the ledger.
"""

from typing import Callable, Optional
import sys

from .config import get_config
from .ledger import BalanceLedger
from .logging_config import setup_logging, get_logger
from .money import decimal_from_string


MENU_LINES = (
    "--------------------------------",
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    "--------------------------------",
)
CHOICE_PROMPT = "Enter your choice (1-4): "
INVALID_AMOUNT_MESSAGE = "Error: Invalid amount. Please enter a numeric value."
INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"

logger = get_logger(__name__)


class MenuInterface:
    """
    Interactive menu loop

    The menu is shown after every operation until the user picks 4 or
    input runs out.
    """

    def __init__(
        self,
        ledger: Optional[BalanceLedger] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.ledger = ledger if ledger is not None else BalanceLedger()
        self._input = input_func or input
        self._output = output_func or print
        self.running = True

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self._output(line)

    def prompt_amount(self, operation: str) -> str:
        return self._input(f"Enter {operation} amount: ").strip()

    def handle_choice(self, choice: str) -> None:
        """Dispatch one menu selection"""
        if choice == "1":
            self._output(self.ledger.view())
        elif choice == "2":
            self._process_amount("credit", self.ledger.credit)
        elif choice == "3":
            self._process_amount("debit", self.ledger.debit)
        elif choice == "4":
            self._output(GOODBYE_MESSAGE)
            self.running = False
        else:
            self._output(INVALID_CHOICE_MESSAGE)

    def _process_amount(self, operation: str, apply) -> None:
        text = self.prompt_amount(operation)
        try:
            amount = decimal_from_string(text)
        except ValueError:
            logger.debug("Unparseable %s amount %r", operation, text)
            self._output(INVALID_AMOUNT_MESSAGE)
            return

        result = apply(amount)
        self._output(result.message)

    def run(self) -> None:
        """Main program loop"""
        while self.running:
            self.display_menu()
            try:
                choice = self._input(CHOICE_PROMPT).strip()
                self.handle_choice(choice)
            except (EOFError, KeyboardInterrupt):
                self._output("")
                self._output(GOODBYE_MESSAGE)
                self.running = False


def main() -> int:
    """Console entry point"""
    cfg = get_config()
    setup_logging(cfg.log_level, log_format=cfg.log_format, log_file=cfg.log_file)

    try:
        ledger = BalanceLedger(cfg.initial_balance)
    except ValueError as e:
        logger.error("Invalid initial balance %r: %s", cfg.initial_balance, e)
        return 1

    MenuInterface(ledger).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
