"""A small interactive bank with savings and checking accounts."""

from __future__ import annotations

OVERDRAFT_FEE = 30.0

MENU_OPTIONS = (
    "Create New Account",
    "Login",
    "Deposit Money",
    "Withdraw Money",
    "View Account Details",
    "Apply Interest to Savings",
    "List All Accounts",
    "Logout",
    "Exit",
)

_USERNAME_PROMPT = "Enter Username: "
_CODE_PROMPT = "Enter Password: "


class BankError(Exception):
    """Raised when a bank operation cannot be carried out."""


def _num(value: float) -> str:
    """Format a number the way a default output stream does."""
    return f"{value:g}"


class BankAccount:
    """An account holding a balance and a history of transactions."""

    def __init__(self, number: int, username: str, balance: float = 0.0) -> None:
        self.number = number
        self.username = username
        self.balance = max(balance, 0.0)
        self.actions: list[str] = []

    def credit(self, amount: float) -> str:
        """Deposit ``amount`` and return a confirmation message."""
        if amount < 0:
            raise BankError("Deposit amount cannot be negative.")
        self.balance += amount
        self.actions.append(f"Deposited ${amount:.6f}.")
        return f"${_num(amount)} deposited into account #{self.number}"

    def debit(self, amount: float) -> str:
        """Withdraw ``amount`` and return a confirmation message."""
        if amount < 0:
            raise BankError("Cannot withdraw negative amount.")
        if amount > self.balance:
            raise BankError("Insufficient funds in account.")
        self.balance -= amount
        self.actions.append(f"Withdrew ${amount:.6f}.")
        return f"${_num(amount)} withdrawn from account #{self.number}"

    def __str__(self) -> str:
        lines = [
            f"Account #{self.number}:",
            f"Username: {self.username}",
            f"Balance: {_num(self.balance)}",
        ]
        if not self.actions:
            lines.append("No Recent Transactions")
        else:
            lines.append("Recent Transactions: ")
            lines.extend(self.actions)
        return "\n".join(lines) + "\n"


class CheckingAccount(BankAccount):
    """An account that may be overdrawn for a fixed fee."""

    def debit(self, amount: float) -> str:
        if amount < 0 or amount <= self.balance:
            return super().debit(amount)
        total = amount + OVERDRAFT_FEE
        self.balance -= total
        return f"Overdraft Fee: -$30.00.  Charged ${_num(total)} in total."


class SavingsAccount(BankAccount):
    """An account that earns interest."""

    def apply_interest(self, rate: float) -> str:
        """Grow the balance by ``rate`` and return a confirmation message."""
        self.balance += self.balance * rate
        self.actions.append(f"Applied {rate:.6f} interest.")
        return f"Interest Applied To Savings Account #{self.number}"


class Bank:
    """A collection of accounts with password logins."""

    def __init__(self, interest_rate: float = 0.05) -> None:
        self.interest_rate = interest_rate
        self.accounts: list[BankAccount] = []
        self.current: BankAccount | None = None
        self._logins: dict[str, str] = {}

    def create_account(
        self, username: str, password: str, deposit: float, savings: bool
    ) -> BankAccount:
        """Open a new account and return it."""
        if username in self._logins:
            raise BankError(
                "Account with username already exists, please enter a new username."
            )
        kind = SavingsAccount if savings else CheckingAccount
        account = kind(len(self.accounts) + 1, username, deposit)
        self.accounts.append(account)
        self._logins[username] = password
        return account

    def login(self, username: str, password: str) -> BankAccount:
        """Make the account of ``username`` the current one."""
        if username not in self._logins:
            raise BankError(f"Bank Account with username {username} does not exist.")
        if self._logins[username] != password:
            raise BankError("Incorrect Password.  Please try again.")
        for account in self.accounts:
            if account.username == username:
                self.current = account
                return account
        raise BankError(f"Bank Account with username {username} does not exist.")

    def logout(self) -> int:
        """Log out and return the number of the account that was current (0 if none)."""
        number = self.current.number if self.current else 0
        self.current = None
        return number

    def _require_login(self, action: str) -> BankAccount:
        if self.current is None:
            raise BankError(f"Please log into account before {action}.")
        return self.current

    def credit(self, amount: float) -> str:
        return self._require_login("depositing amount").credit(amount)

    def debit(self, amount: float) -> str:
        return self._require_login("withdrawing amount").debit(amount)

    def apply_interest(self) -> str:
        account = self._require_login("applying interest")
        if not isinstance(account, SavingsAccount):
            raise BankError("Cannot apply interest to checking account.")
        return account.apply_interest(self.interest_rate)

    def describe_current(self) -> str:
        return str(self._require_login("displaying details"))

    def list_accounts(self) -> str:
        if not self.accounts:
            return "No Bank Accounts Created."
        return "Bank Accounts: \n" + "".join(str(account) for account in self.accounts)


def _read_amount(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt).strip())
        except ValueError:
            print("Invalid amount, please enter a valid amount.")


def _create(bank: Bank) -> None:
    while True:
        username = input(_USERNAME_PROMPT)
        if username not in bank._logins:
            break
        print("Account with username already exists, please enter a new username.")
    while True:
        try:
            deposit = float(input("Enter Initial Deposit: ").strip())
            break
        except ValueError:
            print("Invalid initial deposit, please enter a valid amount.")
    password = input(_CODE_PROMPT)
    while True:
        kind = input(
            "Enter 'S' for savings account and 'C' for checking account: "
        ).strip()
        if kind in ("S", "C"):
            break
        print("Please enter S or C to specify account type.")
    if deposit < 0:
        print("Initial balance cannot be negative, set to $0.00.")
    account = bank.create_account(username, password, deposit, kind == "S")
    label = "Savings" if kind == "S" else "Checking"
    print(f"{label} Bank Account #{account.number} created.")


def _login(bank: Bank) -> None:
    username = input(_USERNAME_PROMPT)
    password = input(_CODE_PROMPT)
    account = bank.login(username, password)
    print(f"Logged Into Account #{account.number}")


def main(argv=None) -> int:
    """Run the interactive bank menu."""
    bank = Bank()
    handlers = {
        "1": lambda: _create(bank),
        "2": lambda: _login(bank),
        "3": lambda: print(bank.credit(_read_amount("Enter Deposit Amount: "))),
        "4": lambda: print(bank.debit(_read_amount("Enter Amount to Withdraw: "))),
        "5": lambda: print(bank.describe_current(), end=""),
        "6": lambda: print(bank.apply_interest()),
        "7": lambda: print(bank.list_accounts()),
        "8": lambda: print(f"Logged Out of Account #{bank.logout()}"),
    }
    print("Welcome to SimpleBank!")
    while True:
        print()
        for index, label in enumerate(MENU_OPTIONS, start=1):
            print(f"{index}. {label}")
        try:
            choice = input("Enter Choice Number: ").strip()
        except EOFError:
            return 0
        if choice == "9":
            print("Thank you for using SimpleBank!")
            return 0
        handler = handlers.get(choice)
        if handler is None:
            print("Invalid choice number, please try again.")
            continue
        try:
            handler()
        except BankError as error:
            print(error)
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())