import pytest

from exercisebook.bank import (
    OVERDRAFT_FEE,
    Bank,
    BankAccount,
    BankError,
    CheckingAccount,
    SavingsAccount,
    main,
)


def test_negative_initial_balance_is_clamped():
    account = BankAccount(1, "alice", -50.0)
    assert account.balance == 0.0


def test_credit_adds_to_balance_and_records_action():
    start, amount = 100.0, 25.5
    account = BankAccount(1, "alice", start)
    account.credit(amount)
    assert account.balance == start + amount
    assert account.actions[0].startswith("Deposited $")


def test_credit_negative_raises():
    account = BankAccount(1, "alice", 10.0)
    with pytest.raises(BankError):
        account.credit(-1.0)
    assert account.actions == []


def test_debit_insufficient_funds_leaves_balance():
    account = BankAccount(1, "alice", 10.0)
    with pytest.raises(BankError):
        account.debit(20.0)
    assert account.balance == 10.0


def test_debit_negative_raises():
    account = BankAccount(1, "alice", 10.0)
    with pytest.raises(BankError):
        account.debit(-5.0)


def test_checking_overdraft_charges_fee():
    start, amount = 10.0, 20.0
    account = CheckingAccount(1, "bob", start)
    message = account.debit(amount)
    assert account.balance == start - (amount + OVERDRAFT_FEE)
    assert message.startswith("Overdraft Fee: -$30.00.")


def test_checking_normal_debit():
    account = CheckingAccount(1, "bob", 50.0)
    account.debit(50.0)
    assert account.balance == 0.0
    assert account.actions[0].startswith("Withdrew $")


def test_savings_interest():
    start, rate = 200.0, 0.1
    account = SavingsAccount(1, "carol", start)
    account.apply_interest(rate)
    assert account.balance == start + start * rate
    assert "interest" in account.actions[-1]


def test_str_without_transactions():
    text = str(BankAccount(3, "dave", 5.0))
    assert "Account #3:" in text
    assert "No Recent Transactions" in text


def test_str_with_transactions():
    account = BankAccount(3, "dave", 5.0)
    account.credit(1.0)
    text = str(account)
    assert "Recent Transactions: " in text
    assert account.actions[0] in text


def test_bank_numbers_accounts_in_order():
    bank = Bank()
    first = bank.create_account("a", "password", 1.0, True)
    second = bank.create_account("b", "password", 1.0, False)
    assert [first.number, second.number] == [1, 2]
    assert isinstance(first, SavingsAccount)
    assert isinstance(second, CheckingAccount)


def test_duplicate_username_raises():
    bank = Bank()
    bank.create_account("a", "password", 1.0, True)
    with pytest.raises(BankError):
        bank.create_account("a", "password", 1.0, True)


def test_login_errors():
    bank = Bank()
    bank.create_account("a", "password", 1.0, True)
    with pytest.raises(BankError):
        bank.login("missing", "password")
    with pytest.raises(BankError):
        bank.login("a", "secret")


def test_operations_require_login():
    bank = Bank()
    bank.create_account("a", "password", 1.0, True)
    with pytest.raises(BankError):
        bank.credit(1.0)
    with pytest.raises(BankError):
        bank.describe_current()


def test_login_credit_logout():
    bank = Bank()
    bank.create_account("a", "password", 10.0, True)
    account = bank.login("a", "password")
    bank.credit(5.0)
    assert account.balance == 10.0 + 5.0
    assert bank.logout() == account.number
    with pytest.raises(BankError):
        bank.debit(1.0)


def test_interest_only_for_savings():
    bank = Bank(interest_rate=0.5)
    bank.create_account("c", "password", 100.0, False)
    bank.login("c", "password")
    with pytest.raises(BankError):
        bank.apply_interest()


def test_list_accounts():
    bank = Bank()
    assert bank.list_accounts() == "No Bank Accounts Created."
    bank.create_account("a", "password", 1.0, True)
    listing = bank.list_accounts()
    assert listing.startswith("Bank Accounts: ")
    assert "Username: a" in listing


def test_main_creates_account(monkeypatch, capsys):
    inputs = iter(["1", "alice", "100", "password", "S", "9"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Savings Bank Account #1 created." in out
    assert "Thank you for using SimpleBank!" in out