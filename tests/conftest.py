"""
Pytest fixtures for the bankflow test suite.

Provides:
- Settings with default limits and messages
- An in-memory bank seeded with two known accounts
- Workflow evaluators wired to the in-memory services
- A TestClient over an app sharing the same bank
"""

from decimal import Decimal
from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from bankflow.app import create_app
from bankflow.config import Settings
from bankflow.services.accounts import InMemoryAccountService
from bankflow.services.models import Account, Action
from bankflow.services.store import InMemoryBank
from bankflow.services.transactions import InMemoryTransactionService
from bankflow.workflow.accounts import AccountWorkflows
from bankflow.workflow.transactions import TransactionWorkflows

ALICE = {"sort_code": "53-68-92", "account_number": "73084635"}
BOB = {"sort_code": "20-32-06", "account_number": "21956204"}


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def bank() -> InMemoryBank:
    bank = InMemoryBank()
    bank.add_account("Natwest", "Alice Johnson", ALICE["sort_code"], ALICE["account_number"], Decimal("50.00"))
    bank.add_account("Barclays", "Bob Smith", BOB["sort_code"], BOB["account_number"], Decimal("1000.00"))
    return bank


@pytest.fixture
def alice(bank) -> Account:
    return bank.find(ALICE["sort_code"], ALICE["account_number"])


@pytest.fixture
def bob(bank) -> Account:
    return bank.find(BOB["sort_code"], BOB["account_number"])


@pytest.fixture
def account_workflows(bank, settings) -> AccountWorkflows:
    return AccountWorkflows(InMemoryAccountService(bank), settings)


@pytest.fixture
def transaction_workflows(bank, settings) -> TransactionWorkflows:
    return TransactionWorkflows(InMemoryAccountService(bank), InMemoryTransactionService(bank), settings)


@pytest.fixture
def client(bank, settings) -> TestClient:
    return TestClient(create_app(settings, bank))


class StubAccountService:
    """
    Returns a fixed account (or None) and remembers every call.
    """

    def __init__(self, account: Optional[Account] = None):
        self.account = account
        self.calls: List[Tuple] = []

    def get_account(self, sort_code, account_number):
        self.calls.append(("get_account", sort_code, account_number))
        return self.account

    def get_account_by_number(self, account_number):
        self.calls.append(("get_account_by_number", account_number))
        return self.account

    def create_account(self, bank_name, owner_name):
        self.calls.append(("create_account", bank_name, owner_name))
        return self.account


class RecordingTransactionService(InMemoryTransactionService):
    """
    Real balance logic, plus a log of the mutations requested.
    """

    def __init__(self, bank: InMemoryBank):
        super().__init__(bank)
        self.updates: List[Tuple[Account, Decimal, Action]] = []
        self.transfers: List = []

    def update_account_balance(self, account, amount, action):
        self.updates.append((account, amount, action))
        super().update_account_balance(account, amount, action)

    def make_transfer(self, transaction_input):
        self.transfers.append(transaction_input)
        return super().make_transfer(transaction_input)


@pytest.fixture
def stub_account_service():
    """
    Factory: stub_account_service(account) -> StubAccountService.
    """
    return StubAccountService


@pytest.fixture
def recording_transactions(bank) -> RecordingTransactionService:
    return RecordingTransactionService(bank)
