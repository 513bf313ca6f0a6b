"""
Collaborator contracts consumed by the workflow evaluators.

Implementations are treated as atomic, synchronous black boxes.
"""

from decimal import Decimal
from typing import Optional, Protocol

from bankflow.schemas import TransactionInput
from bankflow.services.models import Account, Action


class AccountService(Protocol):
    def get_account(self, sort_code: str, account_number: str) -> Optional[Account]:
        ...

    def get_account_by_number(self, account_number: str) -> Optional[Account]:
        ...

    def create_account(self, bank_name: str, owner_name: str) -> Optional[Account]:
        ...


class TransactionService(Protocol):
    def is_amount_available(self, amount: Decimal, current_balance: Decimal) -> bool:
        ...

    def update_account_balance(self, account: Account, amount: Decimal, action: Action) -> None:
        ...

    def make_transfer(self, transaction_input: TransactionInput) -> bool:
        ...
