"""
Simple in-memory bank: accounts and transactions kept in dicts.

No durability and no locking; a single process owns the data.
"""

import random
from datetime import datetime, timezone
from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional, Tuple

from bankflow.logging_config import get_logger

from .models import Account, Transaction

logger = get_logger("bankflow.services.store")

DEMO_ACCOUNTS = [
    {"bank_name": "Natwest", "owner_name": "Paul Smith", "sort_code": "53-68-92",
     "account_number": "73084635", "balance": Decimal("1071.78")},
    {"bank_name": "Barclays", "owner_name": "Jane Doe", "sort_code": "20-32-06",
     "account_number": "21956204", "balance": Decimal("2334.15")},
    {"bank_name": "Lloyds", "owner_name": "Mike Wilson", "sort_code": "30-96-26",
     "account_number": "44127309", "balance": Decimal("50.00")},
]


class InMemoryBank:
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._account_ids = count(1)
        self._transaction_ids = count(1)
        self.accounts: Dict[int, Account] = {}
        self.transactions: List[Transaction] = []

    def find(self, sort_code: str, account_number: str) -> Optional[Account]:
        for account in self.accounts.values():
            if account.sort_code == sort_code and account.account_number == account_number:
                return account
        return None

    def find_by_number(self, account_number: str) -> Optional[Account]:
        for account in self.accounts.values():
            if account.account_number == account_number:
                return account
        return None

    def add_account(
        self,
        bank_name: str,
        owner_name: str,
        sort_code: str,
        account_number: str,
        balance: Decimal = Decimal("0.00"),
    ) -> Account:
        account = Account(
            account_id=next(self._account_ids),
            sort_code=sort_code,
            account_number=account_number,
            bank_name=bank_name,
            owner_name=owner_name,
            current_balance=balance,
        )
        self.accounts[account.account_id] = account
        return account

    def generate_identifiers(self) -> Tuple[str, str]:
        """
        Random (sort_code, account_number) pair not used by any account yet.
        """
        while True:
            sort_code = "-".join(f"{self._rng.randint(0, 99):02d}" for _ in range(3))
            account_number = f"{self._rng.randint(0, 99_999_999):08d}"
            if self.find_by_number(account_number) is None:
                return sort_code, account_number

    def add_transaction(
        self,
        amount: Decimal,
        transaction_type: str,
        source: Optional[Account] = None,
        target: Optional[Account] = None,
        reference: Optional[str] = None,
    ) -> Transaction:
        now = datetime.now(timezone.utc)
        transaction_id = next(self._transaction_ids)
        tx = Transaction(
            transaction_id=transaction_id,
            source_account_id=source.account_id if source else None,
            target_account_id=target.account_id if target else None,
            target_owner_name=target.owner_name if target else None,
            amount=amount,
            reference=reference or f"TXN{transaction_id:08d}",
            transaction_type=transaction_type,
            initiation_date=now,
            completion_date=now,
        )
        self.transactions.append(tx)
        for account in (source, target):
            if account is not None:
                account.transactions.append(tx)
        return tx

    def seed_demo(self) -> int:
        """
        Idempotent seeding of demo accounts. Returns how many were created.
        """
        created = 0
        for demo in DEMO_ACCOUNTS:
            if self.find(demo["sort_code"], demo["account_number"]) is not None:
                continue
            self.add_account(
                demo["bank_name"],
                demo["owner_name"],
                demo["sort_code"],
                demo["account_number"],
                demo["balance"],
            )
            created += 1
        logger.info("Demo seed complete; created=%s accounts", created)
        return created
