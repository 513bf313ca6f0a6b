"""
Account service backed by the in-memory bank.
"""

from typing import Optional

from bankflow.logging_config import get_logger

from .models import Account
from .store import InMemoryBank

logger = get_logger("bankflow.services.accounts")


class InMemoryAccountService:
    def __init__(self, bank: InMemoryBank):
        self.bank = bank

    def get_account(self, sort_code: str, account_number: str) -> Optional[Account]:
        logger.info("Lookup sort_code=%s account_number=%s", sort_code, account_number)
        return self.bank.find(sort_code, account_number)

    def get_account_by_number(self, account_number: str) -> Optional[Account]:
        logger.info("Lookup account_number=%s", account_number)
        return self.bank.find_by_number(account_number)

    def create_account(self, bank_name: str, owner_name: str) -> Optional[Account]:
        sort_code, account_number = self.bank.generate_identifiers()
        account = self.bank.add_account(bank_name, owner_name, sort_code, account_number)
        logger.info(
            "Created account account_id=%s sort_code=%s account_number=%s",
            account.account_id,
            sort_code,
            account_number,
        )
        return account
