"""
Domain records held by the in-memory bank.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class Action(str, Enum):
    WITHDRAW = "withdraw"
    DEPOSIT = "deposit"


@dataclass
class Transaction:
    transaction_id: int
    source_account_id: Optional[int]
    target_account_id: Optional[int]
    target_owner_name: Optional[str]
    amount: Decimal
    reference: str
    transaction_type: str
    initiation_date: datetime
    completion_date: Optional[datetime] = None


@dataclass
class Account:
    account_id: int
    sort_code: str
    account_number: str
    bank_name: str
    owner_name: str
    current_balance: Decimal = Decimal("0.00")
    transactions: List[Transaction] = field(default_factory=list)
