from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class TransactionOut(BaseModel):
    transaction_id: int
    reference: str
    transaction_type: str
    amount: float
    source_account_id: Optional[int] = None
    target_account_id: Optional[int] = None
    target_owner_name: Optional[str] = None
    initiation_date: Optional[datetime] = None
    completion_date: Optional[datetime] = None


class AccountOut(BaseModel):
    account_id: int
    sort_code: str
    account_number: str
    bank_name: str
    owner_name: str
    current_balance: float
    transactions: List[TransactionOut] = []
