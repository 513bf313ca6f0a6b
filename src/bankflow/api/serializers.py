from typing import Any, Dict

from bankflow.services.models import Account, Transaction

from .schemas import AccountOut, TransactionOut


def _money(value) -> float:
    return round(float(value), 2) if value is not None else 0.0


def serialize_transaction(t: Transaction) -> Dict[str, Any]:
    return {
        "transaction_id": t.transaction_id,
        "reference": t.reference,
        "transaction_type": t.transaction_type,
        "amount": _money(t.amount),
        "source_account_id": t.source_account_id,
        "target_account_id": t.target_account_id,
        "target_owner_name": t.target_owner_name,
        "initiation_date": t.initiation_date.isoformat() if t.initiation_date else None,
        "completion_date": t.completion_date.isoformat() if t.completion_date else None,
    }


def serialize_account(a: Account) -> Dict[str, Any]:
    return {
        "account_id": a.account_id,
        "sort_code": a.sort_code,
        "account_number": a.account_number,
        "bank_name": a.bank_name,
        "owner_name": a.owner_name,
        "current_balance": _money(a.current_balance),
        "transactions": [serialize_transaction(t) for t in a.transactions],
    }


def account_body(a: Account) -> Dict[str, Any]:
    """
    Account as a JSON-ready dict, checked against AccountOut.
    """
    return AccountOut.model_validate(serialize_account(a)).model_dump(mode="json")

