"""
Transaction service backed by the in-memory bank.
"""

from decimal import Decimal

from bankflow.logging_config import get_logger
from bankflow.schemas import TransactionInput

from .models import Account, Action
from .store import InMemoryBank

logger = get_logger("bankflow.services.transactions")

CENTS = Decimal("0.01")


def _as_money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENTS)


class InMemoryTransactionService:
    """
    Balance mutations and transfers between in-memory accounts.
    """

    def __init__(self, bank: InMemoryBank):
        self.bank = bank

    def is_amount_available(self, amount: Decimal, current_balance: Decimal) -> bool:
        return _as_money(current_balance) >= _as_money(amount)

    def update_account_balance(self, account: Account, amount: Decimal, action: Action) -> None:
        amount = _as_money(amount)
        if action is Action.WITHDRAW:
            account.current_balance = _as_money(account.current_balance - amount)
            self.bank.add_transaction(amount, action.value, source=account)
        elif action is Action.DEPOSIT:
            account.current_balance = _as_money(account.current_balance + amount)
            self.bank.add_transaction(amount, action.value, target=account)
        else:
            raise ValueError(f"unsupported balance action: {action!r}")
        logger.info(
            "%s account_id=%s amount=%s balance_after=%s",
            action.value,
            account.account_id,
            amount,
            account.current_balance,
        )

    def make_transfer(self, transaction_input: TransactionInput) -> bool:
        """
        Move funds between two existing accounts. Returns False when either
        account is missing or the source cannot cover the amount.
        """
        src = transaction_input.source_account
        dst = transaction_input.target_account
        amount = _as_money(transaction_input.amount)

        source = self.bank.find(src.sort_code, src.account_number)
        target = self.bank.find(dst.sort_code, dst.account_number)
        if source is None or target is None:
            logger.warning(
                "Transfer failed - account not found from=%s to=%s",
                src.account_number,
                dst.account_number,
            )
            return False

        if not self.is_amount_available(amount, source.current_balance):
            logger.warning(
                "Transfer failed - insufficient funds from=%s balance=%s amount=%s",
                src.account_number,
                source.current_balance,
                amount,
            )
            return False

        source.current_balance = _as_money(source.current_balance - amount)
        target.current_balance = _as_money(target.current_balance + amount)
        tx = self.bank.add_transaction(
            amount, "transfer", source=source, target=target, reference=transaction_input.reference
        )
        logger.info(
            "Transfer success txn_ref=%s from=%s to=%s amount=%s",
            tx.reference,
            src.account_number,
            dst.account_number,
            amount,
        )
        return True
