from fastapi import Depends, Request

from bankflow.config import Settings
from bankflow.services.accounts import InMemoryAccountService
from bankflow.services.store import InMemoryBank
from bankflow.services.transactions import InMemoryTransactionService
from bankflow.workflow.accounts import AccountWorkflows
from bankflow.workflow.transactions import TransactionWorkflows


def settings_from_request(request: Request) -> Settings:
    return request.app.state.settings


def get_bank(request: Request) -> InMemoryBank:
    return request.app.state.bank


def get_account_workflows(
    bank: InMemoryBank = Depends(get_bank),
    settings: Settings = Depends(settings_from_request),
) -> AccountWorkflows:
    """
    Fresh evaluators per request; they hold no per-request state of their own.
    """
    return AccountWorkflows(InMemoryAccountService(bank), settings)


def get_transaction_workflows(
    bank: InMemoryBank = Depends(get_bank),
    settings: Settings = Depends(settings_from_request),
) -> TransactionWorkflows:
    return TransactionWorkflows(
        InMemoryAccountService(bank),
        InMemoryTransactionService(bank),
        settings,
    )
