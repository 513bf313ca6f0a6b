from fastapi import APIRouter, Depends, Request

from bankflow.logging_config import get_logger
from bankflow.schemas import DepositInput, TransactionInput, WithdrawInput
from bankflow.workflow.outcome import log_outcome
from bankflow.workflow.transactions import TransactionWorkflows

from .deps import get_transaction_workflows
from .responses import outcome_response

logger = get_logger("bankflow.api.transactions")

router = APIRouter(tags=["transactions"])


@router.post("/transactions")
async def make_transfer(
    transaction_input: TransactionInput,
    request: Request,
    workflows: TransactionWorkflows = Depends(get_transaction_workflows),
):
    """
    Transfer funds between two accounts.
    """
    logger.debug("Transfer requested")
    messages = request.app.state.settings.messages
    outcome = workflows.evaluate_transfer(transaction_input)
    log_outcome(logger, outcome, "transaction transfer")
    return outcome_response(
        outcome,
        empty_message=messages.invalid_transaction,
        invalid_message=messages.invalid_transaction,
        failure_message=messages.invalid_transaction,
    )


@router.post("/withdraw")
async def withdraw(
    withdraw_input: WithdrawInput,
    request: Request,
    workflows: TransactionWorkflows = Depends(get_transaction_workflows),
):
    logger.debug("Withdrawal requested")
    messages = request.app.state.settings.messages
    outcome = workflows.evaluate_withdrawal(withdraw_input)
    log_outcome(logger, outcome, "withdrawal")
    return outcome_response(
        outcome,
        empty_message=messages.no_account_found,
        invalid_message=messages.invalid_search_criteria,
        failure_message=messages.insufficient_account_balance,
    )


@router.post("/deposit")
async def deposit(
    deposit_input: DepositInput,
    request: Request,
    workflows: TransactionWorkflows = Depends(get_transaction_workflows),
):
    logger.debug("Deposit requested")
    messages = request.app.state.settings.messages
    outcome = workflows.evaluate_deposit(deposit_input)
    log_outcome(logger, outcome, "deposit")
    return outcome_response(
        outcome,
        empty_message=messages.no_account_found,
        invalid_message=messages.invalid_search_criteria,
        failure_message=messages.invalid_search_criteria,
    )
