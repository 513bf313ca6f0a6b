from fastapi import APIRouter, Depends, Request

from bankflow.logging_config import get_logger
from bankflow.schemas import AccountInput, CreateAccountInput
from bankflow.workflow.accounts import AccountWorkflows
from bankflow.workflow.outcome import log_outcome

from .deps import get_account_workflows
from .responses import outcome_response
from .serializers import account_body

logger = get_logger("bankflow.api.accounts")

router = APIRouter(tags=["accounts"])


@router.post("/accounts")
async def check_account_balance(
    account_input: AccountInput,
    request: Request,
    workflows: AccountWorkflows = Depends(get_account_workflows),
):
    """
    Look up an account by sort code and account number.
    """
    logger.debug("Account lookup requested")
    messages = request.app.state.settings.messages
    outcome = workflows.evaluate_lookup(account_input)
    log_outcome(logger, outcome, "account lookup")
    return outcome_response(
        outcome,
        empty_message=messages.no_account_found,
        invalid_message=messages.invalid_search_criteria,
        failure_message=messages.no_account_found,
        render=account_body,
    )


@router.put("/accounts")
async def create_account(
    create_input: CreateAccountInput,
    request: Request,
    workflows: AccountWorkflows = Depends(get_account_workflows),
):
    """
    Open a new account for the given bank and owner.
    """
    logger.debug("Account creation requested")
    messages = request.app.state.settings.messages
    outcome = workflows.evaluate_creation(create_input)
    log_outcome(logger, outcome, "account creation")
    return outcome_response(
        outcome,
        empty_message=messages.create_account_failed,
        invalid_message=messages.invalid_create_criteria,
        failure_message=messages.create_account_failed,
        render=account_body,
    )
