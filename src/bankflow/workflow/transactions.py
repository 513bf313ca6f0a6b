"""
Transfer, withdrawal and deposit workflows.

All three share the same amount step: the raw amount is validated and
normalized once, the normalized value replaces the request amount, and only
then is any collaborator invoked.
"""

from enum import Enum
from http import HTTPStatus
from typing import Optional, TypeVar

from pydantic import BaseModel

from bankflow.config import Settings
from bankflow.logging_config import get_logger
from bankflow.schemas import DepositInput, TransactionInput, WithdrawInput
from bankflow.services.models import Action

from .amounts import AmountRejection, AmountValidationResult, AmountValidator
from .outcome import Outcome, OutcomeBuilder
from .ports import AccountService, TransactionService
from .validators import InputValidator

logger = get_logger("bankflow.workflow.transactions")

M = TypeVar("M", bound=BaseModel)


class TransactionDecision(Enum):
    PRE_VALIDATION = "pre_validation"
    VALIDATION_FAILED_GENERIC = "validation_failed_generic"
    AMOUNT_VALIDATION = "amount_validation"
    AMOUNT_SANITIZED = "amount_sanitized"
    AMOUNT_INVALID_FORMAT = "amount_invalid_format"
    AMOUNT_TOO_SMALL = "amount_too_small"
    AMOUNT_TOO_LARGE = "amount_too_large"
    TRANSFER_ATTEMPT = "transfer_attempt"
    TRANSFER_RETURNED = "transfer_returned"
    TRANSFER_FAILED = "transfer_failed"
    ACCOUNT_LOOKUP = "account_lookup"
    ACCOUNT_LOOKUP_RETURNED = "account_lookup_returned"
    RESULT_EMPTY = "result_empty"
    BALANCE_CHECK = "balance_check"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    BALANCE_UPDATE = "balance_update"
    RESULT_SUCCESS = "result_success"


_REJECTION_CHECKPOINTS = {
    AmountRejection.INVALID_NUMBER: TransactionDecision.AMOUNT_INVALID_FORMAT,
    AmountRejection.BELOW_MINIMUM: TransactionDecision.AMOUNT_TOO_SMALL,
    AmountRejection.ABOVE_MAXIMUM: TransactionDecision.AMOUNT_TOO_LARGE,
}


class TransactionWorkflows:
    """
    Evaluators for the transfer, withdraw and deposit endpoints.
    """

    def __init__(
        self,
        account_service: AccountService,
        transaction_service: TransactionService,
        settings: Optional[Settings] = None,
        amount_validator: Optional[AmountValidator] = None,
    ):
        self.account_service = account_service
        self.transaction_service = transaction_service
        self.settings = settings or Settings()
        self.messages = self.settings.messages
        self.amount_validator = amount_validator or AmountValidator(self.settings.amount_limits)

    def evaluate_transfer(self, transaction_input: TransactionInput) -> Outcome[bool, TransactionDecision]:
        builder: OutcomeBuilder[bool, TransactionDecision] = OutcomeBuilder.begin().record(
            TransactionDecision.PRE_VALIDATION
        )

        source = transaction_input.source_account
        target = transaction_input.target_account
        if not InputValidator.is_transaction_valid(
            source.sort_code, source.account_number, target.sort_code, target.account_number
        ):
            builder.record(TransactionDecision.VALIDATION_FAILED_GENERIC)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_transaction)

        checked = self._check_amount(transaction_input.amount, builder)
        if not checked.valid:
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self._amount_message(checked.reason))
        transaction_input = self._with_amount(transaction_input, checked)

        builder.record(TransactionDecision.TRANSFER_ATTEMPT)
        transferred = self.transaction_service.make_transfer(transaction_input)
        builder.record(TransactionDecision.TRANSFER_RETURNED)

        if not transferred:
            logger.warning(
                "Transfer rejected from=%s/%s to=%s/%s amount=%s",
                source.sort_code,
                source.account_number,
                target.sort_code,
                target.account_number,
                checked.normalized_amount,
            )
            builder.record(TransactionDecision.TRANSFER_FAILED)
            return builder.build_failure(HTTPStatus.UNPROCESSABLE_ENTITY, self.messages.invalid_transaction)

        builder.record(TransactionDecision.RESULT_SUCCESS)
        return builder.build_success(True, HTTPStatus.OK)

    def evaluate_withdrawal(self, withdraw_input: WithdrawInput) -> Outcome[str, TransactionDecision]:
        builder: OutcomeBuilder[str, TransactionDecision] = OutcomeBuilder.begin().record(
            TransactionDecision.PRE_VALIDATION
        )

        if not InputValidator.is_search_criteria_valid(withdraw_input.sort_code, withdraw_input.account_number):
            builder.record(TransactionDecision.VALIDATION_FAILED_GENERIC)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_search_criteria)

        checked = self._check_amount(withdraw_input.amount, builder)
        if not checked.valid:
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self._amount_message(checked.reason))
        withdraw_input = self._with_amount(withdraw_input, checked)
        amount = checked.normalized_amount

        builder.record(TransactionDecision.ACCOUNT_LOOKUP)
        account = self.account_service.get_account(withdraw_input.sort_code, withdraw_input.account_number)
        builder.record(TransactionDecision.ACCOUNT_LOOKUP_RETURNED)

        if account is None:
            builder.record(TransactionDecision.RESULT_EMPTY)
            return builder.build_empty(HTTPStatus.NOT_FOUND, self.messages.no_account_found)

        builder.record(TransactionDecision.BALANCE_CHECK)
        if not self.transaction_service.is_amount_available(amount, account.current_balance):
            logger.info(
                "Insufficient funds account_number=%s amount=%s",
                withdraw_input.account_number,
                amount,
            )
            builder.record(TransactionDecision.INSUFFICIENT_FUNDS)
            return builder.build_failure(
                HTTPStatus.UNPROCESSABLE_ENTITY, self.messages.insufficient_account_balance
            )

        builder.record(TransactionDecision.BALANCE_UPDATE)
        self.transaction_service.update_account_balance(account, amount, Action.WITHDRAW)

        builder.record(TransactionDecision.RESULT_SUCCESS)
        return builder.build_success(self.messages.success, HTTPStatus.OK)

    def evaluate_deposit(self, deposit_input: DepositInput) -> Outcome[str, TransactionDecision]:
        builder: OutcomeBuilder[str, TransactionDecision] = OutcomeBuilder.begin().record(
            TransactionDecision.PRE_VALIDATION
        )

        if not InputValidator.is_account_no_valid(deposit_input.target_account_no):
            builder.record(TransactionDecision.VALIDATION_FAILED_GENERIC)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_search_criteria)

        checked = self._check_amount(deposit_input.amount, builder)
        if not checked.valid:
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self._amount_message(checked.reason))
        deposit_input = self._with_amount(deposit_input, checked)
        amount = checked.normalized_amount

        builder.record(TransactionDecision.ACCOUNT_LOOKUP)
        account = self.account_service.get_account_by_number(deposit_input.target_account_no)
        builder.record(TransactionDecision.ACCOUNT_LOOKUP_RETURNED)

        if account is None:
            builder.record(TransactionDecision.RESULT_EMPTY)
            return builder.build_empty(HTTPStatus.NOT_FOUND, self.messages.no_account_found)

        builder.record(TransactionDecision.BALANCE_UPDATE)
        self.transaction_service.update_account_balance(account, amount, Action.DEPOSIT)

        builder.record(TransactionDecision.RESULT_SUCCESS)
        return builder.build_success(self.messages.success, HTTPStatus.OK)

    def _check_amount(
        self, amount: float, builder: OutcomeBuilder[object, TransactionDecision]
    ) -> AmountValidationResult:
        builder.record(TransactionDecision.AMOUNT_VALIDATION)
        result = self.amount_validator.validate(amount)
        if not result.valid:
            logger.info("Amount rejected amount=%r reason=%s", amount, result.reason.value)
            builder.record(_REJECTION_CHECKPOINTS[result.reason])
        elif result.sanitized:
            logger.debug("Amount sanitized %r -> %s", amount, result.normalized_amount)
            builder.record(TransactionDecision.AMOUNT_SANITIZED)
        return result

    def _amount_message(self, reason: AmountRejection) -> str:
        limits = self.settings.amount_limits
        if reason is AmountRejection.BELOW_MINIMUM:
            return self.messages.amount_too_small.format(minimum=limits.minimum)
        if reason is AmountRejection.ABOVE_MAXIMUM:
            return self.messages.amount_too_large.format(maximum=limits.maximum)
        return self.messages.amount_invalid_format

    @staticmethod
    def _with_amount(request: M, checked: AmountValidationResult) -> M:
        # model_copy skips validation, so the Decimal is kept as-is
        return request.model_copy(update={"amount": checked.normalized_amount})
