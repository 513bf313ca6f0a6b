"""
Account lookup and account creation workflows.

Each evaluator walks a fixed decision sequence and returns exactly one
Outcome whose trail records every checkpoint it passed.
"""

from enum import Enum
from http import HTTPStatus
from typing import Optional

from bankflow.config import Settings
from bankflow.logging_config import get_logger
from bankflow.schemas import AccountInput, CreateAccountInput
from bankflow.services.models import Account

from .outcome import Outcome, OutcomeBuilder
from .ports import AccountService
from .validators import InputValidator, is_account_verified, is_blank, sanitize_text

logger = get_logger("bankflow.workflow.accounts")


class AccountDecision(Enum):
    PRE_VALIDATION = "pre_validation"
    VALIDATION_FAILED_MISSING_FIELDS = "validation_failed_missing_fields"
    VALIDATION_FAILED_GENERIC = "validation_failed_generic"
    SORT_CODE_SANITIZED = "sort_code_sanitized"
    ACCOUNT_NUMBER_SANITIZED = "account_number_sanitized"
    BANK_NAME_SANITIZED = "bank_name_sanitized"
    OWNER_NAME_SANITIZED = "owner_name_sanitized"
    BANK_NAME_TOO_SHORT = "bank_name_too_short"
    OWNER_NAME_TOO_SHORT = "owner_name_too_short"
    ACCOUNT_LOOKUP = "account_lookup"
    ACCOUNT_LOOKUP_RETURNED = "account_lookup_returned"
    RESULT_EMPTY = "result_empty"
    CREATION_ATTEMPT = "creation_attempt"
    CREATION_RETURNED = "creation_returned"
    CREATION_FAILURE = "creation_failure"
    ACCOUNT_VERIFICATION_STARTED = "account_verification_started"
    ACCOUNT_VERIFICATION_FAILED = "account_verification_failed"
    ACCOUNT_VERIFICATION_PASSED = "account_verification_passed"
    RESULT_SUCCESS = "result_success"
    CREATION_SUCCESS = "creation_success"


AccountOutcome = Outcome[Account, AccountDecision]


def _sanitize_and_record(
    value: Optional[str], point: AccountDecision, builder: OutcomeBuilder
) -> Optional[str]:
    sanitized = sanitize_text(value)
    if sanitized is not None and sanitized != value:
        builder.record(point)
    return sanitized


class AccountWorkflows:
    """
    Evaluators for the account endpoints.
    """

    def __init__(self, account_service: AccountService, settings: Optional[Settings] = None):
        self.account_service = account_service
        self.settings = settings or Settings()
        self.messages = self.settings.messages

    def evaluate_lookup(self, account_input: AccountInput) -> AccountOutcome:
        builder: OutcomeBuilder[Account, AccountDecision] = OutcomeBuilder.begin().record(
            AccountDecision.PRE_VALIDATION
        )

        sort_code = _sanitize_and_record(
            account_input.sort_code, AccountDecision.SORT_CODE_SANITIZED, builder
        )
        account_number = _sanitize_and_record(
            account_input.account_number, AccountDecision.ACCOUNT_NUMBER_SANITIZED, builder
        )

        if is_blank(sort_code) or is_blank(account_number):
            builder.record(AccountDecision.VALIDATION_FAILED_MISSING_FIELDS)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_search_criteria)

        if not InputValidator.is_search_criteria_valid(sort_code, account_number):
            builder.record(AccountDecision.VALIDATION_FAILED_GENERIC)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_search_criteria)

        builder.record(AccountDecision.ACCOUNT_LOOKUP)
        account = self.account_service.get_account(sort_code, account_number)
        builder.record(AccountDecision.ACCOUNT_LOOKUP_RETURNED)

        if account is None:
            logger.info("No account for sort_code=%s account_number=%s", sort_code, account_number)
            builder.record(AccountDecision.RESULT_EMPTY)
            return builder.build_empty(HTTPStatus.NOT_FOUND, self.messages.no_account_found)

        failure = self._verify(account, builder)
        if failure is not None:
            return failure

        builder.record(AccountDecision.RESULT_SUCCESS)
        return builder.build_success(account, HTTPStatus.OK)

    def evaluate_creation(self, create_input: CreateAccountInput) -> AccountOutcome:
        builder: OutcomeBuilder[Account, AccountDecision] = OutcomeBuilder.begin().record(
            AccountDecision.PRE_VALIDATION
        )

        bank_name = _sanitize_and_record(
            create_input.bank_name, AccountDecision.BANK_NAME_SANITIZED, builder
        )
        owner_name = _sanitize_and_record(
            create_input.owner_name, AccountDecision.OWNER_NAME_SANITIZED, builder
        )

        if is_blank(bank_name) or is_blank(owner_name):
            builder.record(AccountDecision.VALIDATION_FAILED_MISSING_FIELDS)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_create_criteria)

        if not InputValidator.is_create_account_criteria_valid(bank_name, owner_name):
            builder.record(AccountDecision.VALIDATION_FAILED_GENERIC)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.invalid_create_criteria)

        min_length = self.settings.min_name_length
        if len(bank_name) < min_length:
            builder.record(AccountDecision.BANK_NAME_TOO_SHORT)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.bank_name_too_short)

        if len(owner_name) < min_length:
            builder.record(AccountDecision.OWNER_NAME_TOO_SHORT)
            return builder.build_invalid(HTTPStatus.BAD_REQUEST, self.messages.owner_name_too_short)

        builder.record(AccountDecision.CREATION_ATTEMPT)
        account = self.account_service.create_account(bank_name, owner_name)
        builder.record(AccountDecision.CREATION_RETURNED)

        if account is None:
            logger.warning("Account creation returned nothing bank_name=%s", bank_name)
            builder.record(AccountDecision.CREATION_FAILURE)
            return builder.build_empty(HTTPStatus.INTERNAL_SERVER_ERROR, self.messages.create_account_failed)

        failure = self._verify(account, builder)
        if failure is not None:
            return failure

        builder.record(AccountDecision.CREATION_SUCCESS)
        return builder.build_success(account, HTTPStatus.CREATED)

    def _verify(
        self, account: Account, builder: OutcomeBuilder[Account, AccountDecision]
    ) -> Optional[AccountOutcome]:
        builder.record(AccountDecision.ACCOUNT_VERIFICATION_STARTED)
        if not is_account_verified(account):
            logger.error(
                "Account failed verification account_id=%s",
                getattr(account, "account_id", None),
            )
            builder.record(AccountDecision.ACCOUNT_VERIFICATION_FAILED)
            return builder.build_failure(
                HTTPStatus.INTERNAL_SERVER_ERROR, self.messages.account_verification_failed
            )
        builder.record(AccountDecision.ACCOUNT_VERIFICATION_PASSED)
        return None
