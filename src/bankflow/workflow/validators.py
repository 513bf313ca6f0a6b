"""
Format validation for already-sanitized request fields.
"""

import re
from typing import Optional

SORT_CODE_PATTERN = re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{2}$")
ACCOUNT_NUMBER_PATTERN = re.compile(r"^[0-9]{8}$")
# letters, digits, spaces and . ' & - ; must start and end with a letter or digit
NAME_PATTERN = re.compile(r"^[^\W_](?:[\w .'&-]*[^\W_])?$")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """
    Trim surrounding whitespace; None stays None.
    """
    if value is None:
        return None
    return value.strip()


class InputValidator:
    """
    Validates identifier formats used by the account and transaction workflows
    """

    @staticmethod
    def is_sort_code_valid(sort_code: Optional[str]) -> bool:
        return sort_code is not None and bool(SORT_CODE_PATTERN.match(sort_code))

    @staticmethod
    def is_account_no_valid(account_number: Optional[str]) -> bool:
        return account_number is not None and bool(ACCOUNT_NUMBER_PATTERN.match(account_number))

    @classmethod
    def is_search_criteria_valid(cls, sort_code: Optional[str], account_number: Optional[str]) -> bool:
        return cls.is_sort_code_valid(sort_code) and cls.is_account_no_valid(account_number)

    @staticmethod
    def is_name_valid(name: Optional[str]) -> bool:
        return name is not None and bool(NAME_PATTERN.match(name))

    @classmethod
    def is_create_account_criteria_valid(cls, bank_name: Optional[str], owner_name: Optional[str]) -> bool:
        return cls.is_name_valid(bank_name) and cls.is_name_valid(owner_name)

    @classmethod
    def is_transaction_valid(
        cls,
        source_sort_code: Optional[str],
        source_account_number: Optional[str],
        target_sort_code: Optional[str],
        target_account_number: Optional[str],
    ) -> bool:
        if not cls.is_search_criteria_valid(source_sort_code, source_account_number):
            return False
        if not cls.is_search_criteria_valid(target_sort_code, target_account_number):
            return False
        # transfers to the same account are rejected as malformed
        return (source_sort_code, source_account_number) != (target_sort_code, target_account_number)


def is_account_verified(account) -> bool:
    """
    An account is verified when its owner name, sort code and account number
    are all populated.
    """
    if account is None:
        return False
    has_owner = not is_blank(account.owner_name)
    has_identifiers = not is_blank(account.sort_code) and not is_blank(account.account_number)
    return has_owner and has_identifiers
