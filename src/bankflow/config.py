"""
Runtime configuration for bankflow.

Values come from the environment (optionally a .env file). The resulting
Settings object is handed to the evaluators explicitly.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class AmountLimits:
    minimum: Decimal = Decimal("0.01")
    maximum: Decimal = Decimal("1000000.00")


@dataclass(frozen=True)
class MessageCatalog:
    """
    Every user-facing message the API can return.
    """

    success: str = "Operation completed successfully"
    no_account_found: str = "Unable to find an account matching this sort code and account number"
    invalid_search_criteria: str = "The provided sort code or account number did not match the expected format"
    invalid_create_criteria: str = "Bank name and owner name are required"
    create_account_failed: str = "Error happened during creating new account"
    account_verification_failed: str = "Account record is incomplete and could not be verified"
    bank_name_too_short: str = "Bank name is too short"
    owner_name_too_short: str = "Owner name is too short"
    insufficient_account_balance: str = "Your account does not have sufficient balance"
    invalid_transaction: str = (
        "Account information is invalid or transaction has been denied for your protection. "
        "Please try again."
    )
    amount_invalid_format: str = "Transaction amount must be a finite number"
    # formatted with the configured AmountLimits
    amount_too_small: str = "Transaction amount must be at least {minimum}"
    amount_too_large: str = "Transaction amount must not exceed {maximum}"


@dataclass(frozen=True)
class Settings:
    amount_limits: AmountLimits = field(default_factory=AmountLimits)
    messages: MessageCatalog = field(default_factory=MessageCatalog)
    min_name_length: int = 3
    seed_demo_data: bool = False
    host: str = "0.0.0.0"
    port: int = 8000


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """
    Build Settings from environment variables, loading .env first if present.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)

    defaults = AmountLimits()
    limits = AmountLimits(
        minimum=Decimal(os.getenv("BANKFLOW_AMOUNT_MIN", str(defaults.minimum))),
        maximum=Decimal(os.getenv("BANKFLOW_AMOUNT_MAX", str(defaults.maximum))),
    )
    if limits.minimum > limits.maximum:
        raise RuntimeError(
            f"BANKFLOW_AMOUNT_MIN ({limits.minimum}) is greater than BANKFLOW_AMOUNT_MAX ({limits.maximum})"
        )

    return Settings(
        amount_limits=limits,
        min_name_length=int(os.getenv("BANKFLOW_MIN_NAME_LENGTH", "3")),
        seed_demo_data=_env_flag("BANKFLOW_SEED_DEMO"),
        host=os.getenv("BANKFLOW_HOST", "0.0.0.0"),
        port=int(os.getenv("BANKFLOW_PORT", "8000")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
