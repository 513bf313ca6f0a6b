"""
Request schemas for the bankflow API.

These only enforce structure (required fields, types). Amounts are strict
floats so booleans and numeric strings are rejected here. Format and
business checks happen in the workflow evaluators.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountInput(BaseModel):
    sort_code: str = Field(..., examples=["53-68-92"])
    account_number: str = Field(..., examples=["73084635"])


class CreateAccountInput(BaseModel):
    bank_name: str = Field(..., examples=["Natwest"])
    owner_name: str = Field(..., examples=["Paul Smith"])


class TransactionInput(BaseModel):
    source_account: AccountInput
    target_account: AccountInput
    amount: float = Field(..., strict=True, examples=[27.5])
    reference: Optional[str] = None


class WithdrawInput(BaseModel):
    sort_code: str = Field(..., examples=["53-68-92"])
    account_number: str = Field(..., examples=["73084635"])
    amount: float = Field(..., strict=True, examples=[50.0])


class DepositInput(BaseModel):
    target_account_no: str = Field(..., examples=["73084635"])
    amount: float = Field(..., strict=True, examples=[50.0])
