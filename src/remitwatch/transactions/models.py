"""Pydantic model for a single reported transaction."""

from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TransactionRecord(BaseModel):
    """One reported instance of a money transfer.

    Several records may share a ``transaction_id``: they are repeated reports of
    the same underlying transfer (for example, once per compliance issue raised
    against it). Field aliases match the camelCase keys of the source documents.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transaction_id: int = Field(
        ...,
        validation_alias=AliasChoices("transactionId", "mtn", "transaction_id"),
        serialization_alias="transactionId",
        description="Grouping key shared by reports of the same transfer (legacy key: mtn)",
    )
    amount: Decimal
    sender_full_name: str = Field(..., alias="senderFullName")
    sender_age: Optional[int] = Field(default=None, alias="senderAge")
    beneficiary_full_name: str = Field(..., alias="beneficiaryFullName")
    beneficiary_age: Optional[int] = Field(default=None, alias="beneficiaryAge")
    issue_id: Optional[int] = Field(default=None, alias="issueId")
    issue_solved: bool = Field(default=False, alias="issueSolved")
    issue_message: Optional[str] = Field(default=None, alias="issueMessage")

    @field_validator("issue_solved", mode="before")
    @classmethod
    def _null_issue_solved_is_false(cls, value):
        return False if value is None else value

    @property
    def has_issue(self) -> bool:
        return self.issue_id is not None

    @property
    def has_open_issue(self) -> bool:
        return self.has_issue and not self.issue_solved

    @property
    def has_solved_issue(self) -> bool:
        return self.has_issue and self.issue_solved

    def involves(self, full_name: str) -> bool:
        """True if ``full_name`` is the sender or the beneficiary."""
        return full_name in (self.sender_full_name, self.beneficiary_full_name)
