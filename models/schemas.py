"""Data models for the users and companies input files and the derived results."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

# Exactly one "@", with a "." somewhere in the domain part
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
EMAIL_MIN_LENGTH = 6
EMAIL_MAX_LENGTH = 127


class UserRecord(BaseModel):
    """A single entry of the users file."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictInt
    first_name: StrictStr
    last_name: StrictStr
    email: StrictStr = Field(
        ..., min_length=EMAIL_MIN_LENGTH, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN
    )
    company_id: StrictInt
    email_status: StrictBool
    active_status: StrictBool
    tokens: StrictInt


class CompanyRecord(BaseModel):
    """A single entry of the companies file."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictInt
    name: StrictStr
    top_up: StrictInt
    email_status: StrictBool


class ProcessedUser(BaseModel):
    """An active user together with the balance after the company top-up."""
    model_config = ConfigDict(frozen=True)

    user: UserRecord
    new_balance: int

    @property
    def previous_balance(self) -> int:
        return self.user.tokens


class CompanyResult(BaseModel):
    """Top-up outcome for one company.

    Every processed user appears in exactly one of ``users_emailed`` and
    ``users_not_emailed``; ``total_top_ups`` is the company top-up multiplied
    by the number of processed users.
    """
    model_config = ConfigDict(frozen=True)

    company: CompanyRecord
    users_emailed: List[ProcessedUser] = Field(default_factory=list)
    users_not_emailed: List[ProcessedUser] = Field(default_factory=list)
    total_top_ups: int = 0

    @property
    def processed_count(self) -> int:
        return len(self.users_emailed) + len(self.users_not_emailed)

    def is_empty(self) -> bool:
        """Return True when the company had no active users."""
        return self.processed_count == 0
