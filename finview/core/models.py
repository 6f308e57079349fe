"""Pydantic models for the finview client.

This module defines the raw payloads returned by the finance backend, the display-ready view records
produced from them, the sort state of the transaction table, and the upload batch records.
"""

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionType(StrEnum):
    """Direction of a transaction."""

    INCOME = "income"
    OUTCOME = "outcome"


class SortKey(StrEnum):
    """Columns the transaction table can be ordered by."""

    TITLE = "title"
    VALUE = "value"
    CATEGORY = "category"
    DATE = "date"


class SortDirection(StrEnum):
    """Effective ordering of a sorted column."""

    ASC = "asc"
    DESC = "desc"


class Category(BaseModel):
    """Category attached to a transaction by the backend."""

    title: str


class RawTransaction(BaseModel):
    """Pydantic model representing a transaction as returned by the backend."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    value: Decimal
    type: TransactionType
    category: Category
    created_at: str


class RawBalance(BaseModel):
    """Balance snapshot as returned by the backend (numbers or numeric strings)."""

    income: str
    outcome: str
    total: str

    @field_validator("income", "outcome", "total", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: object) -> object:
        if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
            return str(value)
        return value


class TransactionsResponse(BaseModel):
    """Body of ``GET /transactions``."""

    transactions: list[RawTransaction]
    balance: RawBalance


class TransactionView(BaseModel):
    """Display-ready transaction record."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    value: Decimal
    type: TransactionType
    category: Category
    created_at: str
    formatted_value: str
    formatted_date: str


class BalanceView(BaseModel):
    """Balance with every field currency-formatted."""

    income: str
    outcome: str
    total: str


class SortState(BaseModel):
    """Last applied sort key and whether it runs in its reversed direction."""

    model_config = ConfigDict(frozen=True)

    key: SortKey | None = None
    reversed: bool = False

    def as_flags(self) -> dict[str, bool]:
        """Return the per-column toggle flags shown on the table headers."""
        return {key.value: key == self.key and self.reversed for key in SortKey}


class PendingUpload(BaseModel):
    """A selected file waiting to be submitted for import."""

    model_config = ConfigDict(frozen=True)

    file: bytes = Field(exclude=True, repr=False)
    name: str
    readable_size: str
    content_type: str = "text/csv"


class SelectedFile(BaseModel):
    """A file picked by the user, before staging."""

    name: str
    content: bytes = Field(repr=False)
    content_type: str = "text/csv"


class UploadResult(BaseModel):
    """Outcome of a single file import request."""

    name: str
    succeeded: bool
    status_code: int | None = None
    error: str | None = None


class BatchResult(BaseModel):
    """Outcome of a whole batch submit."""

    results: list[UploadResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Whether every upload in the batch was accepted."""
        return all(result.succeeded for result in self.results)

    @property
    def failed(self) -> list[str]:
        """Names of the files whose import request failed."""
        return [result.name for result in self.results if not result.succeeded]

    @property
    def imported(self) -> list[str]:
        """Names of the files the backend accepted."""
        return [result.name for result in self.results if result.succeeded]


class DashboardPayload(BaseModel):
    """Dashboard view served to the front-end."""

    transactions: list[TransactionView]
    balance: BalanceView | None = None
    sort: dict[str, bool]
    sort_key: SortKey | None = None
    sort_direction: SortDirection | None = None
    empty_message: str | None = None
    error: str | None = None


class ImportPayload(BaseModel):
    """Import screen view served to the front-end."""

    files: list[PendingUpload]
    advisory: str
    error: str | None = None
