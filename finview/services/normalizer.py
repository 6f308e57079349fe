"""TransactionNormalizer: turns backend payloads into display-ready records."""

from decimal import Decimal, InvalidOperation

from finview.core.errors import MalformedPayloadError
from finview.core.formatting import format_currency, format_local_date
from finview.core.models import BalanceView, RawBalance, RawTransaction, TransactionType, TransactionView
from finview.core.settings import Settings, get_settings

OUTCOME_PREFIX = "- "


def normalize_transaction(raw: RawTransaction, settings: Settings | None = None) -> TransactionView:
    """Build the view record for one transaction, prefixing outgoing amounts with ``- ``."""
    settings = settings or get_settings()
    formatted_value = format_currency(abs(raw.value), settings)
    if raw.type == TransactionType.OUTCOME:
        formatted_value = f"{OUTCOME_PREFIX}{formatted_value}"
    try:
        formatted_date = format_local_date(raw.created_at, settings)
    except ValueError as exc:
        msg = f"Transaction {raw.id} has an invalid created_at: {raw.created_at!r}"
        raise MalformedPayloadError(msg) from exc
    return TransactionView(
        **raw.model_dump(),
        formatted_value=formatted_value,
        formatted_date=formatted_date,
    )


def normalize_transactions(raws: list[RawTransaction], settings: Settings | None = None) -> list[TransactionView]:
    """Normalize a whole transaction list, keeping the backend order."""
    settings = settings or get_settings()
    return [normalize_transaction(raw, settings) for raw in raws]


def normalize_balance(raw: RawBalance, settings: Settings | None = None) -> BalanceView:
    """Parse and currency-format each balance field independently."""
    settings = settings or get_settings()
    formatted = {}
    for field in ("income", "outcome", "total"):
        value = getattr(raw, field)
        try:
            formatted[field] = format_currency(Decimal(value), settings)
        except InvalidOperation as exc:
            msg = f"Balance field '{field}' is not numeric: {value!r}"
            raise MalformedPayloadError(msg) from exc
    return BalanceView(**formatted)
