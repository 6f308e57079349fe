"""SortEngine: column toggle state and reordering of the transaction table.

Each column has a primary direction. Activating a column that is not currently reversed switches it to
its reversed direction; activating it again goes back to the primary one. Only the last applied column
is remembered. Sorting is stable, so records comparing equal keep their prior relative order.
"""

from collections.abc import Callable
from typing import Any

from finview.core.models import SortDirection, SortKey, SortState, TransactionView
from finview.core.utils import collation_key, get_logger

logger = get_logger("finview.sorting")

PRIMARY_DIRECTION: dict[SortKey, SortDirection] = {
    SortKey.TITLE: SortDirection.ASC,
    SortKey.VALUE: SortDirection.DESC,
    SortKey.CATEGORY: SortDirection.ASC,
    SortKey.DATE: SortDirection.ASC,
}

SORT_FIELDS: dict[SortKey, Callable[[TransactionView], Any]] = {
    SortKey.TITLE: lambda txn: collation_key(txn.title),
    SortKey.VALUE: lambda txn: txn.value,
    SortKey.CATEGORY: lambda txn: collation_key(txn.category.title),
    SortKey.DATE: lambda txn: txn.created_at,
}


def direction_for(state: SortState) -> SortDirection | None:
    """Return the effective direction of the active column, if any."""
    if state.key is None:
        return None
    primary = PRIMARY_DIRECTION[state.key]
    if not state.reversed:
        return primary
    return SortDirection.DESC if primary == SortDirection.ASC else SortDirection.ASC


class SortEngine:
    """Holds the table sort state and produces reordered copies of a list."""

    def __init__(self) -> None:
        """Initialize the engine with no active column."""
        self.state = SortState()

    def toggle(self, key: SortKey) -> SortState:
        """Flip the direction of ``key`` and make it the only active column."""
        reverse = not (self.state.key == key and self.state.reversed)
        self.state = SortState(key=key, reversed=reverse)
        return self.state

    def apply(self, key: SortKey, transactions: list[TransactionView]) -> list[TransactionView]:
        """Toggle ``key`` and return ``transactions`` reordered by it."""
        state = self.toggle(SortKey(key))
        direction = direction_for(state)
        logger.debug(f"Sorting {len(transactions)} transactions by {state.key} {direction}")
        return sorted(transactions, key=SORT_FIELDS[state.key], reverse=direction == SortDirection.DESC)

    def reset(self) -> None:
        """Forget the active column."""
        self.state = SortState()
