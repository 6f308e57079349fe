"""Dashboard view-model: displayed transactions, balance and column sorting."""

from finview.core.errors import GatewayError
from finview.core.models import BalanceView, DashboardPayload, SortKey, TransactionView
from finview.core.settings import Settings, get_settings
from finview.core.utils import get_logger
from finview.services.gateway import RemoteTransactionGateway
from finview.services.normalizer import normalize_balance, normalize_transactions
from finview.services.sorting import SortEngine, direction_for

logger = get_logger("finview.dashboard")

EMPTY_MESSAGE = "Nenhum registro encontrado!"


class DashboardViewModel:
    """Owns the transaction table state of the single user session."""

    def __init__(self, gateway: RemoteTransactionGateway, settings: Settings | None = None) -> None:
        """Initialize an empty dashboard."""
        self.gateway = gateway
        self.settings = settings or get_settings()
        self.sort_engine = SortEngine()
        self.transactions: list[TransactionView] = []
        self.balance: BalanceView | None = None
        self.last_error: str | None = None

    async def load(self) -> bool:
        """Fetch and normalize transactions and balance, replacing both at once.

        On any backend failure the previous state is kept and the error is stored in ``last_error``.
        """
        try:
            response = await self.gateway.fetch_transactions()
            transactions = normalize_transactions(response.transactions, self.settings)
            balance = normalize_balance(response.balance, self.settings)
        except GatewayError as exc:
            logger.exception("Failed to load transactions")
            self.last_error = str(exc)
            return False
        self.transactions = transactions
        self.balance = balance
        self.sort_engine.reset()
        self.last_error = None
        logger.info(f"Dashboard loaded with {len(transactions)} transactions")
        return True

    def apply_sort(self, key: SortKey) -> list[TransactionView]:
        """Reorder the current list by ``key``, toggling its direction."""
        self.transactions = self.sort_engine.apply(key, self.transactions)
        return self.transactions

    def payload(self) -> DashboardPayload:
        """Return the current dashboard state for rendering."""
        state = self.sort_engine.state
        return DashboardPayload(
            transactions=self.transactions,
            balance=self.balance,
            sort=state.as_flags(),
            sort_key=state.key,
            sort_direction=direction_for(state),
            empty_message=None if self.transactions else EMPTY_MESSAGE,
            error=self.last_error,
        )
