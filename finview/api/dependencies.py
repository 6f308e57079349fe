"""FastAPI dependencies for DI (settings, gateway, user session).

This module provides dependency injection helpers for settings, the backend gateway and the view-models of
the single user session, enabling modular and testable API endpoints.
"""

from functools import lru_cache

from finview.core.settings import Settings, get_settings
from finview.services.gateway import RemoteTransactionGateway
from finview.viewmodels import DashboardViewModel, ImportViewModel


class UserSession:
    """View-models owned by the active user session."""

    def __init__(self, gateway: RemoteTransactionGateway, settings: Settings) -> None:
        """Create the dashboard and import view-models over a shared gateway."""
        self.dashboard = DashboardViewModel(gateway, settings)
        self.importer = ImportViewModel(gateway, settings)


@lru_cache(maxsize=1)
def get_session() -> UserSession:
    """Provide the process-wide user session."""
    settings = get_settings()
    return UserSession(RemoteTransactionGateway(settings), settings)
