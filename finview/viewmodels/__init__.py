"""View-models package: per-session state for the dashboard and import screens."""

from .dashboard import DashboardViewModel  # noqa: F401
from .importer import ImportViewModel  # noqa: F401
