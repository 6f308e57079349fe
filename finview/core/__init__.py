"""Core package: provides models, errors, formatting, settings, and shared utilities."""

from .errors import FetchError, GatewayError, MalformedPayloadError, UploadError  # noqa: F401
from .models import PendingUpload, RawTransaction, SortKey, SortState, TransactionView  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
