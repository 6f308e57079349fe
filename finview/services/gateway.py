"""RemoteTransactionGateway provides async HTTP access to the finance backend."""

import httpx
from pydantic import ValidationError

from finview.core.errors import FetchError, MalformedPayloadError, UploadError
from finview.core.models import PendingUpload, TransactionsResponse
from finview.core.settings import Settings, get_settings
from finview.core.utils import get_logger

logger = get_logger("finview.gateway")


class RemoteTransactionGateway:
    """Thin client for the transaction list and the file import endpoint."""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the gateway with settings and an optional httpx transport."""
        self.settings = settings or get_settings()
        self.transport = transport

    def client(self) -> httpx.AsyncClient:
        """Create an AsyncClient bound to the backend base URL."""
        return httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=self.transport,
        )

    async def fetch_transactions(self, client: httpx.AsyncClient | None = None) -> TransactionsResponse:
        """Fetch the raw transaction list and balance snapshot."""
        if client is None:
            async with self.client() as own_client:
                return await self.fetch_transactions(own_client)
        path = self.settings.transactions_path
        logger.info(f"Fetching transactions: GET {path}")
        try:
            response = await client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            msg = f"Could not fetch transactions: {exc}"
            raise FetchError(msg) from exc
        try:
            payload = TransactionsResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            msg = f"Unexpected transactions payload: {exc}"
            raise MalformedPayloadError(msg) from exc
        logger.info(f"Fetched {len(payload.transactions)} transactions")
        return payload

    async def import_file(self, upload: PendingUpload, client: httpx.AsyncClient | None = None) -> int:
        """Post one staged file to the import endpoint and return the HTTP status code."""
        if client is None:
            async with self.client() as own_client:
                return await self.import_file(upload, own_client)
        files = {self.settings.upload_field_name: (upload.name, upload.file, upload.content_type)}
        logger.info(f"Uploading {upload.name} ({upload.readable_size}): POST {self.settings.import_path}")
        try:
            response = await client.post(self.settings.import_path, files=files)
        except httpx.HTTPError as exc:
            raise UploadError(upload.name, str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise UploadError(upload.name, _error_detail(response), status_code=response.status_code)
        return response.status_code


def _error_detail(response: httpx.Response) -> str:
    """Extract a readable error message from a failed backend response."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict):
        detail = body.get("message") or body.get("error") or body.get("detail")
        if detail:
            return f"HTTP {response.status_code}: {detail}"
    return f"HTTP {response.status_code}"
