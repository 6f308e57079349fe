"""Concurrent submission of a staged upload batch with all-or-nothing commit."""

import asyncio
from typing import Protocol

import httpx

from finview.core.errors import UploadError
from finview.core.models import BatchResult, PendingUpload, UploadResult
from finview.core.settings import Settings, get_settings
from finview.core.utils import get_logger
from finview.services.gateway import RemoteTransactionGateway
from finview.services.upload_stager import UploadStager

logger = get_logger("finview.worker")


class Navigator(Protocol):
    """Collaborator that moves the user to another view."""

    def navigate(self, route: str) -> None:
        """Transition to ``route``."""


class BatchImportSubmitter:
    """Uploads every staged file concurrently and commits only when all succeed."""

    def __init__(self, gateway: RemoteTransactionGateway, settings: Settings | None = None) -> None:
        """Initialize the submitter with the backend gateway."""
        self.gateway = gateway
        self.settings = settings or get_settings()

    async def _upload_one(self, client: httpx.AsyncClient, upload: PendingUpload) -> UploadResult:
        try:
            status_code = await self.gateway.import_file(upload, client)
        except UploadError as exc:
            logger.exception(f"Import of {upload.name} failed")
            return UploadResult(name=upload.name, succeeded=False, status_code=exc.status_code, error=str(exc))
        return UploadResult(name=upload.name, succeeded=True, status_code=status_code)

    async def dispatch(self, batch: list[PendingUpload]) -> BatchResult:
        """Send one import request per file, all at once, and collect every outcome."""
        if not batch:
            return BatchResult()
        async with self.gateway.client() as client:
            results = await asyncio.gather(*(self._upload_one(client, upload) for upload in batch))
        return BatchResult(results=list(results))

    async def submit(self, stager: UploadStager, navigator: Navigator) -> BatchResult:
        """Submit the staged batch; clear it and navigate away only if every file was imported."""
        batch = stager.pending
        logger.info(f"Submitting batch of {len(batch)} file(s)")
        result = await self.dispatch(batch)
        if not result.succeeded:
            logger.error(
                f"Batch import failed for {len(result.failed)} of {len(batch)} file(s): {', '.join(result.failed)}"
            )
            return result
        stager.discard(batch)
        logger.info(f"Batch imported: {', '.join(result.imported) or 'no files'}")
        navigator.navigate(self.settings.success_route)
        return result
