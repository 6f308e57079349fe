"""Import view-model: staged files and batch submission."""

from collections.abc import Iterable

from finview.core.models import BatchResult, ImportPayload, PendingUpload, SelectedFile
from finview.core.settings import Settings, get_settings
from finview.services.gateway import RemoteTransactionGateway
from finview.services.upload_stager import UploadStager
from finview.workers.batch_submitter import BatchImportSubmitter, Navigator

ADVISORY = "Permitido apenas arquivos CSV"


class ImportViewModel:
    """Owns the pending upload batch of the single user session."""

    def __init__(self, gateway: RemoteTransactionGateway, settings: Settings | None = None) -> None:
        """Initialize an empty import screen."""
        self.settings = settings or get_settings()
        self.stager = UploadStager()
        self.submitter = BatchImportSubmitter(gateway, self.settings)
        self.last_result: BatchResult | None = None

    def select(self, files: Iterable[SelectedFile]) -> list[PendingUpload]:
        """Stage newly selected files behind the ones already pending."""
        return self.stager.stage(files)

    def clear(self) -> None:
        """Drop every staged file."""
        self.stager.clear()
        self.last_result = None

    async def submit(self, navigator: Navigator) -> BatchResult:
        """Submit the staged batch as a whole."""
        self.last_result = await self.submitter.submit(self.stager, navigator)
        return self.last_result

    def payload(self) -> ImportPayload:
        """Return the current import screen state for rendering."""
        error = None
        if self.last_result is not None and not self.last_result.succeeded:
            error = f"Falha ao importar: {', '.join(self.last_result.failed)}"
        return ImportPayload(files=self.stager.pending, advisory=ADVISORY, error=error)
