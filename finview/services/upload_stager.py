"""UploadStager: the batch of files selected for import but not yet submitted."""

from collections.abc import Iterable

from finview.core.formatting import readable_size
from finview.core.models import PendingUpload, SelectedFile
from finview.core.utils import get_logger

logger = get_logger("finview.stager")


class UploadStager:
    """Accumulates selected files in selection order.

    Files are never deduplicated and never validated; the accepted file type is advisory only.
    """

    def __init__(self) -> None:
        """Initialize an empty batch."""
        self._pending: list[PendingUpload] = []

    @property
    def pending(self) -> list[PendingUpload]:
        """Return a snapshot of the staged batch."""
        return list(self._pending)

    def __len__(self) -> int:
        """Return the number of staged files."""
        return len(self._pending)

    def stage(self, files: Iterable[SelectedFile]) -> list[PendingUpload]:
        """Append the selected files to the batch and return the new entries."""
        staged = [
            PendingUpload(
                file=selected.content,
                name=selected.name,
                readable_size=readable_size(len(selected.content)),
                content_type=selected.content_type,
            )
            for selected in files
        ]
        self._pending.extend(staged)
        logger.info(f"Staged {len(staged)} file(s), batch now holds {len(self._pending)}")
        return staged

    def discard(self, entries: Iterable[PendingUpload]) -> None:
        """Remove exactly the given entries, keeping anything staged after them."""
        ids = {id(entry) for entry in entries}
        self._pending = [entry for entry in self._pending if id(entry) not in ids]

    def clear(self) -> None:
        """Empty the batch unconditionally."""
        self._pending = []
        logger.info("Cleared staged batch")
