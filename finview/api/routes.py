"""FastAPI endpoints for the finview client.

This module exposes the dashboard and import view-models: loading and sorting the transaction table,
staging files for import and submitting the staged batch.
"""

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse

from finview.api.dependencies import UserSession, get_session
from finview.core.models import DashboardPayload, ImportPayload, SelectedFile, SortKey
from finview.core.utils import get_logger

router = APIRouter()
logger = get_logger("finview.api")


class RouteNavigator:
    """Records the route the client should move to after a request."""

    def __init__(self) -> None:
        """Initialize with no pending navigation."""
        self.target: str | None = None

    def navigate(self, route: str) -> None:
        """Remember ``route`` as the navigation target."""
        self.target = route


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get(
    "/dashboard",
    response_model=DashboardPayload,
    summary="Load the transaction dashboard",
    description=(
        "Fetch transactions and balance from the backend, format them for display and return the dashboard. "
        "If the backend fails the previous dashboard is returned with `error` set."
    ),
)
async def get_dashboard(session: UserSession = Depends(get_session)) -> DashboardPayload:
    """Enter the dashboard view, loading fresh data."""
    await session.dashboard.load()
    return session.dashboard.payload()


@router.post(
    "/dashboard/sort/{key}",
    response_model=DashboardPayload,
    summary="Sort the transaction table",
    description=(
        "Toggle the direction of the given column (`title`, `value`, `category` or `date`) "
        "and reorder the current list without fetching again."
    ),
)
async def sort_dashboard(key: SortKey, session: UserSession = Depends(get_session)) -> DashboardPayload:
    """Reorder the displayed transactions by one column."""
    session.dashboard.apply_sort(key)
    return session.dashboard.payload()


@router.get("/import", response_model=ImportPayload, summary="Show the staged import batch")
async def get_import(session: UserSession = Depends(get_session)) -> ImportPayload:
    """Return the staged files."""
    return session.importer.payload()


@router.post(
    "/import/files",
    response_model=ImportPayload,
    summary="Stage files for import",
    description=(
        "Add one or more files to the pending batch. Files are appended to anything already staged.\n\n"
        "**Request:**\n"
        "- Content-Type: multipart/form-data\n"
        "- Form field: `files` (repeated)"
    ),
)
async def stage_files(
    files: list[UploadFile] = File(...),
    session: UserSession = Depends(get_session),
) -> ImportPayload:
    """Stage the uploaded files."""
    selected = [
        SelectedFile(
            name=upload.filename or "arquivo",
            content=await upload.read(),
            content_type=upload.content_type or "application/octet-stream",
        )
        for upload in files
    ]
    logger.info(f"Received {len(selected)} file(s) to stage")
    session.importer.select(selected)
    return session.importer.payload()


@router.delete("/import/files", response_model=ImportPayload, summary="Clear the staged batch")
async def clear_files(session: UserSession = Depends(get_session)) -> ImportPayload:
    """Drop every staged file."""
    session.importer.clear()
    return session.importer.payload()


@router.post(
    "/import/submit",
    summary="Submit the staged batch",
    description=(
        "Upload every staged file to the backend concurrently.\n\n"
        "**Response:**\n"
        "- 200 OK: every file was imported; the batch is cleared and `navigate_to` names the next view.\n"
        "- 502 Bad Gateway: at least one file failed; nothing is cleared and `failed` lists the files."
    ),
    responses={
        200: {
            "description": "Batch imported.",
            "content": {"application/json": {"example": {"status": "imported", "navigate_to": "/dashboard"}}},
        },
        502: {
            "description": "Batch failed.",
            "content": {"application/json": {"example": {"status": "failed", "failed": ["march.csv"]}}},
        },
    },
)
async def submit_batch(session: UserSession = Depends(get_session)) -> JSONResponse:
    """Submit the staged batch and tell the client where to go next."""
    navigator = RouteNavigator()
    result = await session.importer.submit(navigator)
    results = [item.model_dump() for item in result.results]
    if not result.succeeded:
        return JSONResponse(
            {"status": "failed", "failed": result.failed, "imported": result.imported, "results": results},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    return JSONResponse({"status": "imported", "navigate_to": navigator.target, "results": results})
