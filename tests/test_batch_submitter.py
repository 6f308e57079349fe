"""Tests for concurrent batch submission and its all-or-nothing commit."""

import asyncio

import httpx

from finview.core.models import SelectedFile
from finview.core.settings import Settings
from finview.services.gateway import RemoteTransactionGateway
from finview.services.upload_stager import UploadStager
from finview.workers.batch_submitter import BatchImportSubmitter

from .fake_backend import FakeBackend


class RecordingNavigator:
    """Navigator that remembers every route it was sent to."""

    def __init__(self) -> None:
        """Start with no navigation."""
        self.routes: list[str] = []

    def navigate(self, route: str) -> None:
        """Record ``route``."""
        self.routes.append(route)


def _stager(*names: str) -> UploadStager:
    stager = UploadStager()
    stager.stage(SelectedFile(name=name, content=f"{name}\n".encode()) for name in names)
    return stager


def test_successful_batch_clears_and_navigates(settings: Settings, backend: FakeBackend) -> None:
    """When every file is imported the batch is cleared and the user is sent to the dashboard."""
    submitter = BatchImportSubmitter(RemoteTransactionGateway(settings, backend.transport()), settings)
    stager = _stager("a.csv", "b.csv", "c.csv")
    navigator = RecordingNavigator()
    result = asyncio.run(submitter.submit(stager, navigator))
    if not result.succeeded or sorted(backend.imported) != ["a.csv", "b.csv", "c.csv"]:
        msg = f"Expected all files imported, got {result}"
        raise AssertionError(msg)
    if stager.pending:
        msg = "Batch should be cleared after a successful submit"
        raise AssertionError(msg)
    if navigator.routes != [settings.success_route]:
        msg = f"Expected navigation to {settings.success_route}, got {navigator.routes}"
        raise AssertionError(msg)


def test_one_failure_fails_the_batch(settings: Settings, backend: FakeBackend) -> None:
    """With one of three uploads failing nothing is cleared and no navigation happens."""
    backend.failing_files = {"b.csv"}
    submitter = BatchImportSubmitter(RemoteTransactionGateway(settings, backend.transport()), settings)
    stager = _stager("a.csv", "b.csv", "c.csv")
    navigator = RecordingNavigator()
    result = asyncio.run(submitter.submit(stager, navigator))
    if result.succeeded:
        msg = "Batch with a failing file must not succeed"
        raise AssertionError(msg)
    if result.failed != ["b.csv"] or result.imported != ["a.csv", "c.csv"]:
        msg = f"Unexpected per-file outcome {result}"
        raise AssertionError(msg)
    if [entry.name for entry in stager.pending] != ["a.csv", "b.csv", "c.csv"]:
        msg = "Batch must stay staged after a failure"
        raise AssertionError(msg)
    if navigator.routes:
        msg = f"No navigation expected, got {navigator.routes}"
        raise AssertionError(msg)


def test_uploads_run_concurrently(settings: Settings, backend: FakeBackend) -> None:
    """All requests are in flight at the same time."""
    backend.upload_delay = 0.05
    submitter = BatchImportSubmitter(RemoteTransactionGateway(settings, backend.transport()), settings)
    stager = _stager("a.csv", "b.csv", "c.csv", "d.csv")
    asyncio.run(submitter.submit(stager, RecordingNavigator()))
    if backend.max_in_flight != 4:  # noqa: PLR2004
        msg = f"Expected 4 concurrent uploads, saw at most {backend.max_in_flight}"
        raise AssertionError(msg)


def test_results_follow_batch_order(settings: Settings, backend: FakeBackend) -> None:
    """Per-file results are reported in staging order whatever the completion order."""
    submitter = BatchImportSubmitter(RemoteTransactionGateway(settings, backend.transport()), settings)
    stager = _stager("z.csv", "m.csv", "a.csv")
    result = asyncio.run(submitter.dispatch(stager.pending))
    if [item.name for item in result.results] != ["z.csv", "m.csv", "a.csv"]:
        msg = f"Unexpected result order {result.results}"
        raise AssertionError(msg)


def test_unreachable_backend_fails_batch(settings: Settings) -> None:
    """Transport errors are reported as failed files."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = RemoteTransactionGateway(settings, httpx.MockTransport(refuse))
    stager = _stager("a.csv")
    navigator = RecordingNavigator()
    result = asyncio.run(BatchImportSubmitter(gateway, settings).submit(stager, navigator))
    if result.succeeded or result.results[0].error is None:
        msg = f"Expected a failed upload with an error, got {result}"
        raise AssertionError(msg)
    if navigator.routes or len(stager) != 1:
        msg = "Failed batch must not navigate or clear"
        raise AssertionError(msg)
