"""API integration tests for finview."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from finview.api.dependencies import UserSession, get_session
from finview.core.settings import Settings
from finview.services.gateway import RemoteTransactionGateway
from main import app

from .fake_backend import FakeBackend

HTTP_200_OK = 200
HTTP_422_UNPROCESSABLE_ENTITY = 422


@pytest.fixture
def client(settings: Settings, backend: FakeBackend) -> Iterator[TestClient]:
    """A test client whose session talks to the fake backend."""
    session = UserSession(RemoteTransactionGateway(settings, backend.transport()), settings)
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    """Test the /health endpoint returns status ok."""
    response = client.get("/health")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    if response.json() != {"status": "ok"}:
        msg = f"Expected response {{'status': 'ok'}}, got {response.json()}"
        raise AssertionError(msg)


def test_scalar_docs(client: TestClient) -> None:
    """Test the /scalar endpoint returns OpenAPI or Swagger docs."""
    response = client.get("/scalar")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    if not ("openapi" in response.text or "swagger" in response.text):
        msg = "Expected 'openapi' or 'swagger' in response text"
        raise AssertionError(msg)


def test_dashboard(client: TestClient) -> None:
    """The dashboard returns formatted transactions and balance."""
    response = client.get("/dashboard")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    body = response.json()
    values = [txn["formatted_value"] for txn in body["transactions"]]
    if values != ["R$ 4.000,00", "- R$ 1.200,50", "- R$ 500,00"]:
        msg = f"Unexpected formatted values {values}"
        raise AssertionError(msg)
    if body["balance"] != {"income": "R$ 4.000,00", "outcome": "R$ 1.700,50", "total": "R$ 2.299,50"}:
        msg = f"Unexpected balance {body['balance']}"
        raise AssertionError(msg)
    if any(body["sort"].values()) or body["empty_message"] is not None:
        msg = f"Unexpected initial state {body}"
        raise AssertionError(msg)


def test_dashboard_backend_down(client: TestClient, backend: FakeBackend) -> None:
    """A backend failure is reported in the payload, not as a crash."""
    backend.fetch_status = 500
    response = client.get("/dashboard")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    body = response.json()
    if not body["error"] or body["empty_message"] != "Nenhum registro encontrado!":
        msg = f"Expected an error and the empty message, got {body}"
        raise AssertionError(msg)


def test_sort_toggles(client: TestClient) -> None:
    """Sorting the same column twice flips its direction."""
    client.get("/dashboard")
    first = client.post("/dashboard/sort/title").json()
    second = client.post("/dashboard/sort/title").json()
    first_titles = [txn["title"] for txn in first["transactions"]]
    second_titles = [txn["title"] for txn in second["transactions"]]
    if first_titles != ["Salário", "Mercado", "aluguel"]:
        msg = f"Unexpected descending titles {first_titles}"
        raise AssertionError(msg)
    if second_titles != list(reversed(first_titles)):
        msg = f"Second sort should reverse the first, got {second_titles}"
        raise AssertionError(msg)
    if not first["sort"]["title"] or second["sort"]["title"]:
        msg = "Title flag should be set then cleared"
        raise AssertionError(msg)


def test_sort_unknown_key(client: TestClient) -> None:
    """Only the four table columns can be sorted."""
    response = client.post("/dashboard/sort/amount")
    if response.status_code != HTTP_422_UNPROCESSABLE_ENTITY:
        msg = f"Expected status {HTTP_422_UNPROCESSABLE_ENTITY}, got {response.status_code}"
        raise AssertionError(msg)
