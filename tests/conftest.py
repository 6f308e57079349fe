"""Pytest fixtures shared by the finview tests."""

import pytest

from finview.core.settings import Settings

from .fake_backend import BASE_URL, FakeBackend


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the fake backend with the default locale."""
    return Settings(api_base_url=BASE_URL, display_timezone="UTC", _env_file=None)


@pytest.fixture
def backend() -> FakeBackend:
    """A fresh fake backend."""
    return FakeBackend()
