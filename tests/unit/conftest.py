import pytest

from cloudkeygen.constants import ENV


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep host environment variables from leaking into configuration under test."""
    for group in (ENV.App, ENV.AppConfig, ENV.Generator, ENV.Redis):
        for name in group:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'
