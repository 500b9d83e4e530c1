import pytest

from sqlcraft.logging.filters import clear_request_context, set_logging_context
from sqlcraft.settings import get_settings
from sqlcraft.types.config import QueryBuilderConfig


@pytest.fixture
def default_config():
    """Engine config with every field at its default (select, mysql)."""
    return QueryBuilderConfig()


@pytest.fixture
def make_config():
    """Factory for configs that differ from the defaults in a few fields."""
    def _make(**overrides):
        return QueryBuilderConfig(**overrides)
    return _make


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep SQLCRAFT_* variables, .env files and logging context out of tests."""
    for name in (
        "SQLCRAFT_LOG_LEVEL",
        "SQLCRAFT_DEFAULT_QUERY_TYPE",
        "SQLCRAFT_DEFAULT_DATABASE",
        "SQLCRAFT_INDENT_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings(force_reload=True)
    yield
    set_logging_context(environment=None, extra=None)
    clear_request_context()
