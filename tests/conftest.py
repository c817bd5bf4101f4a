import pytest


@pytest.fixture(autouse=True)
def _clear_ifacegen_env(monkeypatch):
    # Toolchain selection is read from the environment on every call.
    monkeypatch.delenv("IFACEGEN_GO", raising=False)
    monkeypatch.delenv("IFACEGEN_FORMATTER", raising=False)
    yield
