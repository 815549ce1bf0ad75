"""Each API module must import cleanly on its own, in any order."""

import importlib
import sys

import pytest

ENTRY_MODULES = [
    "api.dependencies.auth",
    "api.dependencies.database",
    "api.routes.health",
    "api.v1",
    "api.v1.dependencies",
    "api.v1.routes.profile",
]


@pytest.fixture
def fresh_api_modules(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forget every loaded ``api`` module; monkeypatch restores them afterwards."""
    for name in list(sys.modules):
        if name == "api" or name.startswith("api."):
            monkeypatch.delitem(sys.modules, name)


@pytest.mark.parametrize("module_name", ENTRY_MODULES)
def test_module_imports_first(fresh_api_modules: None, module_name: str) -> None:
    module = importlib.import_module(module_name)

    assert module.__name__ == module_name


def test_auth_dependency_imports_before_router(fresh_api_modules: None) -> None:
    auth = importlib.import_module("api.dependencies.auth")

    assert auth.CurrentUser is not None
    assert "api.v1" not in sys.modules
