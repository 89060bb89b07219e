"""Shared fixtures for routetree tests."""

import pytest

import routetree.methods
import routetree.router


@pytest.fixture(autouse=True)
def _reset_process_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from the process-wide default method and router."""
    monkeypatch.setattr(routetree.methods, "_default_method", "get")
    monkeypatch.setattr(routetree.router, "_default_router", None)


def _handler() -> str:
    return "ok"


def _require_login() -> str:
    return "login"


def _audit() -> str:
    return "audit"


@pytest.fixture
def namespace() -> dict[str, object]:
    return {
        "index": _handler,
        "test": _handler,
        "name": _handler,
        "common": {"require_login": _require_login, "audit": _audit},
        "social": {"index": _handler, "find": _handler, "edit_profile": _handler},
        "almanac": {
            "index": _handler,
            "questions": {"index": _handler, "edit": _handler},
        },
    }
