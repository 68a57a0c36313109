"""
Pytest configuration for ruleguard tests.
"""

import pytest

from ruleguard.config import Config
from ruleguard.rules.diagnostics import render_diagnostic, set_default_channel

ENV_VARS = (
    "RULEGUARD_PROD",
    "RULEGUARD_MAX_DEPTH",
    "RULEGUARD_COLOR",
    "RULEGUARD_SHOW_ELAPSED",
    "LOG_LEVEL",
    "LOG_DIR",
)


class RecordingChannel:
    """Diagnostic channel that keeps every rendered diagnostic in memory."""

    def __init__(self):
        self.records: list[tuple[str, list]] = []

    def render(self, label, fragments):
        self.records.append((label, list(fragments)))
        return False

    @property
    def messages(self) -> list[str]:
        return [render_diagnostic(fragments) for _, fragments in self.records]

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.records]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Fresh Config singleton built from a clean environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture(autouse=True)
def channel():
    """Route default-channel output into a RecordingChannel."""
    recorder = RecordingChannel()
    set_default_channel(recorder)
    yield recorder
    set_default_channel(None)
