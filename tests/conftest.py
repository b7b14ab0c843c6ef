"""Shared test fixtures for the logchannel test suite."""

import io

import pytest

from logchannel import gate as _gate_mod
from logchannel.channels import ENV_VAR


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def err_buf():
    """A second StringIO buffer, for the error sink."""
    return io.StringIO()


@pytest.fixture(autouse=True)
def _reset_default_gate(monkeypatch):
    """Start every test with no default gate and LOG_CHANNELS unset.

    The module-level default gate is created lazily from the environment,
    so a developer's own LOG_CHANNELS must not leak into tests.
    """
    monkeypatch.delenv(ENV_VAR, raising=False)
    old = _gate_mod._gate
    _gate_mod._gate = None
    yield
    _gate_mod._gate = old
