"""Test configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from exprgraph import op, var  # noqa: E402
from hookwire.engine.callbacks import Callbacks  # noqa: E402
from hookwire.engine.context import AnalysisContext  # noqa: E402


@pytest.fixture
def callbacks() -> Callbacks:
    """Empty registry backed by the in-process runtime."""
    return Callbacks()


@pytest.fixture
def context() -> AnalysisContext:
    """Fresh analysis context with no callbacks registered."""
    return AnalysisContext()


@pytest.fixture
def xor_self_node():
    """(bvxor x x) over 32-bit operands."""
    return op("bvxor", var("x", 32), var("x", 32))


@pytest.fixture
def call_log() -> list:
    """Shared list handlers append to, for asserting invocation order."""
    return []


@pytest.fixture
def mock_context(monkeypatch):
    """Mock AnalysisContext for CLI tests."""
    mock_ctx = Mock()
    mock_ctx.callbacks = Mock()
    monkeypatch.setattr("hookwire.cli.AnalysisContext", lambda: mock_ctx)
    return mock_ctx


@pytest.fixture
def mock_trace_runner(monkeypatch):
    """Mock TraceRunner with default configuration."""
    mock_runner = Mock()
    mock_runner.trace = {"id": "test_trace"}
    mock_runner.run.return_value = []
    monkeypatch.setattr(
        "hookwire.cli.TraceRunner", lambda trace_path, context: mock_runner
    )
    return mock_runner


@pytest.fixture
def sample_trace_yaml() -> str:
    """A small trace touching memory and simplifying one expression."""
    return """
id: sample
events:
  - kind: memory_hit
    access: write
    address: 0x2000
    value: 0x7f
  - kind: memory_hit
    address: 0x2000
  - kind: symbolic_simplification
    expr:
      op: bvxor
      args:
        - {var: x, size: 32}
        - {var: x, size: 32}
"""
