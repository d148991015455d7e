"""
hookwire: callback registry and dispatch engine for a symbolic analysis engine.

This package lets external code attach behaviour to two extension points:
- MEMORY_HIT, fired when a watched memory location is touched
- SYMBOLIC_SIMPLIFICATION, fired when an expression is about to be simplified

The engine provides:
- Callbacks (the registry and its dispatch entry points)
- AnalysisContext (the engine state that owns a registry)
- TraceRunner (replays YAML event traces)
"""

from hookwire.engine.callbacks import Callbacks
from hookwire.engine.context import AnalysisContext
from hookwire.engine.exceptions import (
    CallbackExecutionFailure,
    CallbacksError,
    InvalidKind,
    NullResultError,
    TypeMismatchError,
)
from hookwire.engine.kinds import CallbackKind, HandlerVariant
from hookwire.engine.trace_runner import TraceRunner
from hookwire.foreign.runtime import AstNodeRef, ForeignRuntime, InProcessRuntime
