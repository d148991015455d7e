"""
Trace runner for the hookwire analysis engine.

Responsibilities:

- Load a trace of engine events from YAML
- Fire each event against an AnalysisContext, in file order
- Record what every event produced
- Remain agnostic about what the registered callbacks do
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from exprgraph.parse import node_from_data, node_to_data
from hookwire.engine.context import AnalysisContext
from hookwire.engine.kinds import CallbackKind

logger = logging.getLogger(__name__)


class TraceRunner:
    """
    Replays a single event trace through an analysis context.
    """

    def __init__(self, trace_path: Path, context: AnalysisContext) -> None:
        self.trace_path = trace_path
        self.context = context
        self.trace: Dict[str, Any] = {}

    def load(self) -> None:
        """
        Load the trace YAML from disk and validate structure.
        """
        with self.trace_path.open("r", encoding="utf-8") as fh:
            self.trace = yaml.safe_load(fh)

        if not isinstance(self.trace, dict):
            raise ValueError("Trace file must be a YAML mapping (dict)")

        if "events" not in self.trace:
            raise ValueError("Trace is missing an 'events' section")

        if not isinstance(self.trace["events"], list):
            raise ValueError("'events' must be a list of events")

    def run(self) -> List[Dict[str, Any]]:
        """
        Fire every event of the trace and return one result record per event.
        """
        results: List[Dict[str, Any]] = []

        for index, entry in enumerate(self.trace.get("events", [])):
            if not isinstance(entry, dict):
                raise ValueError(f"Event {index} must be a mapping")

            kind = CallbackKind.coerce(entry.get("kind"))
            logger.debug("Firing event %d (%s)", index, kind.value)

            if kind is CallbackKind.MEMORY_HIT:
                record = self._memory_event(entry)
            else:
                record = self._simplification_event(entry)

            results.append({"index": index, "kind": kind.value, **record})

        return results

    def _memory_event(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        if "address" not in entry:
            raise ValueError("Memory event is missing 'address'")

        address = int(entry["address"])
        access = entry.get("access", "read")

        if access == "read":
            value = self.context.get_concrete_memory_value(address)
        elif access == "write":
            value = int(entry.get("value", 0))
            self.context.set_concrete_memory_value(address, value)
        else:
            raise ValueError(f"Unknown memory access: {access!r}")

        return {"access": access, "address": address, "value": value}

    def _simplification_event(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        if "expr" not in entry:
            raise ValueError("Simplification event is missing 'expr'")

        node = node_from_data(entry["expr"])
        result = self.context.simplify(node)

        return {
            "input": str(node),
            "output": str(result),
            "expr": node_to_data(result),
        }
