# hookwire/cli.py

from __future__ import annotations
import argparse
import importlib.util
import json
import logging
import signal
import sys
from pathlib import Path
from typing import Any, List

from hookwire.engine.context import AnalysisContext
from hookwire.engine.trace_runner import TraceRunner


def format_result(result: dict[str, Any]) -> str:
    if result["kind"] == "memory_hit":
        return (
            f"[{result['kind']}] {result['access']} {result['address']:#x} "
            f"-> {result['value']:#04x}"
        )
    return f"[{result['kind']}] {result['input']} -> {result['output']}"


def main(argv: list[str] | None = None) -> int | None:
    parser = argparse.ArgumentParser(
        prog="hookwire",
        description="Replay an engine event trace through registered callbacks",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "trace",
        type=Path,
        help="Path to the trace YAML file",
    )
    parser.add_argument(
        "--hooks",
        type=Path,
        default=None,
        help="Python module defining register(callbacks, runtime, trace_id); "
        "defaults to hooks.py next to the trace",
    )
    parser.add_argument(
        "--output",
        choices=["cli", "json"],
        default="cli",
        help="Output mode: 'cli' prints one line per event; 'json' dumps results to a JSON file",
    )
    parser.add_argument(
        "--json-file",
        type=Path,
        default=Path("trace_output.json"),
        help="Path to JSON output file if --output=json",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for engine diagnostics (written to stderr)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.trace.exists():
        print(f"Trace file not found: {args.trace}", file=sys.stderr)
        return 1

    context = AnalysisContext()
    runner = TraceRunner(trace_path=args.trace, context=context)

    try:
        runner.load()
    except Exception as exc:
        print(f"Failed to load trace: {exc}", file=sys.stderr)
        return 2

    # Explicit --hooks must exist; the default one is optional
    hooks_path = args.hooks or args.trace.parent / "hooks.py"
    if args.hooks is not None and not hooks_path.exists():
        print(f"Hooks file not found: {hooks_path}", file=sys.stderr)
        return 2

    if hooks_path.exists():
        spec = importlib.util.spec_from_file_location(
            f"{runner.trace.get('id', 'trace')}_hooks", hooks_path
        )
        if spec is None or spec.loader is None:
            print(f"Could not load hooks module from {hooks_path}", file=sys.stderr)
            return 2
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            print(f"Failed to load hooks: {exc}", file=sys.stderr)
            return 2
        if not hasattr(module, "register"):
            print(f"{hooks_path} does not define register()", file=sys.stderr)
            return 2
        try:
            module.register(
                callbacks=context.callbacks,
                runtime=context.callbacks.runtime,
                trace_id=runner.trace.get("id"),
            )
        except Exception as exc:
            print(f"Failed to register hooks: {exc}", file=sys.stderr)
            return 2

    try:
        results: List[dict[str, Any]] = runner.run()
    except Exception as exc:
        print(f"Trace failed: {exc}", file=sys.stderr)
        return 3

    if args.output == "cli":
        for result in results:
            print(format_result(result))
    else:
        try:
            args.json_file.parent.mkdir(parents=True, exist_ok=True)
            with args.json_file.open("w", encoding="utf-8") as f:
                json.dump(results, f, indent=2)
            print(f"Trace results dumped to {args.json_file}")
        except Exception as exc:
            print(f"Failed to write JSON file: {exc}", file=sys.stderr)
            return 4

    return 0


if __name__ == "__main__":

    signal.signal(signal.SIGPIPE, signal.SIG_DFL)  # Ignore broken pipe
    sys.exit(main())
