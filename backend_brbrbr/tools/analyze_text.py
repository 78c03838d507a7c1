#!/usr/bin/env python3
"""
Analyze a text file (or stdin) and print the result as JSON.

Uses the same engine as POST /api/analyze: hosted classifier when
HF_API_TOKEN is set, local heuristics otherwise or on failure.

Usage:
  python -m backend_brbrbr.tools.analyze_text essay.txt
  cat essay.txt | python -m backend_brbrbr.tools.analyze_text --no-remote --signals

Exit codes: 0 ok, 1 unreadable file, 2 text too large.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from backend_brbrbr.analysis_engine import analyze, create_engine_context
from backend_brbrbr.brbrbr_logging import get_logger
from backend_brbrbr.config import get_settings
from backend_brbrbr.core.exceptions import InputTooLarge

logger = get_logger(__name__)


def _read_text(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run(path: str | None, *, use_remote: bool = True, show_signals: bool = False) -> int:
    """Analyze one input and print JSON to stdout. Returns the process exit code."""
    try:
        text = _read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("analyze_text_read_failed", path=path, error=str(e))
        print(f"[analyze_text] ERROR: cannot read {path}: {e}", file=sys.stderr)
        return 1

    settings = get_settings()
    if not use_remote:
        settings = replace(settings, classifier_enabled=False)
    context = create_engine_context(settings)
    try:
        result = analyze(text, context)
    except InputTooLarge as e:
        print(f"[analyze_text] ERROR: {e}", file=sys.stderr)
        return 2
    finally:
        context.close()

    payload = result.to_debug_dict() if show_signals else result.to_dict()
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Classify text as human-written or AI-generated.")
    parser.add_argument("path", nargs="?", default=None, help="Text file to analyze (default: stdin)")
    parser.add_argument("--no-remote", action="store_true", help="Skip the hosted classifier; heuristics only")
    parser.add_argument("--signals", action="store_true", help="Include result source and per-signal scores")
    args = parser.parse_args(argv)
    return run(args.path, use_remote=not args.no_remote, show_signals=args.signals)


if __name__ == "__main__":
    raise SystemExit(main())
