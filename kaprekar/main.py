"""Kaprekar Driver — console entry point and batch runner.

Invariants:
    - All traces are computed before any line is written: each trace is emitted
      contiguously, in input order, never interleaved
    - Invalid start values follow InvalidInputPolicy (abort re-raises, skip logs and continues)
    - Exhausted seeks are logged as warnings, never raised

Design Decisions:
    - Thin imperative shell over kaprekar.core: settings, logging and stdout live here only
    - Sample batch comes from Settings, not a module-level list
"""

import logging
import sys
from typing import Iterable, TextIO

from kaprekar.config import get_settings
from kaprekar.core.domain_types import (
    DEFAULT_SAFETY_LIMIT, InvalidInputPolicy, TraceOutcome,
)
from kaprekar.core.errors import KaprekarError
from kaprekar.core.seek import Trace, seek_fixed_point
from kaprekar.core.trace_stats import compute_trace_stats
from kaprekar.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _error_extra(exc: KaprekarError, start_value) -> dict:
    return {
        "error_code": exc.code,
        "start_value": start_value,
        "error": exc.to_dict()["error"],
    }


def _seek_all(
    values: Iterable[int], policy: InvalidInputPolicy, safety_limit: int,
) -> list[Trace]:
    traces: list[Trace] = []
    for value in values:
        try:
            trace = seek_fixed_point(value, safety_limit)
        except KaprekarError as exc:
            if policy == InvalidInputPolicy.ABORT:
                raise
            logger.error(
                "Skipping start value: %s", exc.message, extra=_error_extra(exc, value),
            )
            continue

        stats = compute_trace_stats(trace)
        if trace.outcome == TraceOutcome.EXHAUSTED:
            logger.warning(
                "Seek failed to terminate after %d steps", stats["iterations"],
                extra=stats,
            )
        else:
            logger.debug("Seek finished", extra=stats)
        traces.append(trace)
    return traces


def run(
    values: Iterable[int],
    stream: TextIO | None = None,
    *,
    policy: InvalidInputPolicy = InvalidInputPolicy.ABORT,
    safety_limit: int = DEFAULT_SAFETY_LIMIT,
) -> list[Trace]:
    """Seek every value and write each trace's lines to stream (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    traces = _seek_all(values, policy, safety_limit)
    for trace in traces:
        for line in trace.lines:
            print(line, file=out)
    return traces


def main() -> int:
    """Run the configured sample batch. Returns the process exit code."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Kaprekar batch started", extra={"batch_size": len(settings.sample_values)},
    )
    try:
        run(
            settings.sample_values,
            policy=settings.on_invalid,
            safety_limit=settings.safety_limit,
        )
    except KaprekarError as exc:
        logger.error(
            "Batch aborted: %s", exc.message,
            extra=_error_extra(exc, exc.context.start_value),
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
