"""Trace Stats — pure computation of a trace summary.

Invariants:
    - All inputs come from Trace fields (no IO)
    - Returns a flat dict (serializable as JSON, usable as log extras)
    - iterations_to_constant is None when KAPREKAR_CONSTANT never appears as a difference
"""

from kaprekar.core.domain_types import KAPREKAR_CONSTANT
from kaprekar.core.seek import Trace


def compute_trace_stats(trace: Trace) -> dict:
    """Summarize one Trace. Pure, no IO."""
    first_hit = next(
        (i + 1 for i, step in enumerate(trace.steps)
         if step.difference == KAPREKAR_CONSTANT),
        None,
    )
    return {
        "start_value": trace.start,
        "iterations": len(trace.steps),
        "final_value": trace.final_difference,
        "outcome": trace.outcome.value,
        "reached_constant": trace.final_difference == KAPREKAR_CONSTANT,
        "iterations_to_constant": first_hit,
    }
