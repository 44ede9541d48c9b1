"""Fixed-Point Seek — bounded Kaprekar iteration producing a full Trace.

Invariants:
    - Only the start value is range-checked; intermediate values (e.g. 999) are zero-padded
    - At most safety_limit steps are computed, so the loop always terminates
    - Stops on digit match (CONVERGED) or zero difference (COLLAPSED)
    - Trace.lines always starts with BEGIN_LINE and ends with SEPARATOR_LINE, ""

Design Decisions:
    - Exhaustion is an outcome, not an exception: it appends FAILED_LINE and returns
    - Zero difference is terminal: repdigits like 1111 would otherwise feed 0 back
      into the routine and spin until the safety counter runs out
"""

from dataclasses import dataclass

from kaprekar.core.domain_types import DEFAULT_SAFETY_LIMIT, TraceOutcome
from kaprekar.core.errors import ErrorContext
from kaprekar.core.format_trace import BEGIN_LINE, format_footer, format_step
from kaprekar.core.routine import (
    StepResult, rearrange, digits_match, validate_four_digit,
)


@dataclass(frozen=True)
class Trace:
    """Every step taken for one start value, in execution order."""
    start: int
    steps: tuple[StepResult, ...]
    lines: tuple[str, ...]
    outcome: TraceOutcome

    @property
    def final_difference(self) -> int | None:
        return self.steps[-1].difference if self.steps else None


def seek_fixed_point(
    start: int, safety_limit: int = DEFAULT_SAFETY_LIMIT,
) -> Trace:
    """Iterate the routine from start until its digits reproduce. Pure."""
    value = validate_four_digit(start, ErrorContext(start_value=start, iteration=0))
    steps: list[StepResult] = []
    lines: list[str] = [BEGIN_LINE]
    outcome = TraceOutcome.EXHAUSTED

    current: int = value
    for _ in range(safety_limit):
        step = rearrange(current)
        steps.append(step)
        lines.extend(format_step(step))

        if digits_match(current, step.difference):
            outcome = TraceOutcome.CONVERGED
            break
        if step.difference == 0:
            outcome = TraceOutcome.COLLAPSED
            break
        current = step.difference

    lines.extend(format_footer(outcome == TraceOutcome.EXHAUSTED))
    return Trace(
        start=value, steps=tuple(steps), lines=tuple(lines), outcome=outcome,
    )
