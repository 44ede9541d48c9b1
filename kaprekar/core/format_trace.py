"""Trace Formatting — pure functions rendering steps as vertical subtractions.

Invariants:
    - format_step always returns exactly 4 lines
    - desc/asc/difference are zero-padded to at least DIGIT_WIDTH; the raw value is not
    - Marker lines are module constants, the seek loop never builds them inline

Design Decisions:
    - Kept apart from routine.py: the step record is arithmetic, this is presentation
"""

from kaprekar.core.routine import StepResult, pad_digits


BEGIN_LINE: str = "   Begin   "
SEPARATOR_LINE: str = "___________"
FAILED_LINE: str = "Seek failed to terminate"


def format_step(step: StepResult) -> list[str]:
    """Render one step as value, minuend, subtrahend and difference lines.

        1205
              5210
         - 0125
         = 5085
    """
    return [
        f"{step.value}",
        f"      {pad_digits(step.desc_value)}",
        f"     - {pad_digits(step.asc_value)}",
        f"     = {pad_digits(step.difference)}",
    ]


def format_footer(exhausted: bool) -> list[str]:
    """Closing lines of a trace; failure marker first when the seek ran out."""
    footer = [FAILED_LINE] if exhausted else []
    return footer + [SEPARATOR_LINE, ""]
