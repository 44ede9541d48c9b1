"""Domain Types — constants and rich types for the Kaprekar routine.

Invariants:
    - FourDigitValue is bounded MIN_VALUE–MAX_VALUE (inclusive)
    - DIGIT_WIDTH is the single source of truth for zero-padding
    - All terminal states encoded as Enums, never raw strings

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, range checked at the core entry point
    - str Enums: outcome values drop straight into JSON log records
"""

from enum import Enum
from typing import NewType


# ─── Constants ───────────────────────────────────────────────────

KAPREKAR_CONSTANT: int = 6174
DIGIT_WIDTH: int = 4
MIN_VALUE: int = 1000
MAX_VALUE: int = 9999
DEFAULT_SAFETY_LIMIT: int = 30

SAMPLE_VALUES: tuple[int, ...] = (1205, 6174, 1234, 6598, 5432, 4321, 8835)


# ─── Value Types ─────────────────────────────────────────────────

FourDigitValue = NewType("FourDigitValue", int)   # 1000–9999


# ─── Enums ───────────────────────────────────────────────────────

class TraceOutcome(str, Enum):
    """How a seek ended. Every member is terminal."""
    CONVERGED = "converged"
    COLLAPSED = "collapsed"
    EXHAUSTED = "exhausted"


class InvalidInputPolicy(str, Enum):
    """What the batch driver does with a start value outside the range."""
    ABORT = "abort"
    SKIP = "skip"
