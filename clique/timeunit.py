# clique/timeunit.py
import enum
import math
import numbers
import time
from typing import Optional, Union

from clique.errors import InvalidArgumentError

# largest value a signed 64-bit nanosecond clock can hold
MAX_NANOS = 2 ** 63 - 1


class TimeUnit(enum.Enum):
    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 3600 * 1_000_000_000
    DAYS = 86400 * 1_000_000_000

    def to_nanos(self, value) -> int:
        # truncates like a fixed-point duration conversion would
        return int(value * self.value)


_ALIASES = {
    "ns": TimeUnit.NANOSECONDS, "nanoseconds": TimeUnit.NANOSECONDS,
    "us": TimeUnit.MICROSECONDS, "microseconds": TimeUnit.MICROSECONDS,
    "ms": TimeUnit.MILLISECONDS, "milliseconds": TimeUnit.MILLISECONDS,
    "s": TimeUnit.SECONDS, "sec": TimeUnit.SECONDS, "seconds": TimeUnit.SECONDS,
    "min": TimeUnit.MINUTES, "minutes": TimeUnit.MINUTES,
    "h": TimeUnit.HOURS, "hours": TimeUnit.HOURS,
    "d": TimeUnit.DAYS, "days": TimeUnit.DAYS,
}


def parse_unit(unit: Union[str, TimeUnit]) -> TimeUnit:
    if isinstance(unit, TimeUnit):
        return unit
    if isinstance(unit, str):
        key = unit.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
    raise InvalidArgumentError(f"Unknown time unit: {unit!r}")


def resolve_timeout(timeout, unit: Union[str, TimeUnit] = TimeUnit.SECONDS) -> Optional[int]:
    """
    Turn (timeout, unit) into a nanosecond budget.
    Returns None for an unbounded search (timeout == 0).
    Anything that resolves to less than one nanosecond is rejected.
    """
    tu = parse_unit(unit)
    if isinstance(timeout, bool) or not isinstance(timeout, numbers.Real):
        raise InvalidArgumentError(f"Invalid timeout {timeout!r}, must be a number")
    if not math.isfinite(timeout):
        raise InvalidArgumentError(f"Invalid timeout {timeout!r}, must be finite")
    if timeout == 0:
        return None
    nanos = tu.to_nanos(timeout)
    if nanos < 1:
        raise InvalidArgumentError("Invalid timeout, must be positive")
    return nanos


def deadline_after(nanos: Optional[int]) -> Optional[int]:
    """Absolute monotonic deadline for a budget; None means no deadline."""
    if nanos is None:
        return None
    deadline = time.monotonic_ns() + nanos
    if deadline > MAX_NANOS:
        return None
    return deadline


def past_deadline(deadline: Optional[int]) -> bool:
    return deadline is not None and time.monotonic_ns() - deadline > 0
