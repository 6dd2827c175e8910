"""Clock sources for duration-bounded policies.

A clock is a zero-argument callable returning the current time in seconds as
a float. Only differences between readings matter.
"""

from __future__ import annotations

import time
from typing import Callable, TypeAlias

Clock: TypeAlias = Callable[[], float]

# Immune to system clock adjustments; the default everywhere.
monotonic_clock: Clock = time.monotonic

# Wall clock. Stepping the system clock moves deadlines computed from it,
# so retries can stop early or run late.
system_clock: Clock = time.time
