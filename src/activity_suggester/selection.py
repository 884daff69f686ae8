"""Uniform random choice over activity lists."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional, Sequence

from .models import Activity

RandomSource = Callable[[], float]


def pick_random(
    activities: Sequence[Activity],
    random_source: Optional[RandomSource] = None,
) -> Optional[Activity]:
    """Return one activity chosen uniformly, or ``None`` when there is none.

    ``random_source`` must return floats in ``[0, 1)``; it defaults to
    :func:`random.random` and exists so callers can pin the chosen index.
    """
    if not activities:
        return None
    source = random_source or random.random
    index = math.floor(source() * len(activities))
    index = min(max(index, 0), len(activities) - 1)
    return activities[index]
