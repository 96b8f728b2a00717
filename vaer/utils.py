import math
import time
from contextlib import contextmanager
from typing import Any, Iterator

import structlog

logger = structlog.get_logger()


@contextmanager
def timed(name: str, **kwargs: Any) -> Iterator[None]:
    t = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = round((time.monotonic() - t) * 1000, 2)
        logger.debug(name, elapsed_ms=elapsed_ms, **kwargs)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up, so 2.5 becomes 3 and
    -2.5 becomes -2. The builtin round() rounds halves to even.
    """

    return math.floor(value + 0.5)
