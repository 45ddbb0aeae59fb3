"""
Karatsuba crossover policy.

The threshold is a digit count: once either operand of a multiplication
has at most this many digits, the quadratic algorithm is used instead of
recursing further. It is process-wide, guarded by a lock, and read exactly
once per multiplication so a concurrent change never alters a product that
is already being computed.
"""

import logging
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from biguint.exceptions import BigUintError
from biguint.validators import validate_threshold

logger = logging.getLogger(__name__)

DEFAULT_KARATSUBA_THRESHOLD = 32
THRESHOLD_ENV_VAR = "BIGUINT_KARATSUBA_THRESHOLD"

_lock = threading.Lock()


def _threshold_from_env() -> int:
    raw = os.environ.get(THRESHOLD_ENV_VAR)
    if raw is None:
        return DEFAULT_KARATSUBA_THRESHOLD
    try:
        return validate_threshold(int(raw))
    except (ValueError, BigUintError):
        logger.warning(
            "Ignoring %s=%r, using default threshold %d",
            THRESHOLD_ENV_VAR,
            raw,
            DEFAULT_KARATSUBA_THRESHOLD,
        )
        return DEFAULT_KARATSUBA_THRESHOLD


_threshold = _threshold_from_env()


def get_karatsuba_threshold() -> int:
    """Current crossover threshold in digits."""
    with _lock:
        return _threshold


def set_karatsuba_threshold(threshold: int) -> int:
    """
    Set the crossover threshold for every later multiplication.

    Args:
        threshold: Digit count, at least 1. 1 recurses as deep as possible;
            a very large value always selects the quadratic algorithm.

    Returns:
        The previous threshold

    Raises:
        InvalidInputError: If threshold is not an int
        OutOfRangeError: If threshold is below 1
    """
    global _threshold

    validate_threshold(threshold)
    with _lock:
        previous, _threshold = _threshold, threshold
    if previous != threshold:
        logger.info("Karatsuba threshold changed from %d to %d", previous, threshold)
    return previous


@contextmanager
def karatsuba_threshold(threshold: int) -> Iterator[int]:
    """
    Temporarily override the crossover threshold.

    Example:
        >>> with karatsuba_threshold(1):
        ...     product = a * b
    """
    previous = set_karatsuba_threshold(threshold)
    try:
        yield threshold
    finally:
        set_karatsuba_threshold(previous)
