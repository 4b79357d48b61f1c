"""
Ordered "first success wins" combinator used by the fallback chains.
"""

from typing import Callable, Dict, Sequence, Tuple, TypeVar

from studytube.core.errors import AllAttemptsFailed
from studytube.utils.logger import logging

T = TypeVar("T")


def first_success(
    attempts: Sequence[Tuple[str, Callable[[], T]]],
    accept: Callable[[T], bool] = lambda result: result is not None,
) -> Tuple[str, T]:
    """
    Run named attempts in order and return the first accepted result.

    Failures are logged and the next attempt is tried; nothing after the
    first accepted result is called.

    Args:
        attempts: (name, zero-argument callable) pairs
        accept: Predicate a result must satisfy to count as a success

    Returns:
        (name, result) of the winning attempt

    Raises:
        AllAttemptsFailed: if no attempt produced an accepted result
    """
    errors: Dict[str, str] = {}

    for index, (name, attempt) in enumerate(attempts, start=1):
        logging.info(f"Trying {name} ({index}/{len(attempts)})")
        try:
            result = attempt()
        except Exception as e:
            logging.warning(f"{name} failed: {e}")
            errors[name] = str(e)
            continue

        if accept(result):
            logging.info(f"{name} succeeded")
            return name, result

        logging.warning(f"{name} returned an unusable result")
        errors[name] = "unusable result"

    raise AllAttemptsFailed(errors)
