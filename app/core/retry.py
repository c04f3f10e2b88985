"""
Bounded retry with a fixed delay for best-effort operations.

Used for work whose failure must never change the outcome of the caller,
such as removing temporary upload files. Failures are logged, never raised.
"""
import time
from typing import Any, Callable

from app.core.logging_config import log_error, log_warning


def retry_best_effort(
    action: Callable[[], Any],
    *,
    max_attempts: int,
    delay_seconds: float,
    description: str,
    sleep: Callable[[float], None] = time.sleep,
    **context: Any,
) -> bool:
    """
    Run ``action`` up to ``max_attempts`` times, sleeping ``delay_seconds``
    between attempts.

    Args:
        action: Zero-argument callable to attempt
        max_attempts: Total number of attempts (at least one is made)
        delay_seconds: Fixed pause between attempts
        description: Short label used in log messages
        sleep: Sleep function, replaceable in tests
        **context: Extra fields added to log records

    Returns:
        True if an attempt succeeded, False once all attempts failed
    """
    attempts = max(1, max_attempts)
    last_error: Exception | None = None

    for attempt in range(1, attempts + 1):
        try:
            action()
            return True
        except Exception as exc:  # noqa: BLE001
            last_error = exc
            log_warning(
                f"{description} failed (attempt {attempt}/{attempts}): {exc}",
                attempt=attempt,
                **context,
            )
            if attempt < attempts:
                sleep(delay_seconds)

    log_error(
        f"{description} gave up after {attempts} attempts: {last_error}",
        **context,
    )
    return False
