# envsettings/services/haptic.py
"""
Haptic feedback for the screenshot action.

The browser variant uses the Vibration API, which only has an effect on
devices that support it. Unsupported browsers ignore the call.
"""

import logging
from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from nicegui import Client

logger = logging.getLogger(__name__)

# Vibration patterns (ms): single pulse for success, double pulse for errors
SUCCESS_PATTERN = [30]
FAILURE_PATTERN = [60, 40, 60]


class HapticFeedback(Protocol):
    def success(self) -> None: ...

    def failure(self) -> None: ...


class LoggingHaptic:
    """Haptic stand-in used when no browser client is attached."""

    def success(self) -> None:
        logger.debug("Haptic feedback: success")

    def failure(self) -> None:
        logger.debug("Haptic feedback: failure")


class BrowserHaptic:
    """Vibrates the connected browser through navigator.vibrate()."""

    def __init__(self, client: Optional["Client"] = None):
        self._client = client

    def _vibrate(self, pattern: list[int]) -> None:
        if self._client is None:
            logger.debug("Haptic feedback skipped: no client")
            return
        # Not awaited: fire-and-forget
        self._client.run_javascript(
            f'if (navigator.vibrate) {{ navigator.vibrate({pattern}); }}'
        )

    def success(self) -> None:
        self._vibrate(SUCCESS_PATTERN)

    def failure(self) -> None:
        self._vibrate(FAILURE_PATTERN)
