# envsettings/services/screenshot.py
"""
Screen capture for the settings panel.

Captures are written as PNG files into the screenshot directory
(default: ~/.envsettings/screenshots).
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from envsettings.services.exceptions import ScreenshotError

# Module logger
logger = logging.getLogger(__name__)


def get_default_screenshot_dir() -> Path:
    """Get default screenshot directory"""
    return Path.home() / ".envsettings" / "screenshots"


def _grab_screen():
    """Grab the whole screen with Pillow"""
    from PIL import ImageGrab
    return ImageGrab.grab()


class ScreenshotService:
    """
    Captures the host screen.

    capture() never raises: failures are logged and reported as False.
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        grabber: Optional[Callable[[], object]] = None,
    ):
        self.output_dir = output_dir or get_default_screenshot_dir()
        self._grabber = grabber or _grab_screen
        self.last_path: Optional[Path] = None

    def _next_path(self) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        return self.output_dir / f"screenshot_{timestamp}.png"

    def _capture_to_file(self) -> Path:
        image = self._grabber()
        if image is None:
            raise ScreenshotError("Screen grab returned no image")
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self._next_path()
        image.save(path, "PNG")
        return path

    def capture(self) -> bool:
        """Capture the screen. Returns True on success."""
        try:
            path = self._capture_to_file()
        except (OSError, ValueError, ScreenshotError) as e:
            logger.warning("Screenshot failed: %s", e)
            return False

        self.last_path = path
        logger.info("Screenshot saved: %s", path)
        return True
