"""Tests for envsettings.services"""

from unittest.mock import Mock

import pytest
from PIL import Image

from envsettings.services.exceptions import EnvSettingsError, InvalidLocaleError, ScreenshotError
from envsettings.services.haptic import (
    FAILURE_PATTERN,
    SUCCESS_PATTERN,
    BrowserHaptic,
    LoggingHaptic,
)
from envsettings.services.platform import is_desktop_class
from envsettings.services.screenshot import ScreenshotService


class TestScreenshotService:
    """Tests for ScreenshotService.capture()"""

    def test_capture_writes_png(self, tmp_path):
        service = ScreenshotService(tmp_path / "shots", grabber=lambda: Image.new("RGB", (4, 3)))

        assert service.capture() is True

        assert service.last_path is not None
        assert service.last_path.parent == tmp_path / "shots"
        assert service.last_path.suffix == ".png"
        with Image.open(service.last_path) as image:
            assert image.size == (4, 3)

    def test_capture_returns_false_on_os_error(self, tmp_path):
        grabber = Mock(side_effect=OSError("X connection failed"))
        service = ScreenshotService(tmp_path, grabber=grabber)

        assert service.capture() is False
        assert service.last_path is None

    def test_capture_returns_false_without_image(self, tmp_path):
        service = ScreenshotService(tmp_path, grabber=lambda: None)

        assert service.capture() is False

    def test_capture_returns_false_when_directory_unwritable(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        service = ScreenshotService(blocker / "shots", grabber=lambda: Image.new("RGB", (1, 1)))

        assert service.capture() is False


class TestHaptic:
    """Tests for haptic feedback"""

    def test_browser_haptic_success(self):
        client = Mock()
        BrowserHaptic(client).success()

        client.run_javascript.assert_called_once()
        assert str(SUCCESS_PATTERN) in client.run_javascript.call_args.args[0]

    def test_browser_haptic_failure(self):
        client = Mock()
        BrowserHaptic(client).failure()

        assert str(FAILURE_PATTERN) in client.run_javascript.call_args.args[0]

    def test_browser_haptic_without_client(self):
        haptic = BrowserHaptic()
        haptic.success()
        haptic.failure()

    def test_logging_haptic(self):
        haptic = LoggingHaptic()
        haptic.success()
        haptic.failure()


class TestPlatform:
    """Tests for is_desktop_class()"""

    def test_darwin_is_desktop_class_by_default(self):
        assert is_desktop_class("darwin") is True

    @pytest.mark.parametrize("platform_name", ["linux", "win32", "ios"])
    def test_other_platforms(self, platform_name):
        assert is_desktop_class(platform_name) is False

    def test_custom_desktop_platforms(self):
        assert is_desktop_class("linux", desktop_platforms=["Linux", "win32"]) is True
        assert is_desktop_class("darwin", desktop_platforms=[]) is False


def test_exception_hierarchy():
    error = InvalidLocaleError("de", ["en"])
    assert isinstance(error, EnvSettingsError)
    assert isinstance(error, ValueError)
    assert "de" in str(error)
    assert issubclass(ScreenshotError, EnvSettingsError)
