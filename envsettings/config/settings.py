# envsettings/config/settings.py
"""
Application settings management for EnvSettings.

Settings files:
- settings.template.json: defaults (checked in, replaced on update)
- user_settings.json: only the values the user changed in the panel
- On load the template is read first, then overlaid with user settings

Cache:
- _settings_cache keeps one AppSettings instance per path
- load() returns the cached instance while both files are unchanged
- save() refreshes the cache
- invalidate_settings_cache() clears it explicitly
"""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from envsettings.models.types import ColorScheme, ContentSizeCategory, LayoutDirection

# Module logger
logger = logging.getLogger(__name__)

# Settings cache: path -> (mtime_template, mtime_user, AppSettings)
_settings_cache: dict[str, tuple[float, float, "AppSettings"]] = {}
_settings_cache_lock = threading.Lock()

# Settings changed from the panel (saved to user_settings.json)
USER_SETTINGS_KEYS = {
    "locale",
    "color_scheme",
    "text_size",
    "layout_direction",
    "accessibility_enabled",
}

MAX_SCREENSHOT_DELAY = 5.0
DEFAULT_LOCALES = ["en", "ru", "fr"]
DEFAULT_DESKTOP_PLATFORMS = ["darwin"]


@dataclass
class AppSettings:
    """Application settings"""

    # Environment values edited by the panel
    locales: list[str] = field(default_factory=lambda: list(DEFAULT_LOCALES))
    locale: str = "en"
    color_scheme: str = ColorScheme.LIGHT.value
    text_size: str = ContentSizeCategory.MEDIUM.value
    layout_direction: str = LayoutDirection.LEFT_TO_RIGHT.value
    accessibility_enabled: bool = False

    # Screenshot
    screenshot_delay: float = 0.1              # Seconds between hiding the panel and capturing
    screenshot_directory: Optional[str] = None  # None = ~/.envsettings/screenshots
    desktop_platforms: list[str] = field(default_factory=lambda: list(DEFAULT_DESKTOP_PLATFORMS))

    # Layout
    min_control_width: int = 80                # px

    # Server
    host: str = "127.0.0.1"
    port: int = 8090
    native: bool = False

    @classmethod
    def load(cls, path: Path, use_cache: bool = True) -> "AppSettings":
        """Load settings from template and user settings files.

        Args:
            path: Settings path (config/settings.json). Only its directory is
                  used to find settings.template.json and user_settings.json.
            use_cache: Return the cached instance if the files are unchanged
        """
        config_dir = path.parent
        template_path = config_dir / "settings.template.json"
        user_settings_path = config_dir / "user_settings.json"

        cache_key = str(path.resolve())

        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0

        if use_cache:
            with _settings_cache_lock:
                if cache_key in _settings_cache:
                    cached_template_mtime, cached_user_mtime, cached_settings = _settings_cache[cache_key]
                    if cached_template_mtime == template_mtime and cached_user_mtime == user_mtime:
                        logger.debug("Using cached settings for: %s", path)
                        return cached_settings

        data = {}

        # 1. Template (developer defaults)
        if template_path.exists():
            try:
                with open(template_path, 'r', encoding='utf-8-sig') as f:
                    data = json.load(f)
                    logger.debug("Loaded template settings from: %s", template_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load template settings: %s", e)

        # 2. User settings
        if user_settings_path.exists():
            try:
                with open(user_settings_path, 'r', encoding='utf-8-sig') as f:
                    user_data = json.load(f)
                    for key in USER_SETTINGS_KEYS:
                        if key in user_data:
                            data[key] = user_data[key]
                    logger.debug("Loaded user settings from: %s", user_settings_path)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning("Failed to load user settings: %s", e)

        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        settings = cls(**filtered_data)
        settings._validate()

        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, settings)

        return settings

    def _validate(self) -> None:
        """Reset invalid values to defaults with warnings."""
        if not isinstance(self.locales, list):
            logger.warning("locales must be a list, got %r; using defaults", self.locales)
            self.locales = list(DEFAULT_LOCALES)
        self.locales = [str(locale) for locale in self.locales if str(locale).strip()]
        if not self.locales:
            logger.warning("No locales configured, using 'en'")
            self.locales = ["en"]
        if self.locale not in self.locales:
            logger.warning("Unknown locale %r, resetting to %r", self.locale, self.locales[0])
            self.locale = self.locales[0]

        if self.color_scheme not in {c.value for c in ColorScheme}:
            logger.warning("Unknown color_scheme %r, resetting to light", self.color_scheme)
            self.color_scheme = ColorScheme.LIGHT.value
        if self.text_size not in {c.value for c in ContentSizeCategory}:
            logger.warning("Unknown text_size %r, resetting to medium", self.text_size)
            self.text_size = ContentSizeCategory.MEDIUM.value
        if self.layout_direction not in {d.value for d in LayoutDirection}:
            logger.warning("Unknown layout_direction %r, resetting to ltr", self.layout_direction)
            self.layout_direction = LayoutDirection.LEFT_TO_RIGHT.value

        if self.screenshot_delay < 0.0:
            logger.warning("screenshot_delay negative (%.2f), resetting to 0.1", self.screenshot_delay)
            self.screenshot_delay = 0.1
        elif self.screenshot_delay > MAX_SCREENSHOT_DELAY:
            logger.warning("screenshot_delay too large (%.2f), clamping", self.screenshot_delay)
            self.screenshot_delay = MAX_SCREENSHOT_DELAY

        if not isinstance(self.desktop_platforms, list):
            logger.warning("desktop_platforms must be a list, got %r; using defaults",
                           self.desktop_platforms)
            self.desktop_platforms = list(DEFAULT_DESKTOP_PLATFORMS)

        if self.min_control_width < 0:
            self.min_control_width = 80

    def save(self, path: Path) -> None:
        """Save user-changeable settings to user_settings.json.

        settings.template.json is never modified.

        Args:
            path: Settings path (config/settings.json); written next to it
                  as config/user_settings.json
        """
        config_dir = path.parent
        user_settings_path = config_dir / "user_settings.json"
        template_path = config_dir / "settings.template.json"

        config_dir.mkdir(parents=True, exist_ok=True)

        data = {key: getattr(self, key) for key in sorted(USER_SETTINGS_KEYS)}

        with open(user_settings_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.debug("Saved user settings to: %s", user_settings_path)

        cache_key = str(path.resolve())
        template_mtime = template_path.stat().st_mtime if template_path.exists() else 0.0
        user_mtime = user_settings_path.stat().st_mtime if user_settings_path.exists() else 0.0
        with _settings_cache_lock:
            _settings_cache[cache_key] = (template_mtime, user_mtime, self)

    def get_color_scheme(self) -> ColorScheme:
        return ColorScheme(self.color_scheme)

    def get_text_size(self) -> ContentSizeCategory:
        return ContentSizeCategory(self.text_size)

    def get_layout_direction(self) -> LayoutDirection:
        return LayoutDirection(self.layout_direction)

    def get_screenshot_directory(self) -> Optional[Path]:
        """Configured screenshot directory (None = service default)"""
        if self.screenshot_directory:
            return Path(self.screenshot_directory).expanduser()
        return None


def get_default_settings_path() -> Path:
    """Get default settings file path"""
    return Path(__file__).parent.parent.parent / "config" / "settings.json"


def invalidate_settings_cache(path: Optional[Path] = None) -> None:
    """Invalidate settings cache.

    Args:
        path: Only clear the entry for this path. None clears everything.
    """
    with _settings_cache_lock:
        if path is None:
            _settings_cache.clear()
            logger.debug("Cleared all settings cache")
        else:
            cache_key = str(path.resolve())
            if cache_key in _settings_cache:
                del _settings_cache[cache_key]
                logger.debug("Cleared settings cache for: %s", path)
