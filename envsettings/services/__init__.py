# envsettings/services/__init__.py
"""
External collaborators of the settings panel.

Heavy imports (Pillow, NiceGUI) are deferred to the modules that need them.
Use explicit imports like:
    from envsettings.services.screenshot import ScreenshotService
"""

from .exceptions import EnvSettingsError, InvalidLocaleError, ScreenshotError

__all__ = [
    'EnvSettingsError',
    'InvalidLocaleError',
    'ScreenshotError',
]
