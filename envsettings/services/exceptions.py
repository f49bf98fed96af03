# envsettings/services/exceptions.py
"""
Exception types shared across EnvSettings.
"""


class EnvSettingsError(Exception):
    """Base class for EnvSettings errors."""

    pass


class InvalidLocaleError(EnvSettingsError, ValueError):
    """Raised when the selected locale is not one of the available locales."""

    def __init__(self, locale: str, locales: list[str]):
        self.locale = locale
        self.locales = list(locales)
        super().__init__(f"Locale {locale!r} is not one of {self.locales}")


class ScreenshotError(EnvSettingsError):
    """Raised when the screen could not be captured."""

    pass
