# envsettings/models/__init__.py
"""Value types shared by the settings panel and its host."""

from .types import ColorScheme, LayoutDirection, ContentSizeCategory

__all__ = [
    'ColorScheme',
    'LayoutDirection',
    'ContentSizeCategory',
]
