# envsettings/services/platform.py
"""
Host capability checks.
"""

import sys
from typing import Iterable, Optional

# Desktop-class hosts (sys.platform values). Screenshots are not offered there.
DEFAULT_DESKTOP_PLATFORMS = frozenset({"darwin"})


def is_desktop_class(
    platform_name: Optional[str] = None,
    desktop_platforms: Optional[Iterable[str]] = None,
) -> bool:
    """Return True if the host is desktop-class.

    Args:
        platform_name: Platform to check (defaults to sys.platform)
        desktop_platforms: sys.platform values treated as desktop-class
    """
    if platform_name is None:
        platform_name = sys.platform
    if desktop_platforms is None:
        desktop_platforms = DEFAULT_DESKTOP_PLATFORMS
    return platform_name.lower() in {p.lower() for p in desktop_platforms}
