# envsettings/ui/components/__init__.py
"""
UI components for EnvSettings.

Component imports are lazy-loaded so that state classes can be used
without importing NiceGUI.
Use explicit imports like:
    from envsettings.ui.components.settings_panel import SettingsPanel
"""

# Lazy-loaded components via __getattr__
_LAZY_IMPORTS = {
    "SettingsPanel": "settings_panel",
    "ScreenshotAction": "settings_panel",
    "ControlWidth": "controls",
}


def __getattr__(name: str):
    """Lazy-load component modules on first access."""
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(f".{module_name}", __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "SettingsPanel",
    "ScreenshotAction",
    "ControlWidth",
]
