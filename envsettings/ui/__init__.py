# envsettings/ui/__init__.py
"""
UI for EnvSettings.

NiceGUI modules are lazy-loaded.
Use explicit imports like:
    from envsettings.ui.app import run_app
"""

# Fast imports - state classes (no NiceGUI dependency)
from .state import Binding, SettingsParams, ScreenshotPhase

# Lazy-loaded UI modules via __getattr__
_LAZY_IMPORTS = {
    'EnvSettingsApp': 'app',
    'create_app': 'app',
    'run_app': 'app',
}

# Submodules that can be accessed via __getattr__ (for patching support)
_SUBMODULES = {'app', 'styles', 'state', 'components'}


def __getattr__(name: str):
    """Lazy-load UI modules on first access."""
    import importlib
    if name in _SUBMODULES:
        return importlib.import_module(f'.{name}', __package__)
    if name in _LAZY_IMPORTS:
        module_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(f'.{module_name}', __package__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'EnvSettingsApp',
    'create_app',
    'run_app',
    'Binding',
    'SettingsParams',
    'ScreenshotPhase',
]
