# envsettings/ui/app.py
"""
EnvSettings host application.

Owns the environment values, applies them to a preview area and overlays
the settings panel. Every change made in the panel is saved to
user_settings.json.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from nicegui import Client, ui

from envsettings import __app_name__
from envsettings.config.settings import AppSettings, get_default_settings_path
from envsettings.models.types import ColorScheme, ContentSizeCategory, LayoutDirection
from envsettings.services.haptic import BrowserHaptic
from envsettings.services.platform import is_desktop_class
from envsettings.services.screenshot import ScreenshotService
from envsettings.ui.components.controls import follow_binding
from envsettings.ui.components.settings_panel import SettingsPanel
from envsettings.ui.state import Binding, SettingsParams
from envsettings.ui.styles import PANEL_CSS

# Module logger
logger = logging.getLogger(__name__)

SAMPLE_TITLE = "Preview"
SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "Use the panel to switch theme, locale, text size and layout direction."
)


class EnvSettingsApp:
    """Owner of the bound environment values"""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path or get_default_settings_path()
        self.settings = AppSettings.load(self.settings_path)
        self.params = self._create_params()
        self.screenshot_service = ScreenshotService(self.settings.get_screenshot_directory())
        self._save_on_change()

    def _create_params(self) -> SettingsParams:
        settings = self.settings
        return SettingsParams(
            locales=settings.locales,
            locale=Binding.constant(settings.locale),
            color_scheme=Binding.constant(settings.get_color_scheme()),
            text_size=Binding.constant(settings.get_text_size()),
            layout_direction=Binding.constant(settings.get_layout_direction()),
            accessibility_enabled=Binding.constant(settings.accessibility_enabled),
        )

    def _save_on_change(self) -> None:
        params = self.params
        params.locale.observe(lambda v: self._update_setting('locale', v))
        params.color_scheme.observe(lambda v: self._update_setting('color_scheme', v.value))
        params.text_size.observe(lambda v: self._update_setting('text_size', v.value))
        params.layout_direction.observe(lambda v: self._update_setting('layout_direction', v.value))
        params.accessibility_enabled.observe(
            lambda v: self._update_setting('accessibility_enabled', bool(v))
        )

    def _update_setting(self, key: str, value: Any) -> None:
        setattr(self.settings, key, value)
        try:
            self.settings.save(self.settings_path)
        except OSError as e:
            logger.warning("Failed to save settings: %s", e)

    def preview_style(self) -> str:
        """Inline style of the preview area for the current values"""
        text_size: ContentSizeCategory = self.params.text_size.get()
        direction: LayoutDirection = self.params.layout_direction.get()
        return f'font-size: {text_size.point_size}px; direction: {direction.value}'

    def preview_classes(self) -> dict[str, bool]:
        """Preview area classes switched by the current values"""
        return {
            'high-contrast': bool(self.params.accessibility_enabled.get()),
            'large-content': self.params.text_size.get().is_accessibility_category,
        }

    def create_panel(self, is_hidden: Binding[bool], client: Optional[Client] = None) -> SettingsPanel:
        return SettingsPanel(
            self.params,
            is_hidden,
            screenshot_service=self.screenshot_service,
            haptic=BrowserHaptic(client),
            desktop_class=is_desktop_class(desktop_platforms=self.settings.desktop_platforms),
            min_control_width=self.settings.min_control_width,
            screenshot_delay=self.settings.screenshot_delay,
        )

    def create_ui(self, client: Optional[Client] = None) -> None:
        """Build the page: preview area with the panel on top"""
        if client is None:
            client = ui.context.client
        ui.add_css(PANEL_CSS)
        params = self.params

        dark = ui.dark_mode(params.color_scheme.get() == ColorScheme.DARK)

        with ui.column().classes('preview-area w-full gap-4') as preview:
            ui.label(SAMPLE_TITLE).classes('text-2xl font-bold')
            ui.label(SAMPLE_TEXT)
            locale_label = ui.label(f'Locale: {params.locale.get()}').classes('opacity-70')
            with ui.row().classes('gap-2'):
                ui.button('Primary')
                ui.button('Secondary').props('outline')

        def apply_environment(_value: Any = None) -> None:
            preview.style(replace=self.preview_style())
            preview.props(f'lang="{params.locale.get()}"')
            locale_label.set_text(f'Locale: {params.locale.get()}')
            for name, enabled in self.preview_classes().items():
                if enabled:
                    preview.classes(add=name)
                else:
                    preview.classes(remove=name)

        apply_environment()
        follow_binding(params.color_scheme, dark, lambda v: dark.set_value(v == ColorScheme.DARK))
        for binding in (params.locale, params.text_size, params.layout_direction,
                        params.accessibility_enabled):
            follow_binding(binding, preview, apply_environment)

        panel_hidden = Binding.constant(False)
        panel = self.create_panel(panel_hidden, client)
        with ui.element('div').classes('panel-overlay') as overlay:
            panel.build()
        follow_binding(panel_hidden, overlay, lambda hidden: overlay.set_visibility(not hidden))


def create_app(settings_path: Optional[Path] = None) -> EnvSettingsApp:
    """Create application instance"""
    return EnvSettingsApp(settings_path)


def run_app(
    host: Optional[str] = None,
    port: Optional[int] = None,
    native: Optional[bool] = None,
    settings_path: Optional[Path] = None,
) -> None:
    """Run the application with NiceGUI"""
    env_app = create_app(settings_path)
    settings = env_app.settings

    @ui.page('/')
    def index(client: Client):
        env_app.create_ui(client)

    if native is None:
        native = settings.native

    logger.info("Starting %s on %s:%d (native=%s)",
                __app_name__, host or settings.host, port or settings.port, native)
    ui.run(
        host=host or settings.host,
        port=port or settings.port,
        title=__app_name__,
        native=native,
        reload=False,
        show=not native,
        uvicorn_logging_level='warning',
    )
