# envsettings/ui/components/settings_panel.py
"""
Environment settings panel.

Renders, top to bottom:
- Title and divider
- Theme toggle (on = dark)
- Locale picker (disabled with fewer than two locales)
- Text size slider with the current size name
- Layout direction toggle (on = right-to-left)
- Accessibility toggle
- Screenshot button (disabled on desktop-class hosts)
"""

import asyncio
import logging
from typing import Optional

from nicegui import ui

from envsettings.models.types import ColorScheme, ContentSizeCategory, LayoutDirection
from envsettings.services.haptic import HapticFeedback, LoggingHaptic
from envsettings.services.platform import is_desktop_class
from envsettings.services.screenshot import ScreenshotService
from envsettings.ui.components.controls import (
    ControlWidth,
    measure_label_width,
    settings_picker,
    settings_slider,
    settings_toggle,
)
from envsettings.ui.state import Binding, ScreenshotPhase, SettingsParams

logger = logging.getLogger(__name__)


class Labels:
    """Panel texts"""
    TITLE = "Environment Settings"
    THEME = "Light or Dark"
    LOCALE = "Locale"
    TEXT = "Text"
    LAYOUT = "Inverse Layout"
    ACCESSIBILITY = "Accessibility"
    SCREENSHOT = "Take Screenshot"


# Time for the hidden panel to disappear from screen before capturing
SCREENSHOT_DELAY = 0.1


class ScreenshotAction:
    """
    Hide the panel, capture the screen, give haptic feedback, show the panel.

    Only one sequence runs at a time; activations while a sequence is in
    flight are ignored.
    """

    def __init__(
        self,
        is_hidden: Binding[bool],
        service: ScreenshotService,
        haptic: HapticFeedback,
        delay: float = SCREENSHOT_DELAY,
    ):
        self.is_hidden = is_hidden
        self.service = service
        self.haptic = haptic
        self.delay = delay
        self.phase = ScreenshotPhase.IDLE

    @property
    def in_flight(self) -> bool:
        return self.phase != ScreenshotPhase.IDLE

    async def run(self) -> Optional[bool]:
        """Run one sequence.

        Returns the capture result, or None if a sequence was already running.
        """
        if self.in_flight:
            logger.debug("Screenshot already in progress (%s)", self.phase.value)
            return None

        self.phase = ScreenshotPhase.HIDING
        self.is_hidden.set(True)
        try:
            await asyncio.sleep(self.delay)

            self.phase = ScreenshotPhase.CAPTURING
            succeeded = await asyncio.to_thread(self.service.capture)

            self.phase = ScreenshotPhase.RESTORING
            if succeeded:
                self.haptic.success()
            else:
                self.haptic.failure()
            return succeeded
        finally:
            self.is_hidden.set(False)
            self.phase = ScreenshotPhase.IDLE


class SettingsPanel:
    """Settings form over caller-owned bindings"""

    def __init__(
        self,
        params: SettingsParams,
        is_hidden: Binding[bool],
        screenshot_service: Optional[ScreenshotService] = None,
        haptic: Optional[HapticFeedback] = None,
        desktop_class: Optional[bool] = None,
        min_control_width: float = ControlWidth.DEFAULT_VALUE,
        screenshot_delay: float = SCREENSHOT_DELAY,
    ):
        self.params = params
        self.is_hidden = is_hidden
        self.desktop_class = is_desktop_class() if desktop_class is None else desktop_class
        self.screenshot = ScreenshotAction(
            is_hidden,
            screenshot_service or ScreenshotService(),
            haptic or LoggingHaptic(),
            delay=screenshot_delay,
        )

        self.theme_binding: Binding[bool] = params.color_scheme.map(
            lambda scheme: scheme == ColorScheme.DARK,
            lambda dark: ColorScheme.DARK if dark else ColorScheme.LIGHT,
        )
        self.layout_binding: Binding[bool] = params.layout_direction.map(
            lambda direction: direction == LayoutDirection.RIGHT_TO_LEFT,
            lambda rtl: LayoutDirection.RIGHT_TO_LEFT if rtl else LayoutDirection.LEFT_TO_RIGHT,
        )
        self.text_size_position: Binding[float] = params.text_size.map(
            lambda category: category.float_value,
            ContentSizeCategory.from_float,
        )

        self.control_width = self._measure_control_width(min_control_width)
        self._screenshot_button: Optional[ui.button] = None

    def _measure_control_width(self, minimum: float) -> float:
        """Widest label of the picker and the slider"""
        labels = [str(locale) for locale in self.params.locales]
        labels += [category.display_name for category in ContentSizeCategory]
        return ControlWidth.reduce((measure_label_width(text) for text in labels), minimum)

    @property
    def locale_selector_enabled(self) -> bool:
        return len(self.params.locales) >= 2

    @property
    def screenshot_enabled(self) -> bool:
        return not self.desktop_class and not self.screenshot.in_flight

    def text_size_name(self) -> str:
        return self.params.text_size.get().display_name

    def build(self) -> ui.column:
        """Create the panel elements in the current NiceGUI context"""
        with ui.column().classes('settings-panel gap-2 py-2') as panel:
            ui.label(Labels.TITLE).classes('settings-title px-2')
            ui.separator()
            with ui.column().classes('w-full gap-2 px-2'):
                settings_toggle(Labels.THEME, self.theme_binding)

                picker = settings_picker(
                    Labels.LOCALE,
                    self.params.locale,
                    self.params.locales,
                    value_title=str,
                    width=self.control_width,
                )
                picker.mark('locale-picker').set_enabled(self.locale_selector_enabled)

                slider = settings_slider(
                    Labels.TEXT,
                    self.text_size_position,
                    minimum=ContentSizeCategory.min_float(),
                    maximum=ContentSizeCategory.max_float(),
                    stride=ContentSizeCategory.stride(),
                    width=self.control_width,
                    value_label=self.text_size_name,
                )
                slider.mark('text-size-slider')

                settings_toggle(Labels.LAYOUT, self.layout_binding)
                settings_toggle(Labels.ACCESSIBILITY, self.params.accessibility_enabled)

                self._screenshot_button = ui.button(
                    Labels.SCREENSHOT,
                    on_click=self.take_screenshot,
                ).props('flat dense no-caps').classes('settings-button').mark('screenshot-button')
                self._screenshot_button.set_enabled(self.screenshot_enabled)
        return panel

    async def take_screenshot(self) -> Optional[bool]:
        """Screenshot button handler"""
        if not self.screenshot_enabled:
            return None
        if self._screenshot_button is not None:
            self._screenshot_button.set_enabled(False)
        try:
            return await self.screenshot.run()
        finally:
            if self._screenshot_button is not None:
                self._screenshot_button.set_enabled(self.screenshot_enabled)
