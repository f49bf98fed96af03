# envsettings/ui/components/controls.py
"""
Control primitives for the settings panel.

Every control reads its initial value from a Binding, writes user changes
back through it and follows external changes to the bound value.
"""

import logging
from functools import lru_cache
from typing import Any, Callable, Iterable, Sequence

from nicegui import ui
from PIL import ImageFont

from envsettings.ui.state import Binding

logger = logging.getLogger(__name__)

# Font size (px) of the labels shown inside pickers and sliders
LABEL_FONT_SIZE = 13
# Room for the dropdown arrow and inner padding of a control
LABEL_PADDING = 32


class ControlWidth:
    """Shared width (px) of the interactive part of pickers and sliders.

    Controls report the width their labels need, the panel keeps the widest
    and applies it to every control.
    """
    DEFAULT_VALUE = 80.0

    @staticmethod
    def reduce(widths: Iterable[float], minimum: float = DEFAULT_VALUE) -> float:
        return max([float(minimum), *(float(w) for w in widths)])


@lru_cache(maxsize=8)
def _label_font(size: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def measure_label_width(text: str, font_size: int = LABEL_FONT_SIZE) -> float:
    """Width (px) a label needs, including control padding"""
    return _label_font(font_size).getlength(text) + LABEL_PADDING


def follow_binding(binding: Binding, element: ui.element, apply: Callable[[Any], None]) -> None:
    """Apply external changes of binding to element.

    The observer is removed when the element's client is deleted, or on the
    next change after the element itself was deleted.
    """
    unsubscribe: Callable[[], None] = lambda: None

    def on_change(value: Any) -> None:
        if element.is_deleted:
            unsubscribe()
            return
        apply(value)

    unsubscribe = binding.observe(on_change)
    element.client.on_delete(unsubscribe)


def settings_label(text: str) -> ui.label:
    return ui.label(text).classes('settings-label')


def settings_toggle(title: str, binding: Binding[bool]) -> ui.switch:
    """Switch bound to a boolean"""
    with ui.row().classes('settings-row w-full items-center justify-between no-wrap'):
        settings_label(title)
        switch = ui.switch(
            value=binding.get(),
            on_change=lambda e: binding.set(bool(e.value)),
        ).props(f'dense aria-label="{title}"')
    follow_binding(binding, switch, switch.set_value)
    return switch


def settings_picker(
    title: str,
    binding: Binding,
    values: Sequence[Any],
    value_title: Callable[[Any], str],
    width: float,
) -> ui.select:
    """Dropdown over values; value_title gives each value's display text"""
    options = {value_title(v): v for v in values}

    def on_select(title_value: str) -> None:
        if title_value in options:
            binding.set(options[title_value])

    with ui.row().classes('settings-row w-full items-center justify-between no-wrap'):
        settings_label(title)
        select = ui.select(
            list(options),
            value=value_title(binding.get()),
            on_change=lambda e: on_select(e.value),
        ).props('dense options-dense').style(f'width: {width:.0f}px')
    follow_binding(binding, select, lambda v: select.set_value(value_title(v)))
    return select


def settings_slider(
    title: str,
    binding: Binding[float],
    minimum: float,
    maximum: float,
    stride: float,
    width: float,
    value_label: Callable[[], str],
) -> ui.slider:
    """Discrete slider with a live label produced by value_label"""
    def on_slide(value: float) -> None:
        binding.set(float(value))
        label.set_text(value_label())

    with ui.column().classes('settings-row w-full gap-0'):
        with ui.row().classes('w-full items-center justify-between no-wrap'):
            settings_label(title)
            label = ui.label(value_label()).classes('settings-value').mark('settings-value')
        with ui.row().classes('w-full justify-end no-wrap'):
            slider = ui.slider(
                min=minimum,
                max=maximum,
                step=stride,
                value=binding.get(),
                on_change=lambda e: on_slide(e.value),
            ).props('dense markers snap').style(f'width: {width:.0f}px')

    def refresh(value: float) -> None:
        slider.set_value(value)
        label.set_text(value_label())

    follow_binding(binding, slider, refresh)
    return slider
