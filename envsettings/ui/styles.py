# envsettings/ui/styles.py
"""Panel and preview CSS, shipped as styles.css next to this module."""

from pathlib import Path

CSS_PATH = Path(__file__).with_name("styles.css")


def read_css(path: Path = CSS_PATH) -> str:
    """Stylesheet text; empty when the file is missing from the install."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


PANEL_CSS = read_css()
