# envsettings/models/types.py
"""
Environment value types for EnvSettings.
"""

from enum import Enum


class ColorScheme(Enum):
    """Color theme"""
    LIGHT = "light"
    DARK = "dark"


class LayoutDirection(Enum):
    """Layout direction"""
    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


# Short labels shown next to the text size slider
_SIZE_NAMES = {
    "extra_small": "XS",
    "small": "S",
    "medium": "M",
    "large": "L",
    "extra_large": "XL",
    "extra_extra_large": "XXL",
    "extra_extra_extra_large": "XXXL",
    "accessibility_medium": "AX M",
    "accessibility_large": "AX L",
    "accessibility_extra_large": "AX XL",
    "accessibility_extra_extra_large": "AX XXL",
    "accessibility_extra_extra_extra_large": "AX XXXL",
}

# Body text size (px) for each category, used by the preview area
_POINT_SIZES = {
    "extra_small": 14,
    "small": 15,
    "medium": 16,
    "large": 17,
    "extra_large": 19,
    "extra_extra_large": 21,
    "extra_extra_extra_large": 23,
    "accessibility_medium": 28,
    "accessibility_large": 33,
    "accessibility_extra_large": 40,
    "accessibility_extra_extra_large": 47,
    "accessibility_extra_extra_extra_large": 53,
}


class ContentSizeCategory(Enum):
    """
    Text size categories, ordered from smallest to largest.

    Each category maps to a slider position (its index in declaration order).
    The inverse mapping picks the nearest category, so any slider position
    resolves to a valid category.
    """
    EXTRA_SMALL = "extra_small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"
    EXTRA_EXTRA_LARGE = "extra_extra_large"
    EXTRA_EXTRA_EXTRA_LARGE = "extra_extra_extra_large"
    ACCESSIBILITY_MEDIUM = "accessibility_medium"
    ACCESSIBILITY_LARGE = "accessibility_large"
    ACCESSIBILITY_EXTRA_LARGE = "accessibility_extra_large"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "accessibility_extra_extra_large"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "accessibility_extra_extra_extra_large"

    @classmethod
    def ordered(cls) -> list["ContentSizeCategory"]:
        return list(cls)

    @classmethod
    def stride(cls) -> float:
        """Slider step between two neighbouring categories"""
        return 1.0

    @classmethod
    def min_float(cls) -> float:
        return 0.0

    @classmethod
    def max_float(cls) -> float:
        return (len(cls) - 1) * cls.stride()

    @property
    def float_value(self) -> float:
        """Slider position of this category"""
        return self.ordered().index(self) * self.stride()

    @classmethod
    def from_float(cls, position: float) -> "ContentSizeCategory":
        """Nearest category for a slider position (clamped to the range)"""
        categories = cls.ordered()
        # int(x + 0.5) rounds half up; round() would round half to even
        index = int(float(position) / cls.stride() + 0.5)
        index = max(0, min(index, len(categories) - 1))
        return categories[index]

    def step(self, by: int = 1) -> "ContentSizeCategory":
        """Move by a number of strides, clamped at both ends"""
        return self.from_float(self.float_value + by * self.stride())

    @property
    def display_name(self) -> str:
        return _SIZE_NAMES[self.value]

    @property
    def point_size(self) -> int:
        return _POINT_SIZES[self.value]

    @property
    def is_accessibility_category(self) -> bool:
        return self.value.startswith("accessibility_")
