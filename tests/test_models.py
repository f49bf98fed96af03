"""Tests for envsettings.models.types"""

import pytest

from envsettings.models.types import ColorScheme, ContentSizeCategory, LayoutDirection


class TestEnumValues:
    """Persisted enum values"""

    def test_color_scheme_values(self):
        assert ColorScheme.LIGHT.value == "light"
        assert ColorScheme.DARK.value == "dark"

    def test_layout_direction_values(self):
        assert LayoutDirection.LEFT_TO_RIGHT.value == "ltr"
        assert LayoutDirection.RIGHT_TO_LEFT.value == "rtl"


class TestContentSizeCategory:
    """Tests for slider position mapping"""

    def test_twelve_categories_in_order(self):
        categories = ContentSizeCategory.ordered()
        assert len(categories) == 12
        assert categories[0] is ContentSizeCategory.EXTRA_SMALL
        assert categories[-1] is ContentSizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE

    def test_positions_strictly_increasing(self):
        positions = [c.float_value for c in ContentSizeCategory.ordered()]
        assert all(a < b for a, b in zip(positions, positions[1:]))

    def test_position_round_trip(self):
        for category in ContentSizeCategory:
            assert ContentSizeCategory.from_float(category.float_value) is category

    def test_positions_span_slider_range(self):
        assert ContentSizeCategory.EXTRA_SMALL.float_value == ContentSizeCategory.min_float()
        assert (ContentSizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE.float_value
                == ContentSizeCategory.max_float())

    @pytest.mark.parametrize("position,expected", [
        (1.9, ContentSizeCategory.MEDIUM),
        (2.2, ContentSizeCategory.MEDIUM),
        (2.5, ContentSizeCategory.LARGE),
        (2.7, ContentSizeCategory.LARGE),
    ])
    def test_from_float_picks_nearest(self, position, expected):
        assert ContentSizeCategory.from_float(position) is expected

    def test_from_float_clamps(self):
        assert ContentSizeCategory.from_float(-3.0) is ContentSizeCategory.EXTRA_SMALL
        assert (ContentSizeCategory.from_float(99.0)
                is ContentSizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE)

    def test_step_moves_one_stride(self):
        assert ContentSizeCategory.MEDIUM.step() is ContentSizeCategory.LARGE
        assert ContentSizeCategory.MEDIUM.step(-1) is ContentSizeCategory.SMALL

    def test_step_clamps_at_ends(self):
        assert ContentSizeCategory.EXTRA_SMALL.step(-1) is ContentSizeCategory.EXTRA_SMALL
        largest = ContentSizeCategory.ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE
        assert largest.step() is largest

    def test_display_names_unique(self):
        names = [c.display_name for c in ContentSizeCategory]
        assert len(set(names)) == len(names)
        assert ContentSizeCategory.MEDIUM.display_name == "M"
        assert ContentSizeCategory.LARGE.display_name == "L"

    def test_point_sizes_increasing(self):
        sizes = [c.point_size for c in ContentSizeCategory.ordered()]
        assert all(a < b for a, b in zip(sizes, sizes[1:]))

    def test_accessibility_categories(self):
        assert not ContentSizeCategory.EXTRA_EXTRA_EXTRA_LARGE.is_accessibility_category
        assert ContentSizeCategory.ACCESSIBILITY_MEDIUM.is_accessibility_category
