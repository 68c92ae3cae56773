"""
Unit tests for layout configuration.
"""

import pytest
from tiler.config import LayoutConfig


@pytest.mark.unit
class TestLayoutConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = LayoutConfig()

        assert config.default_layout == "tile"
        assert config.layout_order() == ["tile", "monocle", "wide", "grid"]
        assert config.absorb_remainder is True
        assert config.debug is False

    def test_layout_order_is_a_copy(self):
        config = LayoutConfig(layouts=["grid", "tile"], default_layout="grid")

        config.layout_order().append("wide")

        assert config.layouts == ["grid", "tile"]

    def test_unknown_layout_in_order(self):
        with pytest.raises(ValueError, match="spiral"):
            LayoutConfig(layouts=["tile", "spiral"])

    def test_default_not_in_order(self):
        with pytest.raises(ValueError, match="monocle"):
            LayoutConfig(default_layout="monocle", layouts=["tile", "grid"])

    def test_empty_order(self):
        with pytest.raises(ValueError):
            LayoutConfig(layouts=[])

    def test_get_layouts(self):
        registry = LayoutConfig(absorb_remainder=False).get_layouts()

        assert registry.names() == ["tile", "monocle", "wide", "grid"]
        assert registry["tile"].absorb_remainder is False
