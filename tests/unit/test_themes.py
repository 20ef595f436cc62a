"""Unit tests for theme descriptors."""

import pytest

from versa.contexts.rendering.themes import hex_to_rgb, theme_classes, theme_descriptors
from versa.contexts.templating import merge


@pytest.mark.unit
@pytest.mark.parametrize(
    "color, expected",
    [
        ("#1f6feb", (31, 111, 235)),
        ("#fff", (255, 255, 255)),
        ("zzz", None),
        ("#abc\n", None),
        (None, None),
    ],
)
def test_hex_to_rgb(color, expected):
    assert hex_to_rgb(color) == expected


@pytest.mark.unit
def test_theme_classes_use_theme_base():
    """Test classes are theme_base + version key in document order."""
    model = merge({}, {"config": {"theme_base": "t-"}, "versions": {"b": {}, "a": {}}})

    assert theme_classes(model) == ["t-b", "t-a"]


@pytest.mark.unit
def test_theme_descriptors():
    """Test descriptors carry class, color and rgb per version."""
    model = merge({}, {"versions": {"ai": {"theme_color": "#000000"}, "web": {}}})

    assert theme_descriptors(model) == [
        {"version": "ai", "theme_class": "theme-ai", "color": "#000000", "rgb": (0, 0, 0)},
        {"version": "web", "theme_class": "theme-web", "color": "#666666", "rgb": (102, 102, 102)},
    ]
