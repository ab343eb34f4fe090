import pytest

from engine3d import colors
from engine3d.vectors import Vector4


def test_primary_colours_fixed_by_table():
    assert colors.RED == Vector4(1.0, 0.0, 0.0, 1.0)
    assert colors.BLUE == Vector4(0.0, 0.0, 1.0, 1.0)
    assert colors.BLACK == Vector4(0.0, 0.0, 0.0, 1.0)
    assert colors.WHITE == Vector4(1.0, 1.0, 1.0, 1.0)


def test_green_is_half_intensity_per_table():
    assert colors.by_name("Green").g == 0.501960814
    assert colors.by_name("Lime").g == 1.0


def test_transparent_has_zero_alpha():
    transparent = colors.by_name("Transparent")
    assert transparent.a == 0.0
    assert tuple(transparent) == (0.0, 0.0, 0.0, 0.0)


def test_aliases_share_values():
    assert colors.by_name("Aqua") == colors.by_name("Cyan") == colors.CYAN
    assert colors.by_name("Fuchsia") == colors.by_name("Magenta") == colors.MAGENTA


def test_all_components_within_unit_range():
    for color in colors.NAMED.values():
        assert all(0.0 <= c <= 1.0 for c in color)


def test_only_transparent_is_not_opaque():
    translucent = [name for name, c in colors.NAMED.items() if c.a != 1.0]
    assert translucent == ["Transparent"]


@pytest.mark.parametrize("name", ["CornflowerBlue", "cornflowerblue", "CORNFLOWER_BLUE", "cornflower blue"])
def test_by_name_spellings(name):
    assert colors.by_name(name) == colors.CORNFLOWER_BLUE


def test_by_name_matches_named_table():
    for name, color in colors.NAMED.items():
        assert colors.by_name(name) == color


def test_by_name_unknown_raises():
    with pytest.raises(KeyError):
        colors.by_name("NotAColour")


def test_named_table_is_read_only():
    with pytest.raises(TypeError):
        colors.NAMED["Red"] = colors.BLUE
    assert colors.by_name("Red") == Vector4(1.0, 0.0, 0.0, 1.0)


def test_rgba_accessors():
    c = colors.by_name("CornflowerBlue")
    assert (c.r, c.g, c.b, c.a) == (0.392156899, 0.584313750, 0.929411829, 1.0)