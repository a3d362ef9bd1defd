import pytest

from epd_dither.errors import ConfigurationError
from epd_dither.processing.color import Palette
from epd_dither.processing.palette import (
    get_default_palette,
    get_device_colors,
    list_palettes,
    load_palette,
    match,
    nearest_palette_index,
)

SPECTRA6 = Palette(
    "spectra6",
    ((25, 30, 33), (232, 232, 232), (33, 87, 186), (18, 95, 32), (178, 19, 24), (239, 222, 68)),
)
BLACK_WHITE = Palette("bw", ((0, 0, 0), (255, 255, 255)))


def test_reddish_pixel_matches_spectra6_red():
    assert match((200, 20, 20), SPECTRA6) == (178, 19, 24)


@pytest.mark.parametrize(
    "pixel, expected",
    [
        ((100, 100, 100), (0, 0, 0)),
        ((200, 200, 200), (255, 255, 255)),
        ((0, 0, 0), (0, 0, 0)),
        ((255, 255, 255), (255, 255, 255)),
    ],
)
def test_black_white_matching(pixel, expected):
    assert match(pixel, BLACK_WHITE) == expected


def test_palette_colors_match_themselves():
    for color in SPECTRA6.colors:
        assert match(color, SPECTRA6) == color


def test_ties_resolve_to_earliest_entry():
    palette = Palette("tie", ((0, 0, 0), (100, 100, 100), (200, 200, 200)))

    # (50, 50, 50) is equally far from the first two entries.
    assert nearest_palette_index((50, 50, 50), palette.colors) == 0
    assert nearest_palette_index((150, 150, 150), palette.colors) == 1


def test_duplicate_entries_resolve_to_first_index():
    colors = ((100, 100, 100), (100, 100, 100), (200, 200, 200))

    assert nearest_palette_index((110, 110, 110), colors) == 0


def test_alpha_comes_from_palette_entry_when_defined():
    palette = Palette("alpha", ((255, 0, 0, 128),))

    assert match((255, 0, 0, 255), palette) == (255, 0, 0, 128)


def test_alpha_falls_back_to_pixel_alpha():
    assert match((10, 10, 10, 77), BLACK_WHITE) == (0, 0, 0, 77)


def test_rgb_pixel_gets_rgb_match():
    palette = Palette("alpha", ((255, 0, 0, 128),))

    assert match((250, 5, 5), palette) == (255, 0, 0)


def test_empty_color_sequence_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        nearest_palette_index((0, 0, 0), ())


def test_named_palette_tables():
    assert get_default_palette("SPECTRA6") == get_default_palette("spectra6")
    assert get_default_palette("unknown-palette") == ("#000", "#fff")
    assert get_device_colors("unknown-device") == ("#e6e6e6", "#212121")
    assert "gameboy" in list_palettes()


@pytest.mark.parametrize("name", ["default", "spectra6", "acep", "gameboy"])
def test_device_colors_line_up_with_palettes(name):
    assert len(get_default_palette(name)) == len(get_device_colors(name))


def test_load_palette_rejects_unknown_names():
    assert len(load_palette("acep")) == 7
    with pytest.raises(ConfigurationError):
        load_palette("nope")
