import logging

from epd_dither.processing.buffer import PixelBuffer
from epd_dither.processing.color import ColorMapping
from epd_dither.processing.replace import replace_colors

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def test_all_red_becomes_all_green(caplog):
    buffer = PixelBuffer.filled(2, 2, RED)

    with caplog.at_level(logging.WARNING):
        result = replace_colors(buffer, ColorMapping.from_hex(["#FF0000"], ["#00FF00"]))

    assert set(buffer.colors()) == {GREEN}
    assert result.mismatched == 0
    assert result.replaced == 4
    assert result.ok
    assert "not replaced" not in caplog.text


def test_replacement_preserves_positions():
    buffer = PixelBuffer.from_pixels([[RED, GREEN, BLUE, RED]])
    mapping = ColorMapping.from_hex(["#FF0000", "#00FF00", "#0000FF"], ["#000000", "#FFFFFF", "#808080"])

    replace_colors(buffer, mapping)

    assert buffer.to_pixels() == [[(0, 0, 0), (255, 255, 255), (128, 128, 128), (0, 0, 0)]]


def test_spectra6_calibrated_colors_become_device_colors():
    calibrated = [(25, 30, 33), (232, 232, 232), (33, 87, 186)]
    buffer = PixelBuffer.from_pixels([calibrated, calibrated])
    mapping = ColorMapping.from_hex(["#191E21", "#e8e8e8", "#2157ba"], ["#000", "#FFF", "#00F"])

    replace_colors(buffer, mapping)

    assert buffer.to_pixels() == [[(0, 0, 0), (255, 255, 255), BLUE]] * 2


def test_unmatched_pixels_are_counted_and_left_alone(caplog):
    buffer = PixelBuffer.filled(2, 2, RED)

    with caplog.at_level(logging.WARNING):
        result = replace_colors(buffer, ColorMapping.from_hex(["#00FF00"], ["#0000FF"]))

    assert set(buffer.colors()) == {RED}
    assert result.mismatched == 4
    assert not result.ok
    assert "4 pixels were not replaced" in caplog.text


def test_mismatched_lengths_only_use_the_shared_prefix():
    buffer = PixelBuffer.from_pixels([[RED, GREEN]])
    mapping = ColorMapping.from_hex(["#FF0000", "#00FF00"], ["#000000"])

    result = replace_colors(buffer, mapping)

    assert buffer.to_pixels() == [[(0, 0, 0), GREEN]]
    assert result.replaced == 1
    assert result.mismatched == 1


def test_alpha_survives_replacement():
    buffer = PixelBuffer.filled(1, 2, (255, 0, 0, 40))

    replace_colors(buffer, ColorMapping.from_hex(["#F00"], ["#0F0"]))

    assert set(buffer.colors()) == {(0, 255, 0, 40)}


def test_empty_buffer_is_fine():
    buffer = PixelBuffer.from_pixels([])

    result = replace_colors(buffer, ColorMapping.from_hex(["#F00"], ["#0F0"]))

    assert result.replaced == 0
    assert result.mismatched == 0
