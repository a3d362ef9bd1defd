import pytest
from PIL import Image

from epd_dither.errors import ConfigurationError
from epd_dither.processing.buffer import PixelBuffer


def test_round_trip_through_pillow_keeps_pixels():
    img = Image.new("RGB", (3, 2), color=(10, 20, 30))
    img.putpixel((2, 1), (200, 100, 0))

    buffer = PixelBuffer.from_image(img)

    assert (buffer.width, buffer.height, buffer.channels) == (3, 2, 3)
    assert buffer[2, 1] == [200, 100, 0]
    assert list(buffer.to_image().getdata()) == list(img.getdata())


def test_rgba_images_keep_alpha():
    buffer = PixelBuffer.from_image(Image.new("RGBA", (2, 2), color=(1, 2, 3, 4)))

    assert buffer.channels == 4
    assert buffer.to_image().mode == "RGBA"


def test_palette_mode_images_are_converted_to_rgb():
    buffer = PixelBuffer.from_image(Image.new("P", (2, 2)))

    assert buffer.channels == 3


def test_to_image_clamps_out_of_range_values():
    buffer = PixelBuffer.from_pixels([[(-12.5, 300.2, 128.9)]])

    assert buffer.to_image().getpixel((0, 0)) == (0, 255, 128)


def test_ragged_rows_are_rejected():
    with pytest.raises(ConfigurationError):
        PixelBuffer.from_pixels([[(0, 0, 0)], [(0, 0, 0), (1, 1, 1)]])


def test_copy_is_independent():
    buffer = PixelBuffer.filled(2, 1, (5, 5, 5))
    clone = buffer.copy()

    clone[0, 0] = (9, 9, 9)

    assert buffer[0, 0] == [5, 5, 5]
