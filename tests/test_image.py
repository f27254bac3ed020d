import io

import pytest
from PIL import Image

from eso.image import DecodedImage, ImageDecodeError, load_png, load_png_swizzled, swizzle


def _png(width, height, color=None):
    img = Image.new("RGBA", (width, height))
    if color is None:
        img.putdata(
            [((x * 7) % 256, (y * 11) % 256, (x + y) % 256, 255) for y in range(height) for x in range(width)]
        )
    else:
        img.paste(color, (0, 0, width, height))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.mark.parametrize("width", [1, 5, 8, 9, 16, 17])
def test_pitch_is_aligned(width):
    image = load_png(_png(width, 3))
    assert image.width == width
    assert image.height == 3
    assert image.pitch % 8 == 0
    assert width <= image.pitch < width + 8
    assert len(image.pixels) == image.pitch * 4 * 3


def test_rows_copied_and_padded_with_zero():
    color = (10, 20, 30, 40)
    image = load_png(_png(5, 2, color))
    row = image.pixels[: image.bytes_per_row]
    assert row[:20] == bytes(color) * 5
    assert set(row[20:]) == {0}


def test_channel_order_is_rgba():
    image = load_png(_png(1, 1, (1, 2, 3, 4)))
    assert image.pixels[:4] == bytes([1, 2, 3, 4])


def test_bad_header_raises():
    with pytest.raises(ImageDecodeError):
        load_png(b"definitely not a png")


def test_non_png_image_rejected():
    buf = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buf, format="BMP")
    with pytest.raises(ImageDecodeError):
        load_png(buf.getvalue())


def test_swizzle_block_layout():
    bpr = 32
    src = bytes(range(bpr * 8))
    out = swizzle(src, bpr, 8)
    assert out[0:16] == src[0:16]
    assert out[16:32] == src[bpr:bpr + 16]
    assert out[128:144] == src[16:32]
    assert sorted(out) == sorted(src)


def test_swizzle_leaves_partial_block_rows_zero():
    bpr = 16
    src = bytes([7]) * (bpr * 10)
    out = swizzle(src, bpr, 10)
    assert len(out) == len(src)
    assert out[: bpr * 8] == src[: bpr * 8]
    assert set(out[bpr * 8:]) == {0}


def test_swizzle_rejects_bad_row_size():
    with pytest.raises(ValueError):
        swizzle(bytes(24), 12, 2)


def test_swizzle_rejects_short_buffer():
    with pytest.raises(ValueError):
        swizzle(bytes(16), 16, 8)


def test_load_png_swizzled_is_permutation_of_linear():
    data = _png(16, 8)
    linear = load_png(data)
    swizzled = load_png_swizzled(data)
    assert isinstance(swizzled, DecodedImage)
    assert (swizzled.width, swizzled.height, swizzled.pitch) == (linear.width, linear.height, linear.pitch)
    assert sorted(swizzled.pixels) == sorted(linear.pixels)
    assert swizzled.pixels[:16] == linear.pixels[:16]