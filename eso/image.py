"""PNG decoding into GE-ready RGBA8888 texture buffers, linear or swizzled."""

from __future__ import annotations

import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

_BYTES_PER_PIXEL = 4
_PITCH_ALIGN_PX = 8
_BLOCK_BYTES = 16
_BLOCK_ROWS = 8


class ImageDecodeError(ValueError):
    """Raised when PNG data cannot be decoded."""


@dataclass(frozen=True)
class DecodedImage:
    """A decoded texture: size in pixels, row pitch in pixels and raw RGBA bytes."""

    width: int
    height: int
    pitch: int
    pixels: bytes

    @property
    def bytes_per_row(self) -> int:
        return self.pitch * _BYTES_PER_PIXEL


def _decode_rgba(data: bytes) -> tuple[int, int, bytes]:
    try:
        img = Image.open(io.BytesIO(data))
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageDecodeError("bad header") from exc
    if img.format != "PNG":
        raise ImageDecodeError("bad header")
    try:
        img.load()
        rgba = img.convert("RGBA")
    except (OSError, ValueError, SyntaxError) as exc:
        raise ImageDecodeError("decode") from exc
    return rgba.width, rgba.height, rgba.tobytes()


def load_png(data: bytes) -> DecodedImage:
    """Decode PNG bytes to RGBA8888 with rows padded to a multiple of 8 pixels."""
    width, height, raw = _decode_rgba(bytes(data))
    pitch = (width + _PITCH_ALIGN_PX - 1) & ~(_PITCH_ALIGN_PX - 1)
    row_len = width * _BYTES_PER_PIXEL
    padding = bytes((pitch - width) * _BYTES_PER_PIXEL)
    view = memoryview(raw)
    pixels = b"".join(
        bytes(view[y * row_len:(y + 1) * row_len]) + padding for y in range(height)
    )
    return DecodedImage(width, height, pitch, pixels)


def swizzle(pixels: bytes, bytes_per_row: int, height: int) -> bytes:
    """Reorder a linear buffer into 16-byte by 8-row blocks.

    Rows past the last full block of eight are left zeroed, as the hardware
    layout has no place for them.
    """
    if bytes_per_row <= 0 or bytes_per_row % _BLOCK_BYTES:
        raise ValueError("bytes_per_row must be a positive multiple of 16")
    if height < 0:
        raise ValueError("height must not be negative")
    size = bytes_per_row * height
    if len(pixels) < size:
        raise ValueError("pixel buffer is smaller than bytes_per_row * height")

    view = memoryview(pixels)
    blocks = (
        view[start:start + _BLOCK_BYTES]
        for block_y in range(height // _BLOCK_ROWS)
        for block_x in range(bytes_per_row // _BLOCK_BYTES)
        for row in range(_BLOCK_ROWS)
        for start in ((block_y * _BLOCK_ROWS + row) * bytes_per_row + block_x * _BLOCK_BYTES,)
    )
    out = bytearray(size)
    swizzled = b"".join(blocks)
    out[:len(swizzled)] = swizzled
    return bytes(out)


def load_png_swizzled(data: bytes) -> DecodedImage:
    """Decode PNG bytes like load_png and return the pixels in swizzled order."""
    image = load_png(data)
    return DecodedImage(
        image.width,
        image.height,
        image.pitch,
        swizzle(image.pixels, image.bytes_per_row, image.height),
    )