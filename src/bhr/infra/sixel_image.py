"""Sixel rendering of employee profile photos.

Pillow decodes the downloaded photo; libsixel (the ``libsixel-python``
binding) quantises it and emits the sixel escape sequence.  Both are
optional and imported lazily, so every other command keeps working
without them.  Install them with ``pip install "bhr[image]"``.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from bhr.exceptions import EnvironmentError, ImageError

logger = logging.getLogger(__name__)

PALETTE_SIZE: int = 256


# ---------------------------------------------------------------------------
# Lazy imports
# ---------------------------------------------------------------------------

def _load_pillow_image() -> Any:
    """Return the ``PIL.Image`` module or raise ``EnvironmentError``."""
    try:
        from PIL import Image
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "Pillow is not installed. Install with: pip install \"bhr[image]\"",
        ) from exc
    return Image


def _load_libsixel() -> Any:
    """Return the ``libsixel`` binding or raise ``EnvironmentError``.

    The binding loads the libsixel shared library on import, so a missing
    system library surfaces as ``OSError`` rather than ``ImportError``.
    """
    try:
        import libsixel
    except (ImportError, OSError) as exc:
        raise EnvironmentError(
            "libsixel is not available.",
            hint="Install with: pip install \"bhr[image]\" "
            "plus the libsixel system library.",
        ) from exc
    return libsixel


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_photo(data: bytes) -> tuple[bytes, int, int]:
    """Decode *data* into packed RGB888 pixels.

    Returns
    -------
    tuple[bytes, int, int]
        ``(pixels, width, height)``.

    Raises
    ------
    ImageError
        If *data* is not a readable image.
    """
    image_module = _load_pillow_image()
    try:
        with image_module.open(io.BytesIO(data)) as image:
            rgb = image.convert("RGB")
    except (OSError, ValueError) as exc:
        raise ImageError(
            f"Profile photo could not be decoded: {exc}",
        ) from exc
    return rgb.tobytes(), rgb.width, rgb.height


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode_sixel(data: bytes) -> str:
    """Return *data* (a JPEG or PNG photo) as a sixel escape sequence.

    Raises
    ------
    ImageError
        If the photo cannot be decoded or libsixel fails to encode it.
    EnvironmentError
        If Pillow or libsixel is not installed.
    """
    pixels, width, height = decode_photo(data)
    sixel = _load_libsixel()
    logger.debug("Encoding %dx%d photo as sixel", width, height)

    chunks: list[bytes] = []
    output = sixel.sixel_output_new(lambda chunk, sink: sink.append(chunk), chunks)
    dither = sixel.sixel_dither_new(PALETTE_SIZE)
    try:
        sixel.sixel_dither_initialize(
            dither, pixels, width, height, sixel.SIXEL_PIXELFORMAT_RGB888,
        )
        sixel.sixel_encode(pixels, width, height, 1, dither, output)
    except RuntimeError as exc:
        raise ImageError(f"libsixel could not encode the photo: {exc}") from exc
    finally:
        sixel.sixel_output_unref(output)
        sixel.sixel_dither_unref(dither)

    return b"".join(chunks).decode("ascii")
