"""Image files loaded as linear 8-bit RGB data."""

from __future__ import annotations

import os
import sys
from typing import Optional, Union

from PIL import Image

_BYTES_PER_PIXEL = 3
_MAGENTA = (255, 0, 255)
_SEARCH_PREFIXES = (
    "",
    "images/",
    "../images/",
    "../../images/",
    "../../../images/",
    "../../../../images/",
    "../../../../../images/",
    "../../../../../../images/",
)


def _float_to_byte(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(256.0 * value)


# 8-bit sRGB-ish values to linear (gamma 2.2) bytes.
_LINEAR_BYTES = bytes(_float_to_byte((b / 255.0) ** 2.2) for b in range(256))


class RtwImage:
    """Linear RGB pixel data read from an image file.

    Given a file name, the image is looked for in the directory named by the
    ``RTW_IMAGES`` environment variable, then in the current directory, then in
    ``images/`` and in the ``images/`` directories up to six levels above.
    """

    def __init__(self, filename: Optional[str] = None) -> None:
        self._data: Optional[bytes] = None
        self._width = 0
        self._height = 0
        if filename is None:
            return

        name = str(filename)
        imagedir = os.environ.get("RTW_IMAGES")
        if imagedir and self.load(f"{imagedir}/{name}"):
            return
        if any(self.load(prefix + name) for prefix in _SEARCH_PREFIXES):
            return

        print(f"ERROR: Could not load image file '{name}'.", file=sys.stderr)

    def load(self, filename: Union[str, os.PathLike]) -> bool:
        """Load linear pixel data from ``filename``; return True on success."""
        try:
            with Image.open(filename) as img:
                rgb = img.convert("RGB")
                raw = rgb.tobytes()
                width, height = rgb.size
        except (OSError, ValueError):
            return False

        self._data = raw.translate(_LINEAR_BYTES)
        self._width = width
        self._height = height
        return True

    def width(self) -> int:
        return self._width if self._data is not None else 0

    def height(self) -> int:
        return self._height if self._data is not None else 0

    def pixel_data(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the RGB bytes at (x, y), clamped to the image; magenta when there is no image."""
        if self._data is None:
            return _MAGENTA

        x = min(max(x, 0), self._width - 1)
        y = min(max(y, 0), self._height - 1)
        offset = (y * self._width + x) * _BYTES_PER_PIXEL
        r, g, b = self._data[offset : offset + _BYTES_PER_PIXEL]
        return r, g, b