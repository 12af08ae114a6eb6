"""Resizing barcodes to a given image size."""

from __future__ import annotations

from collections.abc import Callable

from barcodekit.base import WHITE, Barcode, Color, Metadata

PixelFunc = Callable[[int, int], Color]


class ScaledBarcode(Barcode):
    """A barcode drawn through a pixel mapping onto a larger image."""

    def __init__(self, wrapped: Barcode, pixel_func: PixelFunc, width: int, height: int) -> None:
        self.wrapped = wrapped
        self._pixel_func = pixel_func
        self.width = width
        self.height = height

    def content(self) -> str:
        return self.wrapped.content()

    def metadata(self) -> Metadata:
        return self.wrapped.metadata()

    def bounds(self) -> tuple[int, int, int, int]:
        return (0, 0, self.width, self.height)

    def at(self, x: int, y: int) -> Color:
        return self._pixel_func(x, y)

    def checksum(self) -> int:
        """Return the wrapped barcode's integer checksum, or 0 if it has none."""
        value = getattr(self.wrapped, "checksum", None)
        if callable(value):
            value = value()
        return value if isinstance(value, int) else 0


def scale(bc: Barcode, width: int, height: int) -> ScaledBarcode:
    """Resize ``bc`` to ``width`` x ``height``, filling with its background."""
    fill = bc.color.background if bc.color is not None else WHITE
    return scale_with_fill(bc, width, height, fill)


def scale_with_fill(bc: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    """Resize ``bc`` to ``width`` x ``height``, filling the margins with ``fill``."""
    dimensions = bc.metadata().dimensions
    if dimensions == 1:
        return _scale_1d(bc, width, height, fill)
    if dimensions == 2:
        return _scale_2d(bc, width, height, fill)
    raise ValueError("unsupported barcode format")


def _scale_2d(bc: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    min_x, min_y, max_x, max_y = bc.bounds()
    org_width = max_x - min_x
    org_height = max_y - min_y

    factor = int(min(width / org_width, height / org_height))
    if factor <= 0:
        raise ValueError(
            f"can not scale barcode to an image smaller than {org_width}x{org_height}"
        )

    offset_x = (width - org_width * factor) // 2
    offset_y = (height - org_height * factor) // 2

    def pixel(x: int, y: int) -> Color:
        if x < offset_x or y < offset_y:
            return fill
        x = (x - offset_x) // factor
        y = (y - offset_y) // factor
        if x >= org_width or y >= org_height:
            return fill
        return bc.at(x, y)

    return ScaledBarcode(bc, pixel, width, height)


def _scale_1d(bc: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    min_x, _, max_x, _ = bc.bounds()
    org_width = max_x - min_x

    factor = int(width / org_width)
    if factor <= 0:
        raise ValueError(f"can not scale barcode to an image smaller than {org_width}x1")

    offset_x = (width - org_width * factor) // 2

    def pixel(x: int, y: int) -> Color:
        if x < offset_x:
            return fill
        x = (x - offset_x) // factor
        if x >= org_width:
            return fill
        return bc.at(x, 0)

    return ScaledBarcode(bc, pixel, width, height)