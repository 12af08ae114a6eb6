"""Common barcode types, colors and the generic one-dimensional code."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from barcodekit.bitlist import BitList

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

TYPE_QR = "QR Code"
TYPE_PDF = "PDF417"
TYPE_2OF5 = "2 of 5"
TYPE_2OF5_INTERLEAVED = "2 of 5 (interleaved)"


@dataclass(frozen=True)
class ColorScheme:
    """The colors a barcode is drawn with."""

    model: str
    background: Color
    foreground: Color


COLOR_SCHEME_16 = ColorScheme("gray16", WHITE, BLACK)


@dataclass(frozen=True)
class Metadata:
    """The kind of a barcode and whether it is one- or two-dimensional."""

    code_kind: str
    dimensions: int


class Barcode(ABC):
    """An image of a barcode; ``bounds`` is ``(min_x, min_y, max_x, max_y)``."""

    color: ColorScheme | None = None

    @abstractmethod
    def content(self) -> str:
        """Return the encoded content."""

    @abstractmethod
    def metadata(self) -> Metadata:
        """Return the barcode's metadata."""

    @abstractmethod
    def bounds(self) -> tuple[int, int, int, int]:
        """Return the image bounds."""

    @abstractmethod
    def at(self, x: int, y: int) -> Color:
        """Return the color at a pixel."""


class OneDCode(Barcode):
    """A one-dimensional barcode whose bars are the bits of a BitList."""

    def __init__(
        self,
        kind: str,
        content: str,
        bars: BitList,
        color: ColorScheme = COLOR_SCHEME_16,
        checksum: int | None = None,
    ) -> None:
        self.kind = kind
        self._content = content
        self.bars = bars
        self.color = color
        self.checksum = checksum

    def content(self) -> str:
        return self._content

    def metadata(self) -> Metadata:
        return Metadata(self.kind, 1)

    def bounds(self) -> tuple[int, int, int, int]:
        return (0, 0, len(self.bars), 1)

    def at(self, x: int, y: int) -> Color:
        return self.color.foreground if self.bars.get_bit(x) else self.color.background