"""Function patterns of a QR symbol: finders, alignment, format and version info."""

from __future__ import annotations

from collections.abc import Callable

from barcodekit.qr.matrix import QRCode
from barcodekit.qr.versions import ErrorCorrectionLevel, VersionInfo

SetModule = Callable[[int, int, bool], None]

_FORMAT_GENERATOR = 0x537
_FORMAT_MASK = 0x5412
_VERSION_GENERATOR = 0x1F25

_LEVEL_BITS = {
    ErrorCorrectionLevel.L: 0b01,
    ErrorCorrectionLevel.M: 0b00,
    ErrorCorrectionLevel.Q: 0b11,
    ErrorCorrectionLevel.H: 0b10,
}


def _bch_encode(value: int, generator: int) -> int:
    """Append the BCH remainder of ``value`` for ``generator`` to ``value``."""
    degree = generator.bit_length() - 1
    shifted = value << degree
    rem = shifted
    while rem.bit_length() > degree:
        rem ^= generator << (rem.bit_length() - generator.bit_length())
    return shifted | rem


def _format_bits(level: ErrorCorrectionLevel, mask: int) -> list[bool]:
    """Return the 15 format information bits, most significant first."""
    word = _bch_encode((_LEVEL_BITS[level] << 3) | mask, _FORMAT_GENERATOR) ^ _FORMAT_MASK
    return [bool((word >> shift) & 1) for shift in range(14, -1, -1)]


def _version_bits(version: int) -> int:
    """Return the 18-bit version information word."""
    return _bch_encode(version, _VERSION_GENERATOR)


def draw_finder_patterns(vi: VersionInfo, set_module: SetModule) -> None:
    """Draw the three finder patterns with their separators."""
    dim = vi.module_width()
    for xoff, yoff in ((0, 0), (0, dim - 7), (dim - 7, 0)):
        for x in range(-1, 8):
            for y in range(-1, 8):
                inside = 0 <= x <= 6 and 0 <= y <= 6
                value = inside and (
                    x in (0, 6) or y in (0, 6) or (1 < x < 5 and 1 < y < 5)
                )
                px, py = x + xoff, y + yoff
                if 0 <= px < dim and 0 <= py < dim:
                    set_module(px, py, value)


def draw_alignment_patterns(occupied: QRCode, vi: VersionInfo, set_module: SetModule) -> None:
    """Draw the alignment patterns whose centres are not already occupied."""
    positions = vi.alignment_pattern_placements()
    for cx in positions:
        for cy in positions:
            if occupied.get(cx, cy):
                continue
            for x in range(-2, 3):
                for y in range(-2, 3):
                    value = abs(x) == 2 or abs(y) == 2 or (x == 0 and y == 0)
                    set_module(cx + x, cy + y, value)


def draw_format_info(vi: VersionInfo, used_mask: int, set_module: SetModule) -> None:
    """Draw both copies of the format information; mask -1 marks all of them dark."""
    if used_mask == -1:
        bits = [True] * 15
    elif 0 <= used_mask < 8:
        bits = _format_bits(vi.level, used_mask)
    else:
        return

    dim = vi.module_width()
    first = [
        (0, 8), (1, 8), (2, 8), (3, 8), (4, 8), (5, 8), (7, 8), (8, 8),
        (8, 7), (8, 5), (8, 4), (8, 3), (8, 2), (8, 1), (8, 0),
    ]
    second = [(8, dim - 1 - i) for i in range(7)] + [(dim - 15 + i, 8) for i in range(7, 15)]
    for bit, (x1, y1), (x2, y2) in zip(bits, first, second):
        set_module(x1, y1, bit)
        set_module(x2, y2, bit)


def draw_version_info(vi: VersionInfo, set_module: SetModule) -> None:
    """Draw both copies of the version information for versions 7 and up."""
    if not 7 <= vi.version <= 40:
        return
    word = _version_bits(vi.version)
    base = vi.module_width() - 11
    for i in range(18):
        x = base + i % 3
        y = i // 3
        value = bool((word >> i) & 1)
        set_module(x, y, value)
        set_module(y, x, value)