"""Placing QR data into a symbol and choosing the best mask."""

from __future__ import annotations

from collections.abc import Iterator

from barcodekit.base import COLOR_SCHEME_16, ColorScheme
from barcodekit.qr.blocks import interleave, split_to_blocks
from barcodekit.qr.matrix import QRCode
from barcodekit.qr.modes import Encoding
from barcodekit.qr.patterns import (
    SetModule,
    draw_alignment_patterns,
    draw_finder_patterns,
    draw_format_info,
    draw_version_info,
)
from barcodekit.qr.versions import ErrorCorrectionLevel, VersionInfo

_MASK_COUNT = 8


def encode_with_color(
    content: str, level: ErrorCorrectionLevel, mode: Encoding, color: ColorScheme
) -> QRCode:
    """Return a QR code for ``content`` drawn with ``color``.

    Raises ValueError when the content cannot be encoded in ``mode``.
    """
    bits, vi = mode.encoder()(content, level)
    blocks = split_to_blocks(bits.iterate_bytes(), vi)
    data = interleave(blocks, vi)
    result = render(data, vi, color)
    result.text = content
    return result


def encode(content: str, level: ErrorCorrectionLevel, mode: Encoding) -> QRCode:
    """Return a QR code for ``content`` in the default black and white scheme."""
    return encode_with_color(content, level, mode, COLOR_SCHEME_16)


def render(data: bytes, vi: VersionInfo, color: ColorScheme) -> QRCode:
    """Draw the codewords into a symbol and return the mask with the lowest penalty."""
    dim = vi.module_width()
    results = [QRCode(dim, color) for _ in range(_MASK_COUNT)]
    occupied = QRCode(dim, color)

    def set_all(x: int, y: int, value: bool) -> None:
        occupied.set(x, y, True)
        for code in results:
            code.set(x, y, value)

    draw_finder_patterns(vi, set_all)
    draw_alignment_patterns(occupied, vi, set_all)

    for i in range(dim):
        if not occupied.get(i, 6):
            set_all(i, 6, i % 2 == 0)
        if not occupied.get(6, i):
            set_all(6, i, i % 2 == 0)

    set_all(8, dim - 8, True)  # dark module

    draw_version_info(vi, set_all)
    draw_format_info(vi, -1, occupied.set)
    for mask, code in enumerate(results):
        draw_format_info(vi, mask, code.set)

    total_bits = len(data) * 8
    for bit_no, (x, y) in enumerate(iterate_modules(occupied)):
        if bit_no < total_bits:
            bit = ((data[bit_no // 8] >> (7 - bit_no % 8)) & 1) == 1
        else:
            bit = False
        for mask, code in enumerate(results):
            set_masked(x, y, bit, mask, code.set)

    return min(results, key=lambda code: code.penalty())


def set_masked(x: int, y: int, value: bool, mask: int, set_module: SetModule) -> None:
    """Set the module at (x, y) to ``value`` flipped by the given mask pattern."""
    if mask == 0:
        flip = (y + x) % 2 == 0
    elif mask == 1:
        flip = y % 2 == 0
    elif mask == 2:
        flip = x % 3 == 0
    elif mask == 3:
        flip = (y + x) % 3 == 0
    elif mask == 4:
        flip = (y // 2 + x // 3) % 2 == 0
    elif mask == 5:
        flip = (y * x) % 2 + (y * x) % 3 == 0
    elif mask == 6:
        flip = ((y * x) % 2 + (y * x) % 3) % 2 == 0
    elif mask == 7:
        flip = ((y + x) % 2 + (y * x) % 3) % 2 == 0
    else:
        flip = False
    set_module(x, y, value != flip)


def _zigzag(dim: int) -> Iterator[tuple[int, int]]:
    cur_x = dim - 1
    cur_y = dim - 1
    upward = True
    while True:
        yield cur_x, cur_y
        yield cur_x - 1, cur_y
        if upward:
            cur_y -= 1
            if cur_y < 0:
                cur_y = 0
                cur_x -= 2
                if cur_x == 6:
                    cur_x -= 1
                if cur_x < 0:
                    return
                upward = False
        else:
            cur_y += 1
            if cur_y >= dim:
                cur_y = dim - 1
                cur_x -= 2
                if cur_x == 6:
                    cur_x -= 1
                upward = True
                if cur_x < 0:
                    return


def iterate_modules(occupied: QRCode) -> Iterator[tuple[int, int]]:
    """Yield the free module positions in data placement order."""
    for x, y in _zigzag(occupied.dimension):
        if not occupied.get(x, y):
            yield x, y