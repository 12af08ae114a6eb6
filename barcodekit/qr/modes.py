"""Data encoding modes of QR codes: numeric, alphanumeric, byte and automatic."""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

from barcodekit.bitlist import BitList
from barcodekit.qr.versions import (
    EncodingMode,
    ErrorCorrectionLevel,
    VersionInfo,
    find_smallest_version_info,
)

EncodeResult = tuple[BitList, VersionInfo]
EncodeFn = Callable[[str, ErrorCorrectionLevel], EncodeResult]

ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

_NUMBER = re.compile(r"[+-]?[0-9]+")


class Encoding(Enum):
    """How the content of a QR code is encoded."""

    AUTO = "Auto"
    NUMERIC = "Numeric"
    ALPHANUMERIC = "AlphaNumeric"
    UNICODE = "Unicode"

    def __str__(self) -> str:
        return self.value

    def encoder(self) -> EncodeFn:
        """Return the function that encodes content in this mode."""
        return _ENCODERS[self]


def add_padding_and_terminator(bits: BitList, vi: VersionInfo) -> None:
    """Append the terminator, byte alignment and pad bytes up to the version's capacity."""
    capacity = vi.total_data_bytes() * 8
    for _ in range(4):
        if len(bits) >= capacity:
            break
        bits.add_bit(False)

    while len(bits) % 8 != 0:
        bits.add_bit(False)

    pad_bytes = (236, 17)
    i = 0
    while len(bits) < capacity:
        bits.add_byte(pad_bytes[i % 2])
        i += 1


def _version_for(level: ErrorCorrectionLevel, mode: EncodingMode, bit_count: int) -> VersionInfo:
    vi = find_smallest_version_info(level, mode, bit_count)
    if vi is None:
        raise ValueError("too much data to encode")
    return vi


def _header(mode: EncodingMode, count: int, vi: VersionInfo) -> BitList:
    bits = BitList()
    bits.add_bits(int(mode), 4)
    bits.add_bits(count, vi.char_count_bits(mode))
    return bits


def encode_numeric(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode a string of decimal digits in numeric mode."""
    length = len(content)
    bit_count = (length // 3) * 10 + (0, 4, 7)[length % 3]
    vi = _version_for(level, EncodingMode.NUMERIC, bit_count)
    bits = _header(EncodingMode.NUMERIC, length, vi)

    for pos in range(0, length, 3):
        chunk = content[pos:pos + 3]
        if not _NUMBER.fullmatch(chunk) or int(chunk) < 0:
            raise ValueError(f'"{content}" can not be encoded as {Encoding.NUMERIC}')
        bits.add_bits(int(chunk), (10, 4, 7)[len(chunk) % 3])

    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_alphanumeric(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode upper-case letters, digits and `` $%*+-./:`` in alphanumeric mode."""
    length = len(content)
    bit_count = (length // 2) * 11 + (6 if length % 2 == 1 else 0)
    vi = _version_for(level, EncodingMode.ALPHANUMERIC, bit_count)
    bits = _header(EncodingMode.ALPHANUMERIC, length, vi)

    indices = [ALPHANUMERIC_CHARSET.find(ch) for ch in content]
    if any(idx < 0 for idx in indices):
        raise ValueError(f'"{content}" can not be encoded as {Encoding.ALPHANUMERIC}')

    pairs = iter(indices)
    for first, second in zip(pairs, pairs):
        bits.add_bits(first * 45 + second, 11)
    if length % 2 == 1:
        bits.add_bits(indices[-1], 6)

    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_unicode(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode the UTF-8 bytes of the content in byte mode, without an ECI header."""
    data = content.encode("utf-8")
    vi = _version_for(level, EncodingMode.BYTE, len(data) * 8)
    bits = _header(EncodingMode.BYTE, len(data), vi)
    for b in data:
        bits.add_byte(b)
    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_auto(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode with the first of numeric, alphanumeric and byte mode that fits."""
    for encoder in (encode_numeric, encode_alphanumeric, encode_unicode):
        try:
            return encoder(content, level)
        except ValueError:
            continue
    raise ValueError(f'no encoding found to encode "{content}"')


_ENCODERS: dict[Encoding, EncodeFn] = {
    Encoding.AUTO: encode_auto,
    Encoding.NUMERIC: encode_numeric,
    Encoding.ALPHANUMERIC: encode_alphanumeric,
    Encoding.UNICODE: encode_unicode,
}