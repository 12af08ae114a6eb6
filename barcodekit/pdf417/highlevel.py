"""High level PDF417 encoding: splitting data into text, numeric and byte runs."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

LATCH_TO_TEXT = 900
LATCH_TO_BYTE_PADDED = 901
LATCH_TO_NUMERIC = 902
LATCH_TO_BYTE = 924
SHIFT_TO_BYTE = 913

MIN_NUMERIC_COUNT = 13

_DIGITS = frozenset("0123456789")


class EncodingMode(Enum):
    """The compaction mode the encoder is in."""

    TEXT = 0
    NUMERIC = 1
    BINARY = 2


class SubMode(Enum):
    """The sub-mode of text compaction."""

    UPPER = 0
    LOWER = 1
    MIXED = 2
    PUNCT = 3


def _index_map(raw: Sequence[int]) -> dict[str, int]:
    return {chr(code): idx for idx, code in enumerate(raw) if code > 0}


_MIXED = _index_map((
    48, 49, 50, 51, 52, 53, 54, 55, 56, 57, 38, 13, 9, 44, 58,
    35, 45, 46, 36, 47, 43, 37, 42, 61, 94, 0, 32, 0, 0, 0,
))
_PUNCT = _index_map((
    59, 60, 62, 64, 91, 92, 93, 95, 96, 126, 33, 13, 9, 44, 58,
    10, 45, 46, 36, 47, 34, 124, 42, 40, 41, 63, 123, 125, 39, 0,
))


def _is_digit_byte(b: int) -> bool:
    return 0x30 <= b <= 0x39


def _is_text_byte(b: int) -> bool:
    return b in (9, 10, 13) or 32 <= b <= 126


def _digit_count(data: bytes) -> int:
    count = 0
    for b in data:
        if not _is_digit_byte(b):
            break
        count += 1
    return count


def _text_count(data: bytes) -> int:
    result = 0
    for i, b in enumerate(data):
        numeric = _digit_count(data[i:])
        if numeric >= MIN_NUMERIC_COUNT or (numeric == 0 and not _is_text_byte(b)):
            break
        result += 1
    return result


def _binary_count(data: bytes) -> int:
    result = 0
    for i in range(len(data)):
        rest = data[i:]
        if _digit_count(rest) >= MIN_NUMERIC_COUNT:
            break
        if _text_count(rest) > 5:
            break
        result += 1
    return result


def encode_numeric(digits: str) -> list[int]:
    """Encode a string of decimal digits in numeric compaction."""
    if any(ch not in _DIGITS for ch in digits):
        raise ValueError(f"failed converting: {digits}")

    code_words: list[int] = []
    for start in range(0, len(digits), 44):
        number = int("1" + digits[start:start + 44])
        words: list[int] = []
        while number > 0:
            number, word = divmod(number, 900)
            words.append(word)
        code_words.extend(reversed(words))
    return code_words


def _is_alpha_upper(ch: str) -> bool:
    return ch == " " or "A" <= ch <= "Z"


def _is_alpha_lower(ch: str) -> bool:
    return ch == " " or "a" <= ch <= "z"


def encode_text(text: str, submode: SubMode) -> tuple[SubMode, list[int]]:
    """Encode text in text compaction; return the final sub-mode and the codewords."""
    values: list[int] = []
    idx = 0
    while idx < len(text):
        ch = text[idx]
        if submode is SubMode.UPPER:
            if _is_alpha_upper(ch):
                values.append(26 if ch == " " else ord(ch) - ord("A"))
            elif _is_alpha_lower(ch):
                submode = SubMode.LOWER
                values.append(27)  # lower latch
                continue
            elif ch in _MIXED:
                submode = SubMode.MIXED
                values.append(28)  # mixed latch
                continue
            else:
                values.extend((29, _PUNCT.get(ch, 0)))  # punctuation shift
        elif submode is SubMode.LOWER:
            if _is_alpha_lower(ch):
                values.append(26 if ch == " " else ord(ch) - ord("a"))
            elif _is_alpha_upper(ch):
                values.extend((27, ord(ch) - ord("A")))  # upper shift
            elif ch in _MIXED:
                submode = SubMode.MIXED
                values.append(28)  # mixed latch
                continue
            else:
                values.extend((29, _PUNCT.get(ch, 0)))  # punctuation shift
        elif submode is SubMode.MIXED:
            if ch in _MIXED:
                values.append(_MIXED[ch])
            elif _is_alpha_upper(ch):
                submode = SubMode.UPPER
                values.append(28)  # upper latch
                continue
            elif _is_alpha_lower(ch):
                submode = SubMode.LOWER
                values.append(27)  # lower latch
                continue
            else:
                if idx + 1 < len(text) and text[idx + 1] in _PUNCT:
                    submode = SubMode.PUNCT
                    values.append(25)  # punctuation latch
                    continue
                values.extend((29, _PUNCT.get(ch, 0)))  # punctuation shift
        else:
            if ch in _PUNCT:
                values.append(_PUNCT[ch])
            else:
                submode = SubMode.UPPER
                values.append(29)  # upper latch
                continue
        idx += 1

    if len(values) % 2:
        values.append(29)
    pairs = iter(values)
    return submode, [high * 30 + low for high, low in zip(pairs, pairs)]


def encode_binary(data: bytes, start_mode: EncodingMode) -> list[int]:
    """Encode raw bytes in byte compaction."""
    count = len(data)
    if count == 1 and start_mode is EncodingMode.TEXT:
        result = [SHIFT_TO_BYTE]
    elif count % 6 == 0:
        result = [LATCH_TO_BYTE]
    else:
        result = [LATCH_TO_BYTE_PADDED]

    full = count - count % 6
    for start in range(0, full, 6):
        value = int.from_bytes(data[start:start + 6], "big")
        words = []
        for _ in range(5):
            value, word = divmod(value, 900)
            words.append(word)
        result.extend(reversed(words))

    result.extend(data[full:])
    return result


def highlevel_encode(data: str) -> list[int]:
    """Return the PDF417 data codewords for ``data``, encoded as UTF-8."""
    mode = EncodingMode.TEXT
    submode = SubMode.UPPER
    result: list[int] = []
    rest = data.encode("utf-8")

    while rest:
        numeric = _digit_count(rest)
        if numeric >= MIN_NUMERIC_COUNT or numeric == len(rest):
            result.append(LATCH_TO_NUMERIC)
            mode = EncodingMode.NUMERIC
            submode = SubMode.UPPER
            result.extend(encode_numeric(rest[:numeric].decode("ascii")))
            rest = rest[numeric:]
            continue

        text = _text_count(rest)
        if text >= 5 or text == len(rest):
            if mode is not EncodingMode.TEXT:
                result.append(LATCH_TO_TEXT)
                mode = EncodingMode.TEXT
                submode = SubMode.UPPER
            submode, words = encode_text(rest[:text].decode("ascii"), submode)
            result.extend(words)
            rest = rest[text:]
            continue

        binary = _binary_count(rest) or 1
        chunk = rest[:binary]
        if len(chunk) != 1 or mode is not EncodingMode.TEXT:
            mode = EncodingMode.BINARY
            submode = SubMode.UPPER
        result.extend(encode_binary(chunk, mode))
        rest = rest[binary:]

    return result