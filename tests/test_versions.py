import pytest

from barcodekit.qr.versions import (
    VERSION_INFOS,
    EncodingMode,
    ErrorCorrectionLevel,
    VersionInfo,
    find_smallest_version_info,
)

L, M, Q, H = ErrorCorrectionLevel

TEST_VI = VersionInfo(7, M, 0, 1, 10, 2, 5)


@pytest.mark.parametrize("level, text", [(L, "L"), (M, "M"), (Q, "Q"), (H, "H")])
def test_level_str(level, text):
    assert str(level) == text


@pytest.mark.parametrize(
    "version, mode, bits",
    [
        (5, EncodingMode.NUMERIC, 10),
        (5, EncodingMode.ALPHANUMERIC, 9),
        (5, EncodingMode.BYTE, 8),
        (5, EncodingMode.KANJI, 8),
        (15, EncodingMode.NUMERIC, 12),
        (15, EncodingMode.ALPHANUMERIC, 11),
        (15, EncodingMode.BYTE, 16),
        (15, EncodingMode.KANJI, 10),
        (30, EncodingMode.NUMERIC, 14),
        (30, EncodingMode.ALPHANUMERIC, 13),
        (30, EncodingMode.BYTE, 16),
        (30, EncodingMode.KANJI, 12),
        (5, 3, 0),
    ],
)
def test_char_count_bits(version, mode, bits):
    assert VersionInfo(version, M, 0, 0, 0, 0, 0).char_count_bits(mode) == bits


def test_total_data_bytes():
    assert TEST_VI.total_data_bytes() == 20


def test_module_width():
    assert TEST_VI.module_width() == 45


def test_find_smallest_none():
    assert find_smallest_version_info(H, EncodingMode.ALPHANUMERIC, 10208) is None


@pytest.mark.parametrize(
    "capacity, version",
    [(10191, 40), (5591, 29), (5592, 30), (190, 3), (200, 4)],
)
def test_find_smallest(capacity, version):
    vi = find_smallest_version_info(H, EncodingMode.ALPHANUMERIC, capacity)
    assert vi is not None
    assert vi.version == version
    assert vi.level == H


@pytest.mark.parametrize("level", list(ErrorCorrectionLevel))
def test_table_covers_all_versions_and_levels(level):
    smallest = find_smallest_version_info(level, EncodingMode.BYTE, 0)
    assert smallest.version == 1
    assert smallest.level == level
    versions = sorted(vi.version for vi in VERSION_INFOS if vi.level == level)
    assert versions == list(range(1, 41))


ALIGNMENTS = {
    1: [],
    2: [6, 18],
    3: [6, 22],
    4: [6, 26],
    5: [6, 30],
    6: [6, 34],
    7: [6, 22, 38],
    8: [6, 24, 42],
    9: [6, 26, 46],
    10: [6, 28, 50],
    11: [6, 30, 54],
    12: [6, 32, 58],
    13: [6, 34, 62],
    14: [6, 26, 46, 66],
    15: [6, 26, 48, 70],
    16: [6, 26, 50, 74],
    17: [6, 30, 54, 78],
    18: [6, 30, 56, 82],
    19: [6, 30, 58, 86],
    20: [6, 34, 62, 90],
    21: [6, 28, 50, 72, 94],
    22: [6, 26, 50, 74, 98],
    23: [6, 30, 54, 78, 102],
    24: [6, 28, 54, 80, 106],
    25: [6, 32, 58, 84, 110],
    26: [6, 30, 58, 86, 114],
    27: [6, 34, 62, 90, 118],
    28: [6, 26, 50, 74, 98, 122],
    29: [6, 30, 54, 78, 102, 126],
    30: [6, 26, 52, 78, 104, 130],
    31: [6, 30, 56, 82, 108, 134],
    32: [6, 34, 60, 86, 112, 138],
    33: [6, 30, 58, 86, 114, 142],
    34: [6, 34, 62, 90, 118, 146],
    35: [6, 30, 54, 78, 102, 126, 150],
    36: [6, 24, 50, 76, 102, 128, 154],
    37: [6, 28, 54, 80, 106, 132, 158],
    38: [6, 32, 58, 84, 110, 136, 162],
    39: [6, 26, 54, 82, 110, 138, 166],
    40: [6, 30, 58, 86, 114, 142, 170],
}


@pytest.mark.parametrize("version, expected", sorted(ALIGNMENTS.items()))
def test_alignment_pattern_placements(version, expected):
    vi = VersionInfo(version, M, 0, 0, 0, 0, 0)
    assert vi.alignment_pattern_placements() == expected