"""Splitting QR data into error-corrected blocks and interleaving them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

from barcodekit.qr.correction import calc_ecc
from barcodekit.qr.versions import VersionInfo


@dataclass(frozen=True)
class Block:
    """The data codewords of one block and their error correction words."""

    data: bytes
    ecc: bytes


def _take_block(source: Iterator[int], count: int, ecc_count: int) -> Block:
    data = bytes(islice(source, count))
    if len(data) != count:
        raise ValueError("not enough data codewords for the version")
    return Block(data, calc_ecc(data, ecc_count))


def split_to_blocks(data: Iterable[int], vi: VersionInfo) -> list[Block]:
    """Split the data codewords into the blocks of ``vi`` and compute their ECC."""
    source = iter(data)
    groups = (
        (vi.blocks_in_group1, vi.data_codewords_per_block_group1),
        (vi.blocks_in_group2, vi.data_codewords_per_block_group2),
    )
    return [
        _take_block(source, words, vi.ecc_codewords_per_block)
        for blocks, words in groups
        for _ in range(blocks)
    ]


def interleave(blocks: list[Block], vi: VersionInfo) -> bytes:
    """Interleave the blocks' data codewords, then their ECC codewords."""
    max_words = max(vi.data_codewords_per_block_group1, vi.data_codewords_per_block_group2)
    result = bytearray()
    for i in range(max_words):
        result.extend(block.data[i] for block in blocks if len(block.data) > i)
    for i in range(vi.ecc_codewords_per_block):
        result.extend(block.ecc[i] for block in blocks)
    return bytes(result)