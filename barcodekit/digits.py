"""Conversion between decimal digit characters and their values."""


def rune_to_int(r: str) -> int:
    """Return the value of a character '0'..'9', or -1 for anything else."""
    if len(r) == 1 and "0" <= r <= "9":
        return ord(r) - ord("0")
    return -1


def int_to_rune(i: int) -> str:
    """Return the digit character for 0..9, or 'F' for anything else."""
    if 0 <= i <= 9:
        return chr(ord("0") + i)
    return "F"