"""The module matrix of a QR code and its mask penalty scores."""

from __future__ import annotations

import math

from barcodekit.base import COLOR_SCHEME_16, TYPE_QR, Barcode, Color, ColorScheme, Metadata
from barcodekit.bitlist import BitList

_PATTERN1 = (True, False, True, True, True, False, True, False, False, False, False)
_PATTERN2 = (False, False, False, False, True, False, True, True, True, False, True)


class QRCode(Barcode):
    """A square grid of dark and light modules."""

    def __init__(self, dimension: int, color: ColorScheme = COLOR_SCHEME_16) -> None:
        self.dimension = dimension
        self.data = BitList(dimension * dimension)
        self.color = color
        self.text = ""

    def content(self) -> str:
        return self.text

    def metadata(self) -> Metadata:
        return Metadata(TYPE_QR, 2)

    def bounds(self) -> tuple[int, int, int, int]:
        return (0, 0, self.dimension, self.dimension)

    def at(self, x: int, y: int) -> Color:
        return self.color.foreground if self.get(x, y) else self.color.background

    def get(self, x: int, y: int) -> bool:
        """Return whether the module at (x, y) is dark."""
        return self.data.get_bit(x * self.dimension + y)

    def set(self, x: int, y: int, value: bool) -> None:
        """Make the module at (x, y) dark or light."""
        self.data.set_bit(x * self.dimension + y, value)

    def penalty(self) -> int:
        """Return the total mask penalty score."""
        return (
            self.penalty_rule1()
            + self.penalty_rule2()
            + self.penalty_rule3()
            + self.penalty_rule4()
        )

    def penalty_rule1(self) -> int:
        """Score runs of five or more same-colored modules in rows and columns."""
        dim = self.dimension
        result = 0
        for x in range(dim):
            check_x = check_y = False
            cnt_x = cnt_y = 0
            for y in range(dim):
                if self.get(x, y) == check_x:
                    cnt_x += 1
                else:
                    check_x = not check_x
                    if cnt_x >= 5:
                        result += cnt_x - 2
                    cnt_x = 1

                if self.get(y, x) == check_y:
                    cnt_y += 1
                else:
                    check_y = not check_y
                    if cnt_y >= 5:
                        result += cnt_y - 2
                    cnt_y = 1

            if cnt_x >= 5:
                result += cnt_x - 2
            if cnt_y >= 5:
                result += cnt_y - 2
        return result

    def penalty_rule2(self) -> int:
        """Score 2x2 blocks of the same color."""
        result = 0
        for x in range(self.dimension - 1):
            for y in range(self.dimension - 1):
                check = self.get(x, y)
                if (
                    self.get(x, y + 1) == check
                    and self.get(x + 1, y) == check
                    and self.get(x + 1, y + 1) == check
                ):
                    result += 3
        return result

    def penalty_rule3(self) -> int:
        """Score finder-like 1:1:3:1:1 patterns in rows and columns."""
        dim = self.dimension
        length = len(_PATTERN1)
        result = 0
        for x in range(dim - length + 1):
            for y in range(dim):
                row = tuple(self.get(x + i, y) for i in range(length))
                col = tuple(self.get(y, x + i) for i in range(length))
                if row in (_PATTERN1, _PATTERN2):
                    result += 40
                if col in (_PATTERN1, _PATTERN2):
                    result += 40
        return result

    def penalty_rule4(self) -> int:
        """Score how far the share of dark modules is from one half."""
        total = len(self.data)
        dark = sum(self.data.get_bit(i) for i in range(total))
        percent = dark * 100 / total
        lower = abs(math.floor(percent / 5) - 10)
        upper = abs(math.ceil(percent / 5) - 10)
        return int(min(lower, upper) * 10)