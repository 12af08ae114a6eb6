from barcodekit.base import BLACK, COLOR_SCHEME_16, TYPE_QR, WHITE, ColorScheme, Metadata
from barcodekit.qr.matrix import QRCode


def test_new_qrcode():
    bc = QRCode(2)
    assert len(bc.data) == 4
    assert bc.dimension == 2


def test_basics():
    qr = QRCode(10)
    assert qr.color == COLOR_SCHEME_16
    assert qr.color.model == "gray16"
    assert qr.metadata() == Metadata(TYPE_QR, 2)
    assert qr.bounds() == (0, 0, 10, 10)
    assert qr.content() == ""
    qr.text = "test"
    assert qr.content() == "test"


def test_get_set_and_at():
    qr = QRCode(5)
    qr.set(1, 3, True)
    assert qr.get(1, 3) is True
    assert qr.get(3, 1) is False
    assert qr.at(1, 3) == BLACK
    assert qr.at(3, 1) == WHITE
    qr.set(1, 3, False)
    assert qr.get(1, 3) is False


def test_at_uses_color_scheme():
    scheme = ColorScheme("rgb", (1, 2, 3), (4, 5, 6))
    qr = QRCode(3, scheme)
    qr.set(0, 0, True)
    assert qr.at(0, 0) == (4, 5, 6)
    assert qr.at(1, 1) == (1, 2, 3)


def test_penalty1():
    qr = QRCode(7)
    assert qr.penalty_rule1() == 70
    qr.set(0, 0, True)
    assert qr.penalty_rule1() == 68
    qr.set(0, 6, True)
    assert qr.penalty_rule1() == 66


def test_penalty2():
    qr = QRCode(3)
    assert qr.penalty_rule2() == 12
    qr.set(0, 0, True)
    qr.set(1, 1, True)
    qr.set(2, 0, True)
    assert qr.penalty_rule2() == 0
    qr.set(1, 1, False)
    assert qr.penalty_rule2() == 6


def test_penalty3_small_grid_is_zero():
    qr = QRCode(10)
    assert qr.penalty_rule3() == 0


def test_penalty3_finds_pattern_in_row_and_column():
    qr = QRCode(11)
    pattern = (True, False, True, True, True, False, True, False, False, False, False)
    for i, value in enumerate(pattern):
        qr.set(i, 0, value)
    # row y=0 matches; column x=0 reads get(0, i): only (0, 0) set, not a pattern
    assert qr.penalty_rule3() == 40


def test_penalty4():
    qr = QRCode(3)
    assert qr.penalty_rule4() == 100
    qr.set(0, 0, True)
    assert qr.penalty_rule4() == 70
    qr.set(0, 1, True)
    assert qr.penalty_rule4() == 50
    qr.set(0, 2, True)
    assert qr.penalty_rule4() == 30
    qr.set(1, 0, True)
    assert qr.penalty_rule4() == 10
    qr.set(1, 1, True)
    assert qr.penalty_rule4() == 10
    qr = QRCode(2)
    qr.set(0, 0, True)
    qr.set(1, 0, True)
    assert qr.penalty_rule4() == 0


def test_penalty_is_sum_of_rules():
    qr = QRCode(12)
    for x, y in [(0, 0), (3, 4), (5, 5), (11, 2), (7, 9)]:
        qr.set(x, y, True)
    total = qr.penalty_rule1() + qr.penalty_rule2() + qr.penalty_rule3() + qr.penalty_rule4()
    assert qr.penalty() == total