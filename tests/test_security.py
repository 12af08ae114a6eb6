import pytest

from barcodekit.pdf417.security import SecurityLevel

MODULUS = 929
LEVELS = range(9)


def _evaluate(words, root):
    value = 0
    for word in words:
        value = (value * root + word) % MODULUS
    return value


def test_word_count_of_lowest_and_highest_level():
    assert SecurityLevel(0).error_correction_word_count() == 2
    assert SecurityLevel(8).error_correction_word_count() == 512


@pytest.mark.parametrize("number", range(8))
def test_word_count_doubles_per_level(number):
    lower = SecurityLevel(number).error_correction_word_count()
    higher = SecurityLevel(number + 1).error_correction_word_count()
    assert higher == lower * 2


def test_invalid_level_is_rejected():
    with pytest.raises(ValueError):
        SecurityLevel(9)


def test_level0_of_single_word_yields_generator_coefficients():
    assert SecurityLevel(0).compute([1]) == [917, 27]


def test_level1_of_single_word():
    assert SecurityLevel(1).compute([1])[-1] == 522


@pytest.mark.parametrize("number", LEVELS)
def test_zero_data_gives_zero_words(number):
    level = SecurityLevel(number)
    count = 1 << (number + 1)
    assert SecurityLevel(number).compute([0, 0, 0]) == [0] * count
    assert level.compute([]) == [0] * count


@pytest.mark.parametrize("number", LEVELS)
def test_words_have_count_and_range(number):
    data = [5, 453, 178, 121, 239, 900, 1, 17]
    words = SecurityLevel(number).compute(data)
    assert len(words) == SecurityLevel(number).error_correction_word_count()
    assert all(0 <= w < MODULUS for w in words)


@pytest.mark.parametrize("number", LEVELS)
def test_codeword_vanishes_at_generator_roots(number):
    data = [8, 567, 615, 137, 809, 329, 900, 900]
    codeword = data + SecurityLevel(number).compute(data)
    for j in range(1, (1 << (number + 1)) + 1):
        assert _evaluate(codeword, pow(3, j, MODULUS)) == 0


def test_compute_is_linear():
    level = SecurityLevel(3)
    a = [4, 100, 928, 12, 7]
    b = [3, 900, 5, 800, 0]
    summed = [(x + y) % MODULUS for x, y in zip(a, b)]
    expected = [(x + y) % MODULUS for x, y in zip(level.compute(a), level.compute(b))]
    assert level.compute(summed) == expected