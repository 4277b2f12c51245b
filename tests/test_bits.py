import pytest

from dsakit.bits import (
    clear_bits_in_range,
    clear_ith_bit,
    clear_last_i_bits,
    count_bits,
    count_set_bits,
    dec_to_binary,
    get_ith_bit,
    power_of_two,
    set_ith_bit,
    update_ith_bit,
)


def test_worked_example_values():
    n, i, j = 15, 2, 3
    assert get_ith_bit(n, i) == 1
    assert set_ith_bit(n, i) == 15
    assert clear_ith_bit(n, i) == 11
    assert update_ith_bit(n, i, 0) == 11
    assert clear_last_i_bits(n, i) == 12
    assert clear_bits_in_range(n, i, j) == 3
    assert power_of_two(16) is True
    assert count_set_bits(n) == 4


def test_get_ith_bit_of_zero_bit():
    assert get_ith_bit(11, 2) == 0


@pytest.mark.parametrize("n", [0, 1, 6, 37, 255, 1024])
@pytest.mark.parametrize("i", [0, 1, 3, 7])
def test_set_then_get_and_clear_then_get(n, i):
    assert get_ith_bit(set_ith_bit(n, i), i) == 1
    assert get_ith_bit(clear_ith_bit(n, i), i) == 0


@pytest.mark.parametrize("n", [0, 9, 100, 4095])
def test_update_round_trip(n):
    for i in range(6):
        assert get_ith_bit(update_ith_bit(n, i, 1), i) == 1
        assert get_ith_bit(update_ith_bit(n, i, 0), i) == 0
        assert update_ith_bit(n, i, get_ith_bit(n, i)) == n


def test_clear_last_bits_leaves_low_bits_zero():
    for n in [0, 7, 255, 1000]:
        for i in range(5):
            result = clear_last_i_bits(n, i)
            assert result % (1 << i) == 0
            assert result >> i == n >> i


def test_clear_bits_in_range_only_touches_range():
    n = 0b11111111
    result = clear_bits_in_range(n, 2, 5)
    assert all(get_ith_bit(result, k) == 0 for k in range(2, 6))
    assert all(get_ith_bit(result, k) == 1 for k in (0, 1, 6, 7))


@pytest.mark.parametrize("n", [1, 2, 4, 8, 1024])
def test_powers_of_two(n):
    assert power_of_two(n) is True


@pytest.mark.parametrize("n", [3, 6, 12, 100])
def test_not_powers_of_two(n):
    assert power_of_two(n) is False


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 12345])
def test_bit_counts_agree(n):
    assert count_set_bits(n) == count_bits(n) == bin(n).count("1")


def test_dec_to_binary_matches_format():
    for n in [0, 1, 2, 15, 100]:
        assert dec_to_binary(n) == int(format(n, "b"))


def test_negative_inputs_rejected():
    with pytest.raises(ValueError):
        count_set_bits(-1)
    with pytest.raises(ValueError):
        count_bits(-4)
    with pytest.raises(ValueError):
        dec_to_binary(-2)