import pytest

from raf_stub.precise import add, get_max_precision, get_precision


def test_precision_is_zero_without_decimals():
    for value in (0, 10, -10, 10.0):
        assert get_precision(value) == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (10.1, 1),
        (-10.11, 2),
        (1000.1001, 4),
        (1e-07, 7),
    ],
)
def test_precision_counts_decimal_digits(value, expected):
    assert get_precision(value) == expected


def test_max_precision():
    assert get_max_precision(10.203, 1.1) == 3
    assert get_max_precision() == 0


def test_add_zeros_and_integers():
    assert add(0, 0) == 0
    assert add(1, 2) == 3


def test_add_small_numbers_without_precision_issues():
    assert add(0.2, 0.2) == 0.4


def test_add_small_numbers_with_precision_issues():
    assert 0.1 + 0.2 != 0.3
    assert add(0.1, 0.2) == 0.3


def test_add_integers_with_decimals_with_precision_issues():
    assert 67.378003 + 57.378003 != 124.756006
    assert add(67.378003, 57.378003) == 124.756006


def test_add_keeps_the_highest_precision():
    assert add(0.1, 0.02) == 0.12
    assert add(10.203, 1.1) == 11.303


def test_add_more_than_two_values():
    assert 0.1 + 0.2 + 0.4 != 0.7
    assert add(0.1, 0.2, 0.4) == 0.7


def test_add_negative_numbers():
    assert add(-0.1, -0.2) == -0.3
    assert add(0.3, -0.1) == 0.2
    assert add(-5, 5) == 0


def test_repeated_frame_accumulation_does_not_drift():
    """Sixty 0.1ms steps starting from zero land exactly on 6.0."""
    precise = 0.0
    for _ in range(60):
        precise = add(precise, 0.1)

    assert precise == 6.0
