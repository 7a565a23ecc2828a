import pytest

from address_tasks.gcd import InvalidInputError, gcd, gcd_array


def test_gcd():
    assert gcd(11, 22) == 11
    assert gcd(22, 11) == 11
    assert gcd(12, 18) == 6


def test_gcd_with_zero():
    assert gcd(7, 0) == 7
    assert gcd(0, 7) == 7
    assert gcd(0, 0) == 0


def test_gcd_negative():
    assert gcd(-12, 18) == 6
    assert gcd(-12, -18) == 6


def test_gcd_array():
    assert gcd_array([6]) == 6
    assert gcd_array([4, 64, 32, 120]) == 4
    assert gcd_array([12, 18]) == 6
    assert gcd_array([7, 13]) == 1


def test_gcd_array_single_element_is_absolute():
    assert gcd_array([-9]) == 9
    assert gcd_array([0]) == 0


def test_gcd_array_all_zero():
    assert gcd_array([0, 0]) == 0


def test_gcd_array_accepts_iterables():
    assert gcd_array(x * 3 for x in (2, 4, 10)) == 6


@pytest.mark.parametrize(
    "values",
    [[12, 18, 30], [-8, 20, 0, 44], [35, 14, 21], [5, 0, -15], [1, 999]],
)
def test_gcd_array_divides_every_element(values):
    result = gcd_array(values)
    assert result > 0
    assert all(v % result == 0 for v in values)


def test_gcd_array_empty():
    with pytest.raises(InvalidInputError):
        gcd_array([])


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        gcd_array(iter(()))
