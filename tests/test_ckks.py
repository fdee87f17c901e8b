import pytest
from hypothesis import given
from hypothesis import strategies as st

from fhe_eva.ckks import decode_real, encode_real, rescaling, rotate_polynomial


@given(st.lists(st.floats(min_value=-1e6, max_value=1e6), max_size=20))
def test_encode_decode_round_trip(values):
    scale = 1024.0
    decoded = decode_real(encode_real(values, scale), scale)
    assert len(decoded) == len(values)
    for original, back in zip(values, decoded):
        assert abs(original - back) <= 0.5 / scale + 1e-9


def test_encode_rounds_half_away_from_zero():
    assert encode_real([0.5, -0.5, 2.5], 1.0) == [1, -1, 3]


def test_encode_nan_is_zero():
    assert encode_real([float("nan")], 1.0) == [0]


def test_rescaling_same_modulus_is_identity():
    assert rescaling([5, 7, 9], 10, 10) == [5, 7, 9]


@given(st.lists(st.integers(min_value=0, max_value=2**40), max_size=20))
def test_rescaling_stays_below_target(coeffs):
    result = rescaling(coeffs, 2**40 + 1, 65537)
    assert len(result) == len(coeffs)
    assert all(0 <= c < 65537 for c in result)


def test_rescaling_rejects_zero_source():
    with pytest.raises(ValueError):
        rescaling([1], 0, 10)


def test_even_rotation_is_plain_shift():
    assert rotate_polynomial([1, 2, 3, 4], 2, 97) == [3, 4, 1, 2]


@given(st.lists(st.integers(min_value=0, max_value=96), min_size=1, max_size=12))
def test_full_rotation_is_identity(poly):
    assert rotate_polynomial(poly, len(poly), 97) == poly


def test_odd_rotation_negates_odd_positions():
    result = rotate_polynomial([1, 2, 3, 4], 1, 97)
    assert result[0] == 4
    assert result[2] == 2
    assert (result[1] + 1) % 97 == 0
    assert (result[3] + 3) % 97 == 0


def test_negative_steps_wrap():
    poly = [5, 6, 7, 8, 9, 10]
    assert rotate_polynomial(poly, -1, 97) == rotate_polynomial(poly, 5, 97)


def test_rotate_empty_raises():
    with pytest.raises(ValueError):
        rotate_polynomial([], 1, 97)