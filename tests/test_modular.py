import pytest
from hypothesis import given, strategies as st

from fhe_eva.modular import (
    Montgomery,
    mod_add,
    mod_add_batch,
    mod_add_fast,
    mod_inv,
    mod_inv_extended,
    mod_mul,
    mod_mul_fast,
    mod_pow,
    mod_pow_fast,
    mod_sub,
    mod_sub_fast,
)

CIPHER_MODULUS = 0x7FFFFFFFE0001
CONTEXT_MODULUS = 180143985094819841

moduli = st.integers(min_value=2, max_value=2**62)
words = st.integers(min_value=0, max_value=2**64 - 1)


@given(moduli, words, words)
def test_add_then_sub_restores(m, a, b):
    assert mod_add(mod_sub(a, b, m), b, m) == a % m


@given(moduli, words, words)
def test_add_result_in_range(m, a, b):
    result = mod_add(a, b, m)
    assert 0 <= result < m


@given(moduli, words)
def test_pow_matches_repeated_mul(m, base):
    acc = 1 % m
    for exp in range(6):
        assert mod_pow(base, exp, m) == acc
        acc = mod_mul(acc, base, m)


@given(st.integers(min_value=1, max_value=CIPHER_MODULUS - 1))
def test_mod_inv_is_inverse(a):
    assert mod_mul(a, mod_inv(a, CIPHER_MODULUS), CIPHER_MODULUS) == 1


def test_mod_inv_rejects_non_coprime():
    with pytest.raises(ValueError):
        mod_inv(6, 9)


@given(st.data())
def test_add_fast_below_modulus_is_plain_sum(data):
    m = data.draw(st.integers(min_value=2, max_value=2**63))
    a = data.draw(st.integers(min_value=0, max_value=m - 1))
    b = data.draw(st.integers(min_value=0, max_value=m - 1 - a))
    assert mod_add_fast(a, b, m) == a + b


def test_add_fast_mask_quirk():
    assert mod_add_fast(5, 4, 7) == 8


@given(st.data())
def test_sub_fast_without_borrow_is_plain_difference(data):
    m = data.draw(st.integers(min_value=2, max_value=2**63))
    a = data.draw(st.integers(min_value=0, max_value=m - 1))
    b = data.draw(st.integers(min_value=0, max_value=a))
    assert mod_sub_fast(a, b, m) == a - b


def test_sub_fast_mask_quirk():
    assert mod_sub_fast(2, 3, 7) == 2**64 - 2


@given(moduli, words, words)
def test_mul_fast_agrees_with_mul(m, a, b):
    assert mod_mul_fast(a, b, m) == mod_mul(a, b, m)


@pytest.mark.parametrize("modulus", [CIPHER_MODULUS, CONTEXT_MODULUS, 65537])
@given(x=words)
def test_montgomery_round_trip(modulus, x):
    mont = Montgomery(modulus)
    assert mont.from_montgomery(mont.to_montgomery(x)) == x % modulus


@pytest.mark.parametrize("modulus", [CIPHER_MODULUS, CONTEXT_MODULUS])
@given(a=words, b=words)
def test_montgomery_mul_agrees_with_mod_mul(modulus, a, b):
    assert Montgomery(modulus).mul(a, b) == mod_mul(a, b, modulus)


def test_montgomery_one_maps_to_r():
    mont = Montgomery(CIPHER_MODULUS)
    assert mont.to_montgomery(1) == mod_pow(2, 64, CIPHER_MODULUS)
    assert mont.r_squared == mod_pow(2, 128, CIPHER_MODULUS)


@pytest.mark.parametrize("modulus", [0, 1, 2, 1024, 2**64 + 1])
def test_montgomery_rejects_bad_modulus(modulus):
    with pytest.raises(ValueError):
        Montgomery(modulus)


@given(st.lists(st.tuples(words, words), max_size=10).filter(lambda p: len(p) % 2 == 0))
def test_add_batch_matches_lanes(pairs):
    a = [x for x, _ in pairs]
    b = [y for _, y in pairs]
    result = mod_add_batch(a, b, CIPHER_MODULUS)
    assert result == [mod_add_fast(x, y, CIPHER_MODULUS) for x, y in pairs]


def test_add_batch_rejects_odd_length():
    with pytest.raises(ValueError):
        mod_add_batch([1, 2, 3], [1, 2, 3], 97)


def test_add_batch_rejects_short_second_operand():
    with pytest.raises(ValueError):
        mod_add_batch([1, 2], [1], 97)


def test_add_batch_ignores_extra_second_lanes():
    assert mod_add_batch([1, 2], [3, 4, 5, 6], 97) == [4, 6]


@given(moduli, words, st.sampled_from([1, 3, 5, 7, 9, 11, 13, 15]))
def test_pow_fast_odd_single_nibble(m, base, exp):
    assert mod_pow_fast(base, exp, m) == mod_pow(base, exp, m)


@given(moduli, words)
def test_pow_fast_even_nibble_is_skipped(m, base):
    assert mod_pow_fast(base, 2, m) == 1


@given(st.integers(min_value=1, max_value=CIPHER_MODULUS - 1))
def test_inv_extended_is_inverse(a):
    inv = mod_inv_extended(a, CIPHER_MODULUS)
    assert mod_mul(a, inv, CIPHER_MODULUS) == 1


def test_inv_extended_no_inverse_returns_zero():
    assert mod_inv_extended(6, 9) == 0
    assert mod_inv_extended(0, 97) == 0


def test_inv_extended_negated_modulus_word():
    m = CIPHER_MODULUS
    assert mod_inv_extended(2**64 - m, m) == 1