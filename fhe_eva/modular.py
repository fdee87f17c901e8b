"""Modular arithmetic on 64-bit words for the lattice primitives."""

from __future__ import annotations

from collections.abc import Sequence

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _as_i64(value: int) -> int:
    """Reinterpret the low 64 bits of ``value`` as a signed integer."""
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def mod_add(a: int, b: int, modulus: int) -> int:
    """Return ``(a + b) mod modulus``."""
    return (a + b) % modulus


def mod_sub(a: int, b: int, modulus: int) -> int:
    """Return ``(a - b) mod modulus``."""
    return (a - b) % modulus


def mod_mul(a: int, b: int, modulus: int) -> int:
    """Return ``(a * b) mod modulus``."""
    return (a * b) % modulus


def mod_pow(base: int, exp: int, modulus: int) -> int:
    """Return ``base ** exp mod modulus``."""
    return pow(base, exp, modulus)


def mod_inv(a: int, modulus: int) -> int:
    """Return the inverse of ``a`` modulo ``modulus``.

    Raises ValueError when ``a`` has no inverse.
    """
    try:
        return pow(a, -1, modulus)
    except ValueError:
        raise ValueError(f"{a} has no inverse modulo {modulus}") from None


def mod_add_fast(a: int, b: int, modulus: int) -> int:
    """Add two words with branch-free selection of the wrapped result.

    The selection mask is the comparison result itself (0 or 1), so when the
    sum reaches the modulus only bit 0 comes from the reduced value.
    """
    total = (a + b) & _MASK64
    adjusted = (total - modulus) & _MASK64
    mask = int(total >= modulus)
    return (mask & adjusted) | (~mask & _MASK64 & total)


def mod_sub_fast(a: int, b: int, modulus: int) -> int:
    """Subtract two words with branch-free selection of the wrapped result.

    The selection mask is the comparison result itself (0 or 1), so when
    ``a < b`` only bit 0 comes from the corrected value.
    """
    diff = (a - b) & _MASK64
    adjusted = (diff + modulus) & _MASK64
    mask = int(a < b)
    return (mask & adjusted) | (~mask & _MASK64 & diff)


def mod_mul_fast(a: int, b: int, modulus: int) -> int:
    """Multiply two words through a 128-bit product and reduce."""
    return ((a & _MASK64) * (b & _MASK64)) % modulus


class Montgomery:
    """Montgomery multiplication modulo an odd modulus with ``R = 2**64``."""

    __slots__ = ("modulus", "r_squared", "_n_prime")

    def __init__(self, modulus: int) -> None:
        if not 1 < modulus <= _MASK64 or modulus % 2 == 0:
            raise ValueError(f"modulus must be an odd 64-bit value above 1, got {modulus}")
        self.modulus = modulus
        self.r_squared = (1 << 128) % modulus
        self._n_prime = (-pow(modulus, -1, 1 << 64)) & _MASK64

    def __repr__(self) -> str:
        return f"Montgomery(modulus={self.modulus})"

    def _redc(self, t: int) -> int:
        m = ((t & _MASK64) * self._n_prime) & _MASK64
        u = (t + m * self.modulus) >> 64
        return u - self.modulus if u >= self.modulus else u

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b mod modulus`` computed in Montgomery form."""
        product = self._redc(self.to_montgomery(a) * self.to_montgomery(b))
        return self._redc(product)

    def to_montgomery(self, x: int) -> int:
        """Return ``x * R mod modulus``."""
        return self._redc((x % self.modulus) * self.r_squared)

    def from_montgomery(self, x_mont: int) -> int:
        """Return ``x_mont * R**-1 mod modulus``."""
        return self._redc(x_mont % self.modulus)


def mod_add_batch(a: Sequence[int], b: Sequence[int], modulus: int) -> list[int]:
    """Add two vectors pairwise with :func:`mod_add_fast`.

    The vectors are processed two lanes at a time, so ``a`` must have an
    even length and ``b`` must be at least as long.
    """
    if len(a) % 2:
        raise ValueError("batch length must be even")
    if len(b) < len(a):
        raise ValueError("second operand is shorter than the first")
    return [mod_add_fast(x, y, modulus) for x, y in zip(a, b)]


def mod_pow_fast(base: int, exp: int, modulus: int) -> int:
    """Exponentiate using a 4-bit window table built from ``base``.

    Each odd nibble of ``exp`` multiplies the result by the table entry for
    that nibble; the table is built once from the original base.
    """
    table = [1, base % modulus]
    for _ in range(2, 16):
        table.append(mod_mul_fast(table[-1], base, modulus))
    result = 1
    while exp > 0:
        nibble = exp & 0xF
        if nibble & 1:
            result = mod_mul_fast(result, table[nibble], modulus)
        exp >>= 4
    return result


def mod_inv_extended(a: int, modulus: int) -> int:
    """Return the inverse of ``a`` by the extended Euclidean algorithm.

    Works on signed 64-bit reinterpretations of the inputs and returns 0 when
    no inverse exists.
    """
    t, new_t = 0, 1
    r, new_r = _as_i64(modulus), _as_i64(a)
    while new_r != 0:
        quotient = _trunc_div(r, new_r)
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r
    if r > 1:
        return 0
    if t < 0:
        t += _as_i64(modulus)
    return t & _MASK64