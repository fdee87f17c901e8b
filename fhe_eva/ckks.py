"""Simulated CKKS encoding, rescaling and rotation."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .modular import mod_sub

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1


def _round_half_away(x: float) -> int:
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return whole


def _saturate(x: float, low: int, high: int) -> int:
    """Convert a float to an integer, saturating at the bounds; NaN maps to 0."""
    if math.isnan(x):
        return 0
    if x == math.inf:
        return high
    if x == -math.inf:
        return low
    return max(low, min(high, _round_half_away(x)))


def encode_real(values: Iterable[float], scaling_factor: float) -> list[int]:
    """Scale real values and round them to signed 64-bit coefficients."""
    return [_saturate(x * scaling_factor, _I64_MIN, _I64_MAX) for x in values]


def decode_real(poly: Iterable[int], scaling_factor: float) -> list[float]:
    """Divide coefficients by the scaling factor."""
    return [coeff / scaling_factor for coeff in poly]


def rescaling(ciphertext: Iterable[int], modulus_from: int, modulus_to: int) -> list[int]:
    """Scale coefficients from one modulus to another and reduce them."""
    if modulus_from == 0:
        raise ValueError("source modulus must be non-zero")
    scale_down = float(modulus_to) / float(modulus_from)
    return [
        _saturate(float(coeff) * scale_down, 0, _U64_MAX) % modulus_to
        for coeff in ciphertext
    ]


def rotate_polynomial(poly: Sequence[int], steps: int, modulus: int) -> list[int]:
    """Cyclically shift coefficients by ``steps``.

    After an odd shift the coefficients at odd positions are negated.
    """
    n = len(poly)
    if n == 0:
        raise ValueError("cannot rotate an empty polynomial")
    shift = steps % n
    rotated = list(poly[n - shift:]) + list(poly[: n - shift])
    if shift % 2 == 1:
        rotated[1::2] = [mod_sub(0, c, modulus) for c in rotated[1::2]]
    return rotated