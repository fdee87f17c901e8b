"""Polynomial context with precomputed radix-4 transform tables."""

from __future__ import annotations

_MASK128 = (1 << 128) - 1
_LCG_MULTIPLIER = 6364136223846793005
_LCG_INCREMENT = 1442695040888963407
_KEY_SEED = 0xDEADBEEFCAFEBABE
_PRIMITIVE_ROOT = 7


def _bit_reversal_table(n: int) -> list[int]:
    bits = n.bit_length() - 1
    return [int(format(i, f"0{bits}b")[::-1], 2) for i in range(n)]


def _radix4_twiddles(n: int, modulus: int) -> list[tuple[int, int, int]]:
    twiddles = []
    length = 4
    while length <= n:
        w = pow(_PRIMITIVE_ROOT, (modulus - 1) // length, modulus)
        w2 = w * w % modulus
        w3 = w2 * w % modulus
        twiddles.append((w, w2, w3))
        length *= 4
    return twiddles


class UltraFheContext:
    """Coefficient vector over a fixed prime with a radix-4 in-place transform."""

    MODULUS = 180143985094819841

    __slots__ = ("size", "modulus", "_coeffs", "_bit_rev", "_twiddles")

    def __init__(self, size: int) -> None:
        if size < 4 or size & (size - 1):
            raise ValueError(f"Size must be power of 2 and >= 4 (got {size})")
        self.size = size
        self.modulus = self.MODULUS
        self._coeffs = [0] * size
        self._bit_rev = _bit_reversal_table(size)
        self._twiddles = _radix4_twiddles(size, self.modulus)

    def __repr__(self) -> str:
        return f"UltraFheContext(size={self.size})"

    @property
    def coefficients(self) -> tuple[int, ...]:
        """The current coefficients."""
        return tuple(self._coeffs)

    def generate_keys(self) -> int:
        """Fill the coefficients from a fixed-seed generator; return their size in bytes."""
        seed = _KEY_SEED
        for i in range(self.size):
            seed = (seed * _LCG_MULTIPLIER + _LCG_INCREMENT) & _MASK128
            self._coeffs[i] = seed % self.modulus
        return self.size * 8

    def ntt_ultrafast(self) -> None:
        """Apply bit reversal and radix-4 stages in place, one twiddle set per stage."""
        m = self.modulus
        c = self._coeffs
        for i, j in enumerate(self._bit_rev):
            if i < j:
                c[i], c[j] = c[j], c[i]

        length = 4
        for w1, w2, w3 in self._twiddles:
            quarter = length // 4
            for start in range(0, self.size, length):
                for i0 in range(start, start + quarter):
                    i1, i2, i3 = i0 + quarter, i0 + 2 * quarter, i0 + 3 * quarter
                    u0 = c[i0]
                    u1 = c[i1] * w1 % m
                    u2 = c[i2] * w2 % m
                    u3 = c[i3] * w3 % m

                    t0 = (u0 + u2) % m
                    t1 = (u0 - u2) % m
                    t2 = (u1 + u3) % m
                    t3 = (u1 - u3) % m

                    c[i0] = (t0 + t2) % m
                    c[i1] = (t1 + t3) % m
                    c[i2] = (t0 - t2) % m
                    c[i3] = (t1 - t3) % m
            length *= 4

    def get_coeff(self, index: int) -> int:
        """Return the coefficient at ``index``, or 0 when it is out of range."""
        if 0 <= index < self.size:
            return self._coeffs[index]
        return 0