"""Number theoretic transforms over prime fields."""

from __future__ import annotations

from collections.abc import Sequence

from .modular import mod_add, mod_inv, mod_mul, mod_pow, mod_sub


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def bit_reverse(poly: Sequence[int]) -> list[int]:
    """Return ``poly`` permuted by bit-reversed index order.

    The length must be a power of two.
    """
    n = len(poly)
    if not _is_power_of_two(n):
        raise ValueError(f"length must be a power of two, got {n}")
    bits = n.bit_length() - 1
    if bits == 0:
        return list(poly)
    return [poly[int(format(i, f"0{bits}b")[::-1], 2)] for i in range(n)]


def ntt_forward_radix4(poly: Sequence[int], modulus: int, root: int) -> list[int]:
    """Forward transform in radix-4 stages after a bit-reversal permutation."""
    n = len(poly)
    if not _is_power_of_two(n) or n < 4:
        raise ValueError(f"n must be a power of 2 and >= 4, got {n}")
    out = bit_reverse(poly)
    length = 4
    while length <= n:
        wlen = mod_pow(root, (modulus - 1) // length, modulus)
        wlen2 = mod_mul(wlen, wlen, modulus)
        wlen3 = mod_mul(wlen2, wlen, modulus)
        quarter = length // 4
        for start in range(0, n, length):
            w1 = w2 = w3 = 1
            for j in range(start, start + quarter):
                a0 = out[j]
                a1 = mod_mul(out[j + quarter], w1, modulus)
                a2 = mod_mul(out[j + 2 * quarter], w2, modulus)
                a3 = mod_mul(out[j + 3 * quarter], w3, modulus)

                t0 = mod_add(a0, a2, modulus)
                t1 = mod_add(a1, a3, modulus)
                t2 = mod_sub(a0, a2, modulus)
                t3 = mod_sub(a1, a3, modulus)
                wt3 = mod_mul(wlen, t3, modulus)

                out[j] = mod_add(t0, t1, modulus)
                out[j + quarter] = mod_add(t2, wt3, modulus)
                out[j + 2 * quarter] = mod_sub(t0, t1, modulus)
                out[j + 3 * quarter] = mod_sub(t2, wt3, modulus)

                w1 = mod_mul(w1, wlen, modulus)
                w2 = mod_mul(w2, wlen2, modulus)
                w3 = mod_mul(w3, wlen3, modulus)
        length *= 4
    return out


def _check_length(n: int) -> None:
    if n > 1 and not _is_power_of_two(n):
        raise ValueError(f"length must be a power of two, got {n}")


def ntt_forward(poly: Sequence[int], modulus: int, root: int) -> list[int]:
    """Forward transform in radix-2 stages of growing length."""
    n = len(poly)
    _check_length(n)
    out = list(poly)
    length = 2
    while length <= n:
        wlen = mod_pow(root, (modulus - 1) // length, modulus)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for j in range(start, start + half):
                u = out[j]
                t = mod_mul(out[j + half], w, modulus)
                out[j] = mod_add(u, t, modulus)
                out[j + half] = mod_sub(u, t, modulus)
                w = mod_mul(w, wlen, modulus)
        length *= 2
    return out


def ntt_inverse(poly: Sequence[int], modulus: int, root_inv: int) -> list[int]:
    """Inverse transform in radix-2 stages of shrinking length.

    Every stage scales its outputs by ``n**-1``.
    """
    n = len(poly)
    _check_length(n)
    if n == 0:
        return []
    n_inv = mod_inv(n, modulus)
    out = list(poly)
    length = n
    while length >= 2:
        wlen_inv = mod_pow(root_inv, (modulus - 1) // length, modulus)
        half = length // 2
        for start in range(0, n, length):
            w = 1
            for j in range(start, start + half):
                u = out[j]
                v = out[j + half]
                total = mod_add(u, v, modulus)
                diff = mod_sub(u, v, modulus)
                out[j] = mod_mul(total, n_inv, modulus)
                out[j + half] = mod_mul(mod_mul(diff, n_inv, modulus), w, modulus)
                w = mod_mul(w, wlen_inv, modulus)
        length //= 2
    return out


def ntt_forward_small(poly: Sequence[int], modulus: int, root: int) -> list[int]:
    """Closed-form transform for lengths 2 and 4; other lengths pass through."""
    out = list(poly)
    if len(out) == 2:
        u, v = out
        return [mod_add(u, v, modulus), mod_sub(u, v, modulus)]
    if len(out) == 4:
        w = mod_pow(root, (modulus - 1) // 4, modulus)
        a0, a1, a2, a3 = out
        t0 = mod_add(a0, a2, modulus)
        t1 = mod_add(a1, a3, modulus)
        t2 = mod_sub(a0, a2, modulus)
        t3 = mod_sub(a1, a3, modulus)
        wt3 = mod_mul(w, t3, modulus)
        return [
            mod_add(t0, t1, modulus),
            mod_add(t2, wt3, modulus),
            mod_sub(t0, t1, modulus),
            mod_sub(t2, wt3, modulus),
        ]
    return out


def verify_ntt_properties(modulus: int, root: int, n: int) -> bool:
    """Check that ``root`` is a primitive ``2n``-th root of unity modulo ``modulus``."""
    neg_one = modulus - 1 if modulus > 1 else 0
    if mod_pow(root, n, modulus) != neg_one:
        return False
    if mod_pow(root, 2 * n, modulus) != 1:
        return False
    return all(mod_pow(root, k, modulus) != 1 for k in range(1, 2 * n))