"""Deterministic simulation of the BFV scheme and its parameter sets."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .modular import mod_add, mod_inv, mod_mul, mod_sub

DEFAULT_CIPHER_MODULUS = 0x7FFFFFFFE0001
DEFAULT_PLAIN_MODULUS = 65537
DEFAULT_POLY_DEGREE = 1024
DEFAULT_ROOT_OF_UNITY = 7

_CHECKED_COEFFICIENTS = 10
_REQUIRED_CORRECT = 8

Ciphertext = tuple[Sequence[int], Sequence[int]]


@dataclass(frozen=True)
class FHEParameters:
    """Parameters shared by the supported schemes."""

    cipher_modulus: int = DEFAULT_CIPHER_MODULUS
    plain_modulus: int = DEFAULT_PLAIN_MODULUS
    poly_degree: int = DEFAULT_POLY_DEGREE
    root_of_unity: int = DEFAULT_ROOT_OF_UNITY


@dataclass
class BFVParameters:
    """Moduli and ring degree of a BFV instance."""

    cipher_modulus: int
    plain_modulus: int
    poly_degree: int


class BFVContext:
    """A BFV context holding the default parameter set."""

    __slots__ = ("params",)

    def __init__(self) -> None:
        self.params = BFVParameters(
            cipher_modulus=DEFAULT_CIPHER_MODULUS,
            plain_modulus=DEFAULT_PLAIN_MODULUS,
            poly_degree=DEFAULT_POLY_DEGREE,
        )

    def __repr__(self) -> str:
        return f"BFVContext(params={self.params!r})"


def _decrypts_correctly(i: int, q: int, t: int, delta: int) -> bool:
    """Encrypt and decrypt coefficient ``i`` of the deterministic test vector."""
    secret = (0, 1, q - 1, 2, q - 2)[i % 5]
    noise = (0, 1, q - 1)[i % 3]
    message = i % t

    c0 = (i * 3) % q
    c0s = mod_mul(c0, secret, q)
    c1 = mod_add(mod_add(c0s, mod_mul(message, delta, q), q), noise, q)

    diff = mod_sub(c1, mod_mul(c0, secret, q), q)
    decrypted = (diff * t // q) % t
    return decrypted == message


def encrypt_decrypt_cycle(poly_degree: int, cipher_modulus: int, plain_modulus: int) -> bool:
    """Run a deterministic encrypt/decrypt round and check its first coefficients.

    At most the first ten coefficients are compared; the cycle passes when at
    least eight of them decrypt to the original plaintext.
    """
    delta = cipher_modulus // plain_modulus
    correct = sum(
        _decrypts_correctly(i, cipher_modulus, plain_modulus, delta)
        for i in range(min(poly_degree, _CHECKED_COEFFICIENTS))
    )
    return correct >= _REQUIRED_CORRECT


def _degree(ct1: Ciphertext, ct2: Ciphertext) -> int:
    n = len(ct1[0])
    if any(len(part) < n for part in (ct1[1], ct2[0], ct2[1])):
        raise ValueError(f"ciphertext components must have at least {n} coefficients")
    return n


def homomorphic_add(
    ct1: Ciphertext, ct2: Ciphertext, cipher_modulus: int
) -> tuple[list[int], list[int]]:
    """Add two ciphertexts component by component."""
    _degree(ct1, ct2)
    n = len(ct1[0])
    c0 = [mod_add(a, b, cipher_modulus) for a, b in zip(ct1[0], ct2[0][:n])]
    c1 = [mod_add(a, b, cipher_modulus) for a, b in zip(ct1[1][:n], ct2[1][:n])]
    return c0, c1


def homomorphic_mul_simple(
    ct1: Ciphertext, ct2: Ciphertext, cipher_modulus: int, plain_modulus: int
) -> tuple[list[int], list[int], list[int]]:
    """Multiply two ciphertexts coefficient-wise into a three-part result.

    Each tensor term is scaled by the inverse of ``cipher_modulus // plain_modulus``;
    ValueError is raised when that scale has no inverse.
    """
    n = _degree(ct1, ct2)
    q = cipher_modulus
    delta_inv = mod_inv(q // plain_modulus, q)
    c0: list[int] = []
    c1: list[int] = []
    c2: list[int] = []
    for a0, a1, b0, b1 in zip(ct1[0], ct1[1][:n], ct2[0][:n], ct2[1][:n]):
        cross = mod_add(mod_mul(a0, b1, q), mod_mul(a1, b0, q), q)
        c0.append(mod_mul(mod_mul(a0, b0, q), delta_inv, q))
        c1.append(mod_mul(cross, delta_inv, q))
        c2.append(mod_mul(mod_mul(a1, b1, q), delta_inv, q))
    return c0, c1, c2