"""Residue number system with precomputed CRT reconstruction constants."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .modular import mod_inv

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1


class FastRns:
    """A residue number system over a fixed set of pairwise coprime moduli."""

    __slots__ = ("moduli", "m_product", "_quotients", "_inverses")

    def __init__(self, moduli: Iterable[int]) -> None:
        self.moduli = tuple(moduli)
        self.m_product = math.prod(self.moduli)
        self._quotients = tuple(self.m_product // m for m in self.moduli)
        self._inverses = tuple(
            mod_inv(q % m, m) for q, m in zip(self._quotients, self.moduli)
        )

    def __repr__(self) -> str:
        return f"FastRns(moduli={list(self.moduli)})"

    def from_rns_fast(self, residues: Sequence[int]) -> int:
        """Reconstruct a value from its residues with 128-bit wrapping sums."""
        if len(residues) > len(self.moduli):
            raise ValueError(
                f"got {len(residues)} residues for {len(self.moduli)} moduli"
            )
        result = 0
        for residue, quotient, inverse in zip(residues, self._quotients, self._inverses):
            term = (((residue * quotient) & _MASK128) * inverse) & _MASK128
            result = ((result + term) & _MASK128) % self.m_product
        return result % self.m_product

    def to_rns_batch(self, numbers: Iterable[int]) -> list[list[int]]:
        """Convert each number to its residues."""
        return [self.to_rns_single(x) for x in numbers]

    def to_rns_single(self, x: int) -> list[int]:
        """Return the residues of ``x`` modulo each modulus."""
        return [x % m for m in self.moduli]

    def rns_add_fast(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        """Add two residue vectors lane by lane."""
        result = []
        for ai, bi, mi in zip(a, b, self.moduli):
            total = (ai + bi) & _MASK64
            result.append(total - mi if total >= mi else total)
        return result

    def rns_mul_fast(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        """Multiply two residue vectors lane by lane."""
        return [(ai * bi) % mi for ai, bi, mi in zip(a, b, self.moduli)]