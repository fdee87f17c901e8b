"""Modular arithmetic, RNS, NTT, simplified BFV/CKKS primitives and benchmarks."""

__version__ = "0.2.0"
__all__ = ["modular", "rns", "ntt", "bfv", "ckks", "context", "bench"]