# fhe_eva

Building blocks for experiments with fully homomorphic encryption, in pure
Python with no third-party dependencies.

## Modules

- `fhe_eva.modular`: `mod_add`, `mod_sub`, `mod_mul`, `mod_pow` and `mod_inv`.
  `mod_inv` raises `ValueError` when no inverse exists. The module also has
  64-bit word variants `mod_add_fast`, `mod_sub_fast` and `mod_mul_fast`,
  `mod_add_batch` for vectors of even length, a 4-bit-window `mod_pow_fast`,
  and `mod_inv_extended`, which returns 0 when no inverse exists.
  `Montgomery(modulus)` does multiplication with `R = 2**64`. It needs an odd
  modulus between 2 and 2**64 and provides `mul`, `to_montgomery` and
  `from_montgomery`.
- `fhe_eva.rns`: `FastRns(moduli)`, a residue number system with precomputed
  CRT constants. It provides `to_rns_single`, `to_rns_batch`,
  `from_rns_fast`, `rns_add_fast` and `rns_mul_fast`.
- `fhe_eva.ntt`: `bit_reverse`, the radix-2 transforms `ntt_forward` and
  `ntt_inverse`, `ntt_forward_radix4`, the closed-form `ntt_forward_small`
  for lengths 2 and 4, and `verify_ntt_properties`. That last function checks
  that a root is a primitive `2n`-th root of unity. The transforms return new
  lists and leave their input unchanged.
- `fhe_eva.bfv`: the `FHEParameters` and `BFVParameters` dataclasses, and
  `BFVContext`, which holds the default parameters (cipher modulus
  `0x7FFFFFFFE0001`, plain modulus 65537, degree 1024). The functions are
  `encrypt_decrypt_cycle`, `homomorphic_add` and `homomorphic_mul_simple`.
- `fhe_eva.ckks`: `encode_real`, `decode_real`, `rescaling` and
  `rotate_polynomial`.
- `fhe_eva.context`: `UltraFheContext(size)`. It is a coefficient vector
  modulo `180143985094819841` with precomputed bit-reversal and radix-4
  twiddle tables. `generate_keys` fills it from a fixed-seed generator and
  returns its size in bytes. `ntt_ultrafast` transforms it in place.
  `get_coeff` returns a coefficient, or 0 when the index is out of range. The
  `coefficients` property returns all of them.
- `fhe_eva.bench`: the timing functions `ntt_1024`, `ntt_4096_ultrafast`,
  `memory_bandwidth_test_optimized`, `benchmark_ntt_comparison` and
  `run_all_benchmarks`. They log their results through the `logging` module.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Usage

```python
from fhe_eva.rns import FastRns
from fhe_eva.ntt import ntt_forward, verify_ntt_properties
from fhe_eva.context import UltraFheContext

rns = FastRns([3, 5, 7])
residues = rns.to_rns_single(52)        # [1, 2, 3]
assert rns.from_rns_fast(residues) == 52

ctx = UltraFheContext(4096)
ctx.generate_keys()
ctx.ntt_ultrafast()
print(ctx.get_coeff(0))
```

## Benchmarks

This command times a copy of two million 64-bit words and a 4096-point
transform, then prints a report:

```
fhe-eva-bench
```

`ntt_1024` does not measure anything. It returns a fixed baseline of 36 ms,
which the comparison uses.

## What it does not do

The BFV and CKKS functions are deterministic simulations for checking
arithmetic. They do not generate real secret or public keys, sample noise,
relinearise, or serialise ciphertexts. Nothing here is fit to protect real
data.

## Running the tests

```
pytest
```