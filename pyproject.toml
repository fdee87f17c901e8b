[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fhe-eva"
version = "0.2.0"
description = "Modular arithmetic, RNS, NTT and simplified BFV/CKKS primitives for homomorphic encryption experiments"
requires-python = ">=3.10"
dependencies = []
keywords = ["fhe", "homomorphic-encryption", "ntt", "rns", "montgomery", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
fhe-eva-bench = "fhe_eva.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["fhe_eva"]

[tool.pytest.ini_options]
addopts = "-ra"
