[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpctool"
version = "0.1.0"
description = "Building blocks for secure multi-party computation: 128-bit blocks, AES-based PRP/PRG and hashes, GF(2^128) arithmetic, P-256 group operations and plain circuit execution"
requires-python = ">=3.10"
keywords = ["mpc", "garbled circuits", "aes", "prg", "galois field", "elliptic curve", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mpctool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
