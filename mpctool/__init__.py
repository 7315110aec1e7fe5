"""Building blocks for secure multi-party computation: blocks, AES-based primitives, GF(2^128), P-256 and plain circuit execution."""

__version__ = "0.1.0"