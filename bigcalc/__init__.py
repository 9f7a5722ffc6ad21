"""Arbitrary-precision arithmetic on non-negative decimal digit sequences, with a command-line calculator."""

__version__ = "0.1.0"
__all__ = ["digits", "arithmetic", "cli"]