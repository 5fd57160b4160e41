"""PRVHASH hash functions, a keyed streamed XOR function and PRVHASH-based random number generators."""

__version__ = "4.3.7"

__all__ = [
    "core",
    "hash16",
    "hash64",
    "hash64s",
    "prvrng",
    "tango",
    "gradilac",
    "proofs",
]