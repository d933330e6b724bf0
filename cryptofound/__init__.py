"""Educational implementations of Merkle trees, Lamport signatures and the sum-check protocol."""

__version__ = "0.1.1"
__all__ = ["merkle", "lamport", "sumcheck"]