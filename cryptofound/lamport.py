"""Lamport one-time signatures over SHA3-256 digests."""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

HASH_SIZE = 32
NUM_PAIRS = HASH_SIZE * 8


def _hash(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def _digest_bits(message: bytes) -> list[int]:
    """Bits of the message digest, least significant bit of each byte first."""
    digest = _hash(message)
    return [(byte >> pos) & 1 for byte in digest for pos in range(8)]


def _check_blocks(blocks: tuple[bytes, ...], count: int, what: str) -> None:
    if len(blocks) != count:
        raise ValueError(f"{what} must hold {count} values, got {len(blocks)}")
    if any(len(block) != HASH_SIZE for block in blocks):
        raise ValueError(f"every value of {what} must be {HASH_SIZE} bytes long")


@dataclass(frozen=True)
class Signature:
    """One private-key value revealed for each bit of the message digest."""

    revealed_keys: tuple[bytes, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "revealed_keys", tuple(self.revealed_keys))
        _check_blocks(self.revealed_keys, NUM_PAIRS, "a signature")


@dataclass(frozen=True)
class PublicKey:
    """Hashes of every private-key value."""

    hashed_pairs: tuple[bytes, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "hashed_pairs", tuple(self.hashed_pairs))
        _check_blocks(self.hashed_pairs, NUM_PAIRS * 2, "a public key")

    def verify(self, message: bytes, signature: Signature) -> bool:
        """Return True when ``signature`` is valid for ``message``."""
        bits = _digest_bits(message)
        return all(
            _hash(revealed) == self.hashed_pairs[i * 2 + bit]
            for i, (revealed, bit) in enumerate(zip(signature.revealed_keys, bits))
        )


@dataclass(frozen=True, repr=False)
class PrivateKey:
    """Two random values for each bit position of the message digest.

    A key must sign only one message; reuse reveals more of it.
    """

    key_pairs: tuple[bytes, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_pairs", tuple(self.key_pairs))
        _check_blocks(self.key_pairs, NUM_PAIRS * 2, "a private key")

    def __repr__(self) -> str:
        return "PrivateKey(...)"

    @classmethod
    def generate(cls) -> PrivateKey:
        """Create a new key from the system's secure random source."""
        return cls(tuple(secrets.token_bytes(HASH_SIZE) for _ in range(NUM_PAIRS * 2)))

    def sign(self, message: bytes) -> Signature:
        """Sign ``message`` by revealing one value from each pair."""
        bits = _digest_bits(message)
        return Signature(tuple(self.key_pairs[i * 2 + bit] for i, bit in enumerate(bits)))

    def public_key(self) -> PublicKey:
        """Return the public key that matches this private key."""
        return PublicKey(tuple(_hash(value) for value in self.key_pairs))


def generate_keypair() -> tuple[PrivateKey, PublicKey]:
    """Generate a private key and its public key."""
    private_key = PrivateKey.generate()
    return private_key, private_key.public_key()