"""A basic Merkle tree with membership proofs built on SHA-256."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence


def _digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


class LeftOrRight(Enum):
    """Side on which a neighbouring hash sits relative to the current hash."""

    LEFT = "Left"
    RIGHT = "Right"


@dataclass
class Proof:
    """Sibling hashes, from the leaf level upwards, proving a value is in a tree."""

    steps: list[tuple[bytes, LeftOrRight]] = field(default_factory=list)

    def __iter__(self) -> Iterator[tuple[bytes, LeftOrRight]]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> tuple[bytes, LeftOrRight]:
        return self.steps[index]

    def __str__(self) -> str:
        return "".join(f'("{sibling.hex()}", {side.value})' for sibling, side in self.steps)


class MerkleTree:
    """A Merkle tree over string leaves.

    ``hashes[0]`` holds the root level and ``hashes[-1]`` the leaf hashes.
    An odd node at the end of a level is paired with itself.
    """

    def __init__(self, leaves: Sequence[str]) -> None:
        self.leaves: list[str] = list(leaves)
        level = [_digest(leaf.encode()) for leaf in self.leaves]
        levels = [level]
        while len(level) > 1:
            pairs = zip(level[0::2], level[1::2])
            next_level = [_digest(left + right) for left, right in pairs]
            if len(level) % 2 == 1:
                next_level.append(_digest(level[-1] + level[-1]))
            levels.append(next_level)
            level = next_level
        levels.reverse()
        self.hashes: list[list[bytes]] = levels

    def root_hash(self) -> bytes:
        """Return the root hash; an empty tree has none and raises IndexError."""
        return self.hashes[0][0]

    def get_proof(self, leaf_index: int) -> Proof:
        """Return the proof that the leaf at ``leaf_index`` belongs to the tree."""
        steps: list[tuple[bytes, LeftOrRight]] = []
        index = leaf_index
        for level in reversed(self.hashes[1:]):
            if index % 2 == 0:
                side, sibling_index = LeftOrRight.RIGHT, index + 1
            else:
                side, sibling_index = LeftOrRight.LEFT, index - 1
            steps.append((level[sibling_index], side))
            index //= 2
        return Proof(steps)

    def prove(self, value: str, proof: Proof) -> bool:
        """Check that ``proof`` shows ``value`` is a leaf of this tree."""
        current = _digest(value.encode())
        for sibling, side in proof:
            if side is LeftOrRight.LEFT:
                current = _digest(sibling + current)
            else:
                current = _digest(current + sibling)
        return current == self.root_hash()

    def __str__(self) -> str:
        lines = ["Leaves:"]
        lines.extend(f"  {i}: {leaf}" for i, leaf in enumerate(self.leaves))
        for level in range(len(self.hashes) - 1, -1, -1):
            hashes = self.hashes[level]
            if len(hashes) == 1:
                lines.append("Root Hash:")
                lines.append(f"  {hashes[0].hex()}")
            else:
                lines.append(f"Level {level}:")
                lines.extend(f"  {h.hex()}" for h in hashes)
        return "\n".join(lines) + "\n"