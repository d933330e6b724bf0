# cryptofound

Small, readable implementations of cryptographic building blocks. They are
meant for learning how these constructions work, not for protecting real data.
The package uses only the standard library.

## Contents

- `cryptofound.merkle`: a Merkle tree over string leaves, hashed with SHA-256.
  - `MerkleTree(leaves)` builds the tree. When a level has an odd number of
    nodes, the last node is paired with itself.
  - `root_hash()` returns the 32-byte root. An empty tree has no root and
    raises `IndexError`.
  - `get_proof(leaf_index)` returns a `Proof`. A proof is a list of
    `(sibling_hash, LeftOrRight)` steps that runs from the leaf level up to
    the root.
  - `prove(value, proof)` checks a proof against the root.
  - `str(tree)` lists the leaves and then every level in hex. `str(proof)`
    renders the steps of the proof.
- `cryptofound.lamport`: Lamport one-time signatures over SHA3-256 digests.
  - `PrivateKey.generate()` creates a key from the system's secure random
    source.
  - `PrivateKey.sign(message)` returns a `Signature`.
  - `PrivateKey.public_key()` returns the matching `PublicKey`.
  - `PublicKey.verify(message, signature)` checks a signature.
  - `generate_keypair()` returns a `(PrivateKey, PublicKey)` pair.
  - Keys and signatures raise `ValueError` if they are built from the wrong
    number of 32-byte values.
- `cryptofound.sumcheck`: the interactive sum-check protocol over a prime field.
  - `MultiVarPolynomial(degree, coefficients, modulus)` builds a polynomial
    from a dense list of coefficients. `MultiVarPolynomial.from_coordinates`
    builds one from exponent vectors instead.
  - A polynomial supports `evaluation(point)`, `sum_over_bool_hypercube()`,
    `num_var()`, `+` and multiplication by an integer scalar.
  - `SumCheckProver` plays the prover, and `SumCheckVerifier` plays the
    verifier. Challenges are drawn with `secrets`.
  - `SumCheck(poly, verbose)` runs both sides with
    `run_interactive_protocol()`. With `verbose=True` it prints every round.
  - `format_polynomial(coeffs)` renders univariate coefficients as
    `c + c X + c X^2 ...`.
  - When the verifier aborts, the protocol raises `SumCheckError`.

## Installation

```
pip install .
```

## Examples

Merkle tree membership:

```python
from cryptofound.merkle import MerkleTree

tree = MerkleTree(["a", "b", "c", "d"])
proof = tree.get_proof(1)
assert tree.prove("b", proof)
assert not tree.prove("a", proof)
```

Lamport signatures (a key must sign only one message):

```python
from cryptofound.lamport import generate_keypair

private_key, public_key = generate_keypair()
signature = private_key.sign(b"This is a test message")
assert public_key.verify(b"This is a test message", signature)
assert not public_key.verify(b"This is a different message", signature)
```

Sum-check protocol:

```python
from cryptofound.sumcheck import MultiVarPolynomial, SumCheck

# 3 x^2 y^2 z^2 + 2 x^2 y + 5 x^2 z^2 + 4 y z + 6 x + 1 over GF(101)
poly = MultiVarPolynomial.from_coordinates(
    [[0, 0, 0], [1, 0, 0], [0, 1, 1], [2, 0, 2], [2, 1, 0], [2, 2, 2]],
    [1, 6, 4, 5, 2, 3],
    101,
)
protocol = SumCheck(poly, False)
protocol.run_interactive_protocol()
assert protocol.verifier.result == 57
```

## What it does not do

The package has no elliptic-curve arithmetic and no elliptic-curve signatures.
Its only signature scheme is the Lamport one-time scheme. It has no command-line
tool and does not store keys; keys live only in memory.

## Running the tests

```
pip install .[test]
pytest
```