"""The sum-check protocol for multivariate polynomials over a prime field.

A prover convinces a verifier of the sum of a multivariate polynomial over
the boolean hypercube, one variable per round.
"""

from __future__ import annotations

import secrets
from itertools import product
from math import prod
from typing import Callable, Iterable, Sequence


class SumCheckError(Exception):
    """Raised when the verifier aborts the protocol."""


def _exponents(degree: Sequence[int]) -> Iterable[tuple[int, ...]]:
    """Exponent tuples in coefficient order; the first variable varies slowest."""
    return product(*(range(d + 1) for d in degree))


class MultiVarPolynomial:
    """A polynomial in several variables with coefficients modulo a prime.

    ``degree[j]`` is the highest power of variable ``j``. Coefficients are laid
    out densely, the first variable's exponent being the most significant
    position, so ``coefficients[i * block : (i + 1) * block]`` holds the part
    multiplying ``X_1^i``.
    """

    def __init__(self, degree: Sequence[int], coefficients: Sequence[int], modulus: int) -> None:
        degree = list(degree)
        if not degree:
            raise ValueError("a polynomial needs at least one variable")
        if any(d < 0 for d in degree):
            raise ValueError("degrees must not be negative")
        if modulus < 2:
            raise ValueError("modulus must be at least 2")
        expected = prod(d + 1 for d in degree)
        if len(coefficients) != expected:
            raise ValueError(
                f"degrees {degree} need {expected} coefficients, got {len(coefficients)}"
            )
        self.degree: list[int] = degree
        self.modulus = modulus
        self.coefficients: list[int] = [c % modulus for c in coefficients]

    @classmethod
    def _from_terms(
        cls, degree: Sequence[int], terms: dict[tuple[int, ...], int], modulus: int
    ) -> MultiVarPolynomial:
        coefficients = [terms.get(exps, 0) for exps in _exponents(degree)]
        return cls(degree, coefficients, modulus)

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Sequence[Sequence[int]],
        coefficients: Sequence[int],
        modulus: int,
    ) -> MultiVarPolynomial:
        """Build a polynomial from exponent vectors and their coefficients."""
        if len(coordinates) != len(coefficients):
            raise ValueError("each exponent vector needs exactly one coefficient")
        if not coordinates:
            raise ValueError("at least one term is required")
        num_var = len(coordinates[0])
        if any(len(c) != num_var for c in coordinates):
            raise ValueError("all exponent vectors must have the same length")
        if any(e < 0 for c in coordinates for e in c):
            raise ValueError("exponents must not be negative")
        degree = [max(column) for column in zip(*coordinates)]
        terms: dict[tuple[int, ...], int] = {}
        for exps, coeff in zip(coordinates, coefficients):
            key = tuple(exps)
            terms[key] = (terms.get(key, 0) + coeff) % modulus
        return cls._from_terms(degree, terms, modulus)

    def num_var(self) -> int:
        """Return the number of variables."""
        return len(self.degree)

    def _terms(self) -> dict[tuple[int, ...], int]:
        return dict(zip(_exponents(self.degree), self.coefficients))

    def evaluation(self, point: Sequence[int]) -> int:
        """Evaluate the polynomial at ``point``."""
        if len(point) != self.num_var():
            raise ValueError(f"expected {self.num_var()} values, got {len(point)}")
        p = self.modulus
        total = 0
        for exps, coeff in zip(_exponents(self.degree), self.coefficients):
            if coeff:
                total += coeff * prod(pow(x, e, p) for x, e in zip(point, exps))
        return total % p

    def sum_over_bool_hypercube(self) -> int:
        """Sum the polynomial over every point of ``{0, 1}^n``."""
        # Over x in {0, 1}, x^e sums to 2 when e == 0 and to 1 otherwise.
        total = sum(
            coeff * 2 ** sum(1 for e in exps if e == 0)
            for exps, coeff in zip(_exponents(self.degree), self.coefficients)
        )
        return total % self.modulus

    def __add__(self, other: object) -> MultiVarPolynomial:
        if not isinstance(other, MultiVarPolynomial):
            return NotImplemented
        if other.modulus != self.modulus:
            raise ValueError("polynomials are over different fields")
        if other.num_var() != self.num_var():
            raise ValueError("polynomials have different numbers of variables")
        if other.degree == self.degree:
            summed = [a + b for a, b in zip(self.coefficients, other.coefficients)]
            return MultiVarPolynomial(self.degree, summed, self.modulus)
        degree = [max(a, b) for a, b in zip(self.degree, other.degree)]
        terms = self._terms()
        for exps, coeff in other._terms().items():
            terms[exps] = (terms.get(exps, 0) + coeff) % self.modulus
        return MultiVarPolynomial._from_terms(degree, terms, self.modulus)

    def __mul__(self, scalar: object) -> MultiVarPolynomial:
        if not isinstance(scalar, int):
            return NotImplemented
        return MultiVarPolynomial(
            self.degree, [c * scalar for c in self.coefficients], self.modulus
        )

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiVarPolynomial):
            return NotImplemented
        return (
            self.degree == other.degree
            and self.modulus == other.modulus
            and self.coefficients == other.coefficients
        )

    def __repr__(self) -> str:
        return (
            f"MultiVarPolynomial(degree={self.degree}, "
            f"coefficients={self.coefficients}, modulus={self.modulus})"
        )

    def _split_first(self) -> list[MultiVarPolynomial]:
        """Parts multiplying each power of the first variable, in the others."""
        rest = self.degree[1:]
        block = prod(d + 1 for d in rest)
        return [
            MultiVarPolynomial(
                rest, self.coefficients[i * block : (i + 1) * block], self.modulus
            )
            for i in range(self.degree[0] + 1)
        ]


class SumCheckProver:
    """The prover of the sum-check protocol."""

    def __init__(self, poly: MultiVarPolynomial) -> None:
        self.multi_var_poly = poly
        self.current_round = 0
        self.total_rounds = poly.num_var()

    def sum_poly(self) -> int:
        """Return the sum of the polynomial over the boolean hypercube."""
        return self.multi_var_poly.sum_over_bool_hypercube()

    def send_poly(self) -> list[int]:
        """Return the coefficients of this round's univariate polynomial."""
        poly = self.multi_var_poly
        if poly.num_var() > 1:
            # If g = sum_i c_i(X_2..X_n) X_1^i, summing over X_2..X_n keeps that
            # shape, so each coefficient is the hypercube sum of c_i.
            return [part.sum_over_bool_hypercube() for part in poly._split_first()]
        return list(poly.coefficients)

    def reduce_poly(self, r: int) -> None:
        """Fix the first variable to the challenge ``r``."""
        poly = self.multi_var_poly
        p = poly.modulus
        if poly.num_var() > 1:
            parts = poly._split_first()
            reduced = parts[0]
            for i, part in enumerate(parts[1:], start=1):
                reduced = reduced + part * pow(r, i, p)
            self.multi_var_poly = reduced
        else:
            self.multi_var_poly = MultiVarPolynomial([0], [poly.evaluation([r])], p)
        self.current_round += 1


class SumCheckVerifier:
    """The verifier of the sum-check protocol."""

    def __init__(self, claim: int, degree: Sequence[int], modulus: int) -> None:
        self.modulus = modulus
        self.current_round = 0
        self.total_rounds = len(degree)
        self.degree: list[int] = list(degree)
        self.result = claim % modulus
        self.claim = claim % modulus
        self.challenges_sent: list[int] = []

    def verify_internal_rounds(self, h_poly: Sequence[int]) -> int:
        """Check the prover's round polynomial and return a random challenge."""
        if self.current_round >= self.total_rounds:
            raise SumCheckError("Verifier Abort: no rounds left")
        if len(h_poly) != self.degree[self.current_round] + 1:
            raise SumCheckError("Verifier Abort: Prover's polynomial size incorrect!")
        p = self.modulus
        at_zero = h_poly[0]
        at_one = sum(h_poly)
        if (at_zero + at_one) % p != self.claim:
            raise SumCheckError(
                "Verifier Abort: Prover's polynomial doesn't evaluate to claimed value"
            )
        challenge = secrets.randbelow(p)
        self.claim = sum(c * pow(challenge, i, p) for i, c in enumerate(h_poly)) % p
        self.current_round += 1
        self.challenges_sent.append(challenge)
        return challenge

    def verify_final_result(self, oracle: Callable[[list[int], int], bool]) -> None:
        """Ask ``oracle`` whether the polynomial takes the claimed value at the challenges."""
        if not oracle(list(self.challenges_sent), self.claim):
            raise SumCheckError(
                "Verifier Abort: Final value of polynomial claimed by the Prover is incorrect"
            )


class SumCheck:
    """A whole run of the protocol between an honest prover and a verifier."""

    def __init__(self, poly: MultiVarPolynomial, verbose: bool = False) -> None:
        self.prover = SumCheckProver(poly)
        self.verifier = SumCheckVerifier(self.prover.sum_poly(), poly.degree, poly.modulus)
        self.multi_var_poly = poly
        self.verbose = verbose

    def evaluation_oracle(self, r: Sequence[int], claim: int) -> bool:
        """Return True when the polynomial evaluates to ``claim`` at ``r``."""
        return self.multi_var_poly.evaluation(r) == claim % self.multi_var_poly.modulus

    def _say(self, text: str) -> None:
        if self.verbose:
            print(text)

    def run_interactive_protocol(self) -> None:
        """Run every round; raise SumCheckError if the verifier aborts."""
        self._say("Starting Sum-Check Protocol")
        self._say(f"Initial result claimed: {self.verifier.result}")
        for round_number in range(1, self.multi_var_poly.num_var() + 1):
            round_poly = self.prover.send_poly()
            self._say(f"Round {round_number}")
            self._say(f"P ----> V: {format_polynomial(round_poly)}")
            challenge = self.verifier.verify_internal_rounds(round_poly)
            self._say(f"V ----> P: r_{round_number} = {challenge}")
            self.prover.reduce_poly(challenge)
        self._say("Final verification:")
        self._say(f"Challenges: {self.verifier.challenges_sent}")
        self._say(f"Claimed value at this point: {self.verifier.claim}")
        self.verifier.verify_final_result(self.evaluation_oracle)
        self._say("Protocol completed successfully")


def format_polynomial(coeffs: Sequence[int]) -> str:
    """Render univariate coefficients as ``c + c X + c X^2 ...``, skipping zeros."""
    terms = []
    for i, coeff in enumerate(coeffs):
        if coeff == 0:
            continue
        if i == 0:
            terms.append(f"{coeff}")
        elif i == 1:
            terms.append(f"{coeff} X")
        else:
            terms.append(f"{coeff} X^{i}")
    return " + ".join(terms) if terms else "0"