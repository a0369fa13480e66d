"""
KZG Polynomial Commitments
==========================

Kate-Zaverucha-Goldberg commitments over BLS12-381.

Commit:
-------
C := Σ_i c_i · g_i = p(s) · g ∈ G1

Open (witness for p(x) = y):
----------------------------
q(X) := (p(X) - y) / (X - x),   W := q(s) · g

Verify:
-------
e(C - y·g, h) == e(W, s·h - x·h)

The verifier only needs h and s·h from the reference string, never s itself.
"""

import logging

from py_ecc.optimized_bls12_381 import neg

from .crs import ReferenceString, keygen_crs
from .errors import DegreeExceeded, EvaluationMismatch
from .groups import FR, g1_mul, g1_sub, g2_mul, g2_sub, is_valid_g1
from .polynomial import Polynomial
from .utils import multiexp_g1, pairing_product_is_one

logger = logging.getLogger(__name__)


class KZGCommitment:
    """
    A KZG scheme instance bound to one reference string.

    Parameters
    ----------
    max_degree : int
        Largest polynomial degree the scheme can commit to
    crs : ReferenceString, optional
        Existing public parameters (e.g. from a ceremony). If None, a fresh
        reference string is generated with a random, immediately discarded
        secret.

    Notes
    -----
    The instance holds no mutable state after construction, so commit,
    create_witness and verify can be called from several threads at once.
    """

    def __init__(self, max_degree: int = None, crs: ReferenceString = None):
        if crs is None:
            if max_degree is None:
                raise ValueError("Either max_degree or crs must be given")
            crs = keygen_crs(max_degree)
        elif max_degree is not None and crs.max_degree < max_degree:
            raise DegreeExceeded(
                f"Reference string supports degree {crs.max_degree}, {max_degree} requested")
        self.crs = crs

    @property
    def max_degree(self) -> int:
        return self.crs.max_degree

    def commit(self, poly: Polynomial):
        """
        Commit to ``poly``.

        Formula:
        --------
        C := Σ_{i < min(len(p), len(crs))} c_i · g_i

        Raises
        ------
        DegreeExceeded
            If ``poly`` has a nonzero coefficient at an index the reference
            string does not cover.
        """
        coeffs = poly.coefficients
        n = min(len(coeffs), len(self.crs))

        if any(c != 0 for c in coeffs[n:]):
            raise DegreeExceeded(
                f"Polynomial degree {poly.degree} exceeds maximum allowed degree {self.max_degree}")

        return multiexp_g1(list(self.crs.g1_powers[:n]), list(coeffs[:n]))

    def create_witness(self, poly: Polynomial, x: int, y: int):
        """
        Create the opening proof that ``poly(x) == y``.

        Parameters
        ----------
        poly : Polynomial
            The committed polynomial
        x : int
            Evaluation point
        y : int
            Claimed value

        Returns
        -------
        G1 point
            W = commit((p(X) - y) / (X - x))

        Raises
        ------
        EvaluationMismatch
            If poly(x) != y. A witness for a false claim is never produced.
        """
        x = FR.reduce(x)
        y = FR.reduce(y)

        actual = poly.evaluate(x)
        if actual != y:
            raise EvaluationMismatch(f"Polynomial evaluates to {actual} at x={x}, not {y}")

        # (p(X) - y) has a root at x, so the division is exact
        quotient, remainder = (poly - Polynomial([y])).divide_by_linear(x)
        if remainder != 0:
            raise EvaluationMismatch(f"Non-zero remainder {remainder} dividing by (X - {x})")

        return self.commit(quotient)

    def verify(self, commitment, x: int, y: int, witness) -> bool:
        """
        Check an opening proof with the pairing equation.

        Formula:
        --------
        e(C - y·g, h) == e(W, s·h - x·h)

        checked as e(C - y·g, h) · e(-W, s·h - x·h) == 1.

        Returns
        -------
        bool
            True if the witness opens ``commitment`` to ``y`` at ``x``.
            Points that are not on the curve give False.
        """
        if not is_valid_g1(commitment) or not is_valid_g1(witness):
            logger.debug("Rejecting opening: commitment or witness is not a G1 point")
            return False

        x = FR.reduce(x)
        y = FR.reduce(y)
        g = self.crs.g1_powers[0]
        h = self.crs.g2

        lhs_g1 = g1_sub(commitment, g1_mul(g, y))
        rhs_g2 = g2_sub(self.crs.g2_s, g2_mul(h, x))

        return pairing_product_is_one([
            (lhs_g1, h),
            (neg(witness), rhs_g2),
        ])
