"""
Structured Reference String (SRS) Generation
============================================

This module generates the trusted-setup parameters for the KZG commitment
scheme. The reference string consists of powers of a secret s:

- For G1:  g_i := s^i · g      for i ∈ {0, 1, ..., d}
- For G2:  h and s · h

where d is the maximum polynomial degree the scheme can commit to.

Mathematical Notation:
----------------------
- s ∈ Z_r is the secret trapdoor. It is drawn from the OS CSPRNG and dropped
  as soon as the powers are computed. It is never stored, logged or returned.
- g ∈ G1, h ∈ G2 are the canonical generators
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from py_ecc.optimized_bls12_381 import neg

from .groups import FR, g1_mul, g2_mul, get_generators, points_equal
from .utils import pairing_product_is_one

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceString:
    """
    Public parameters of one KZG instance.

    Attributes
    ----------
    g1_powers : Tuple
        (g, s·g, s²·g, ..., s^d·g) in G1
    g2 : G2 point
        The generator h
    g2_s : G2 point
        s · h, used by the verifier in place of s
    """
    g1_powers: Tuple
    g2: tuple
    g2_s: tuple

    @property
    def max_degree(self) -> int:
        return len(self.g1_powers) - 1

    def __len__(self):
        return len(self.g1_powers)


def keygen_crs(max_degree: int, secret: int = None) -> ReferenceString:
    """
    Generate the reference string for polynomials of degree ≤ max_degree.

    Parameters
    ----------
    max_degree : int
        The largest polynomial degree the scheme will commit to
    secret : int, optional
        The trapdoor s. If None, a fresh non-zero s is drawn from ``secrets``.
        Passing a fixed value makes every commitment forgeable by whoever
        knows it; it exists for ceremony outputs generated elsewhere.

    Returns
    -------
    ReferenceString
        The public parameters, with ``len(g1_powers) == max_degree + 1``

    Security:
    - Knowledge of s breaks the binding property of every commitment
    - In a real deployment, use an MPC ceremony and import its output
    """
    if max_degree < 0:
        raise ValueError(f"max_degree must be non-negative, got {max_degree}")

    if secret is None:
        secret = FR.random()
    secret = FR.reduce(secret)
    if secret == 0:
        raise ValueError("Setup secret must be non-zero")

    g, h = get_generators()

    # s^i · g for i ∈ {0, ..., d}
    g1_powers = []
    power = 1
    for _ in range(max_degree + 1):
        g1_powers.append(g1_mul(g, power))
        power = FR.mul(power, secret)

    g2_s = g2_mul(h, secret)

    # Drop the trapdoor before the reference string leaves this scope
    del secret, power

    logger.debug("Generated reference string with max_degree=%d", max_degree)
    return ReferenceString(g1_powers=tuple(g1_powers), g2=h, g2_s=g2_s)


def validate_crs(crs: ReferenceString) -> bool:
    """
    Validate that the reference string is well-formed.

    Checks:
    - g1_powers starts with the canonical generator
    - consecutive G1 powers and the G2 element share the same s, i.e.
      e(g_{i+1}, h) == e(g_i, s·h) for every i

    Parameters
    ----------
    crs : ReferenceString
        The reference string from keygen_crs()

    Returns
    -------
    bool
        True if the reference string is consistent, False otherwise
    """
    g, h = get_generators()

    if len(crs.g1_powers) == 0:
        return False

    if not points_equal(crs.g1_powers[0], g) or not points_equal(crs.g2, h):
        return False

    for i in range(len(crs.g1_powers) - 1):
        if not pairing_product_is_one([
            (crs.g1_powers[i + 1], crs.g2),
            (neg(crs.g1_powers[i]), crs.g2_s),
        ]):
            return False

    return True
