"""
Group Initialization and Field Arithmetic
=========================================

This module wraps the BLS12-381 pairing groups used by the commitment scheme.

According to py_ecc (``py_ecc.optimized_bls12_381``):
- G1 and G2 are the source groups, points are projective triples (x, y, z)
- The identity ("point at infinity") is Z1 in G1 and Z2 in G2
- Points must be compared with ``eq``, since one point has many projective forms
- ``curve_order`` is the prime order r of G1, G2 and GT

All scalars live in the field Z_r and are plain Python ints reduced mod r.
"""

import secrets

from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.optimized_bls12_381 import (
    G1, G2, add, b, curve_order, eq, is_inf, is_on_curve, multiply, neg,
)

from .errors import InvalidInput

CURVE_NAME = 'BLS12_381'

# Size of a compressed G1 point in bytes
G1_COMPRESSED_SIZE = 48


class ScalarField:
    """
    Arithmetic in Z_r, the scalar field of the pairing groups.

    Every method returns a value already reduced modulo ``order``.
    """

    def __init__(self, order: int):
        self.order = order

    def reduce(self, a: int) -> int:
        return a % self.order

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.order

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.order

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.order

    def neg(self, a: int) -> int:
        return (-a) % self.order

    def inv(self, a: int) -> int:
        """
        Modular inverse of ``a``.

        Raises
        ------
        InvalidInput
            If ``a`` is congruent to zero, which has no inverse.
        """
        a = a % self.order
        if a == 0:
            raise InvalidInput("Zero has no inverse in the scalar field")
        return pow(a, -1, self.order)

    def random(self) -> int:
        """Uniform non-zero scalar from the OS CSPRNG."""
        return secrets.randbelow(self.order - 1) + 1

    def __repr__(self):
        return f"ScalarField(order={self.order})"


FR = ScalarField(curve_order)


def get_generators() -> tuple:
    """
    Return the canonical generators (g, h) of G1 and G2.

    Unlike random generators, the fixed ones let independently built schemes
    agree on how a record is encoded as a group element.
    """
    return G1, G2


def g1_mul(point, scalar: int):
    """Scalar multiplication in G1 with the scalar reduced mod r."""
    return multiply(point, scalar % curve_order)


def g2_mul(point, scalar: int):
    return multiply(point, scalar % curve_order)


def g1_sub(p, q):
    return add(p, neg(q))


def g2_sub(p, q):
    return add(p, neg(q))


def points_equal(p, q) -> bool:
    return eq(p, q)


def is_valid_g1(point) -> bool:
    """True if ``point`` is the identity or lies on the G1 curve."""
    try:
        return is_inf(point) or is_on_curve(point, b)
    except (TypeError, ValueError, AttributeError):
        return False


def point_from_affine(x: int, y: int):
    """
    Build a G1 point from raw affine coordinates.

    Raises
    ------
    InvalidInput
        If (x, y) does not satisfy the curve equation.
    """
    point = (FQ(x), FQ(y), FQ.one())
    if not is_on_curve(point, b):
        raise InvalidInput(f"Point ({x}, {y}) is not on the {CURVE_NAME} G1 curve")
    return point


def random_g1():
    """A uniformly random G1 element (for tests and forged-witness checks)."""
    return g1_mul(G1, FR.random())


def serialize_g1(point) -> bytes:
    """
    Serialize a G1 point to its 48-byte compressed form.

    The encoding is canonical (independent of the projective representation),
    so it is safe to hash.
    """
    return bytes(G1_to_pubkey(point))


def deserialize_g1(data: bytes):
    """
    Parse a 48-byte compressed G1 point.

    Raises
    ------
    InvalidInput
        If the bytes do not decode to a point on the curve.
    """
    if len(data) != G1_COMPRESSED_SIZE:
        raise InvalidInput(f"Compressed G1 point must be {G1_COMPRESSED_SIZE} bytes, got {len(data)}")
    try:
        return pubkey_to_G1(data)
    except ValueError as e:
        raise InvalidInput(f"Invalid compressed G1 point: {e}") from e
