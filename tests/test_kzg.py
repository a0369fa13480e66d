"""
Tests for the KZG Commitment Scheme
===================================

Positive and negative cases for the reference string, commitments, witness
creation and the pairing check.
"""

import random

import pytest
from py_ecc.optimized_bls12_381 import G1, Z1, add, multiply, normalize

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from verkle_credentials.crs import keygen_crs, validate_crs
from verkle_credentials.errors import DegreeExceeded, EvaluationMismatch
from verkle_credentials.groups import FR, points_equal, random_g1
from verkle_credentials.kzg import KZGCommitment
from verkle_credentials.polynomial import Polynomial

r = FR.order


@pytest.fixture(scope="module")
def scheme():
    """KZG instance supporting degree ≤ 7."""
    return KZGCommitment(max_degree=7)


@pytest.fixture
def rng():
    return random.Random(42)


def random_poly(rng, n):
    return Polynomial([rng.randrange(r) for _ in range(n)])


class TestReferenceString:

    def test_length(self):
        crs = keygen_crs(max_degree=4)
        assert len(crs) == 5
        assert crs.max_degree == 4
        assert points_equal(crs.g1_powers[0], G1)

    def test_secret_not_retained(self):
        crs = keygen_crs(max_degree=2)
        fields = set(vars(crs))
        assert fields == {'g1_powers', 'g2', 'g2_s'}

    def test_fresh_secret_each_time(self):
        a = keygen_crs(max_degree=1)
        b = keygen_crs(max_degree=1)
        assert not points_equal(a.g1_powers[1], b.g1_powers[1])

    def test_explicit_secret(self):
        crs = keygen_crs(max_degree=2, secret=5)
        assert points_equal(crs.g1_powers[1], multiply(G1, 5))
        assert points_equal(crs.g1_powers[2], multiply(G1, 25))

    def test_zero_secret_rejected(self):
        with pytest.raises(ValueError):
            keygen_crs(max_degree=2, secret=r)

    def test_validate(self):
        crs = keygen_crs(max_degree=2)
        assert validate_crs(crs)

    def test_validate_detects_inconsistent_powers(self):
        good = keygen_crs(max_degree=2)
        other = keygen_crs(max_degree=2)
        mixed = type(good)(g1_powers=good.g1_powers, g2=good.g2, g2_s=other.g2_s)
        assert not validate_crs(mixed)


class TestCommit:

    def test_constant_polynomial(self, scheme):
        C = scheme.commit(Polynomial([9]))
        assert points_equal(C, multiply(G1, 9))

    def test_zero_polynomial_is_identity(self, scheme):
        assert points_equal(scheme.commit(Polynomial()), Z1)

    def test_additively_homomorphic(self, scheme, rng):
        p1 = random_poly(rng, 8)
        p2 = random_poly(rng, 5)
        lhs = scheme.commit(p1 + p2)
        rhs = add(scheme.commit(p1), scheme.commit(p2))
        assert points_equal(lhs, rhs)

    def test_degree_exceeded(self, scheme, rng):
        with pytest.raises(DegreeExceeded):
            scheme.commit(random_poly(rng, 9))

    def test_trailing_zeros_allowed(self, scheme):
        p = Polynomial([1, 2] + [0] * 10)
        assert points_equal(scheme.commit(p), scheme.commit(Polynomial([1, 2])))

    def test_supplied_crs_too_small(self):
        crs = keygen_crs(max_degree=1)
        with pytest.raises(DegreeExceeded):
            KZGCommitment(max_degree=3, crs=crs)


class TestWitness:

    def test_valid_opening(self, scheme, rng):
        p = random_poly(rng, 8)
        C = scheme.commit(p)
        x = rng.randrange(r)
        y = p.evaluate(x)

        W = scheme.create_witness(p, x, y)

        assert scheme.verify(C, x, y, W), "Opening should verify for the true evaluation"

    def test_mismatch_rejected(self, scheme, rng):
        p = random_poly(rng, 4)
        y = p.evaluate(3)
        with pytest.raises(EvaluationMismatch):
            scheme.create_witness(p, 3, FR.add(y, 1))

    def test_wrong_value_fails(self, scheme, rng):
        p = random_poly(rng, 6)
        C = scheme.commit(p)
        y = p.evaluate(2)
        W = scheme.create_witness(p, 2, y)
        assert not scheme.verify(C, 2, FR.add(y, 1), W)

    def test_wrong_point_fails(self, scheme, rng):
        p = random_poly(rng, 6)
        C = scheme.commit(p)
        y = p.evaluate(2)
        W = scheme.create_witness(p, 2, y)
        assert not scheme.verify(C, 3, y, W)

    def test_forged_witness_fails(self, scheme, rng):
        p = random_poly(rng, 6)
        C = scheme.commit(p)
        y = p.evaluate(1)
        assert not scheme.verify(C, 1, y, random_g1())

    def test_off_curve_witness_rejected(self, scheme, rng):
        p = random_poly(rng, 3)
        C = scheme.commit(p)
        x, y = normalize(G1)
        bogus = (x, y + 1, type(x).one())
        assert not scheme.verify(C, 0, p.evaluate(0), bogus)

    def test_other_reference_string_fails(self, scheme, rng):
        p = random_poly(rng, 5)
        C = scheme.commit(p)
        y = p.evaluate(4)
        W = scheme.create_witness(p, 4, y)

        other = KZGCommitment(max_degree=7)
        assert not other.verify(C, 4, y, W)
