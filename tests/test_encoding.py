"""
Tests for records, record encoding and group helpers.
"""

import pytest
from py_ecc.optimized_bls12_381 import G1, Z1, normalize

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from verkle_credentials.encoding import (
    leaf_value, record_to_scalar, scalar_to_group_element, serialize_record,
)
from verkle_credentials.errors import InvalidInput
from verkle_credentials.groups import (
    FR, deserialize_g1, g1_mul, point_from_affine, points_equal, random_g1, serialize_g1,
)
from verkle_credentials.records import Record, load_records


@pytest.fixture
def record():
    return Record.create("CS101", {"name": "Introduction to Programming", "grade": "A", "credits": "4"})


class TestRecords:

    def test_from_mapping(self):
        rec = Record.from_mapping({"id": "IT211", "metadata": {"grade": "B+"}})
        assert rec.identifier == "IT211"
        assert rec.metadata == {"grade": "B+"}

    def test_missing_id(self):
        with pytest.raises(InvalidInput):
            Record.from_mapping({"metadata": {"grade": "B+"}})

    def test_empty_id(self):
        with pytest.raises(InvalidInput):
            Record.create("")

    def test_bad_metadata(self):
        with pytest.raises(InvalidInput):
            Record.from_mapping({"id": "X", "metadata": ["grade", "A"]})

    def test_with_field_returns_copy(self, record):
        changed = record.with_field("grade", "A+")
        assert record.metadata["grade"] == "A"
        assert changed.metadata["grade"] == "A+"
        assert list(changed.metadata) == list(record.metadata)

    def test_metadata_copy_is_detached(self, record):
        record.metadata["grade"] = "F"
        assert record.metadata["grade"] == "A"

    def test_load_records_keeps_order(self):
        records = load_records([{"id": "B"}, {"id": "A"}, {"id": "C", "metadata": {}}])
        assert [rec.identifier for rec in records] == ["B", "A", "C"]


class TestEncoding:

    def test_serialize_record(self):
        rec = Record.create("CS101", {"grade": "A", "credits": "4"})
        assert serialize_record(rec) == b'{"id":"CS101","metadata":{"grade":"A","credits":"4"}}'

    def test_scalar_deterministic(self, record):
        again = Record.create("CS101", {"name": "Introduction to Programming", "grade": "A", "credits": "4"})
        assert record_to_scalar(record) == record_to_scalar(again)
        assert 0 <= record_to_scalar(record) < FR.order

    def test_group_element_deterministic(self, record):
        a = scalar_to_group_element(record_to_scalar(record))
        b = scalar_to_group_element(record_to_scalar(record))
        assert points_equal(a, b)

    def test_field_change_changes_scalar(self, record):
        assert record_to_scalar(record) != record_to_scalar(record.with_field("grade", "B"))

    def test_metadata_order_matters(self):
        a = Record.create("X", {"a": "1", "b": "2"})
        b = Record.create("X", {"b": "2", "a": "1"})
        assert record_to_scalar(a) != record_to_scalar(b)

    def test_scalar_reduced(self):
        assert points_equal(scalar_to_group_element(FR.order + 3), g1_mul(G1, 3))
        assert points_equal(scalar_to_group_element(0), Z1)

    def test_leaf_value_independent_of_representation(self):
        # 2·G computed two ways has different projective coordinates
        p = g1_mul(G1, 2)
        q = g1_mul(g1_mul(G1, 4), (FR.order + 1) // 2)
        assert points_equal(p, q)
        assert leaf_value(p) == leaf_value(q)


class TestGroups:

    def test_point_from_affine(self):
        x, y = normalize(G1)
        assert points_equal(point_from_affine(x.n, y.n), G1)

    def test_point_off_curve(self):
        x, y = normalize(G1)
        with pytest.raises(InvalidInput):
            point_from_affine(x.n, y.n + 1)

    def test_serialize_roundtrip(self):
        p = random_g1()
        data = serialize_g1(p)
        assert len(data) == 48
        assert points_equal(deserialize_g1(data), p)

    def test_deserialize_wrong_length(self):
        with pytest.raises(InvalidInput):
            deserialize_g1(b"\x00" * 47)

    def test_inverse_of_zero(self):
        with pytest.raises(InvalidInput):
            FR.inv(FR.order)

    def test_inverse(self):
        assert FR.mul(FR.inv(7), 7) == 1
