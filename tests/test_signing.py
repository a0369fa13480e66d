"""
Tests for issuer signatures over tree headers.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from verkle_credentials import Config, Record, build_tree
from verkle_credentials.groups import random_g1
from verkle_credentials.signing import generate_signing_keys, sign_tree, verify_tree_signature


@pytest.fixture(scope="module")
def signed_tree():
    diploma = Record.create("UNI2023-CS-84529", {"program": "Computer Science"})
    leaves = [Record.create("CS101", {"grade": "A"}), Record.create("CS102", {"grade": "B"})]
    tree = build_tree(diploma, leaves, Config(branching_factor=2, depth=2))
    sk, vk = generate_signing_keys()
    return tree, sk, vk, sign_tree(sk, tree)


def test_valid_signature(signed_tree):
    tree, _, vk, sigma = signed_tree
    assert verify_tree_signature(vk, tree.diploma, tree.commitment, sigma)


def test_other_diploma_rejected(signed_tree):
    tree, _, vk, sigma = signed_tree
    other = tree.diploma.with_field("program", "Mathematics")
    assert not verify_tree_signature(vk, other, tree.commitment, sigma)


def test_other_commitment_rejected(signed_tree):
    tree, _, vk, sigma = signed_tree
    assert not verify_tree_signature(vk, tree.diploma, random_g1(), sigma)


def test_wrong_key_rejected(signed_tree):
    tree, _, _, sigma = signed_tree
    _, other_vk = generate_signing_keys()
    assert not verify_tree_signature(other_vk, tree.diploma, tree.commitment, sigma)


def test_corrupted_signature_rejected(signed_tree):
    tree, _, vk, sigma = signed_tree
    corrupted = bytes([sigma[0] ^ 0x01]) + sigma[1:]
    assert not verify_tree_signature(vk, tree.diploma, tree.commitment, corrupted)
