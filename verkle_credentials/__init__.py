"""
Verkle Trees for Academic Credentials
=====================================

A diploma commits to a fixed-size ordered set of micro-credentials with a
single KZG polynomial commitment over BLS12-381. The holder of any one
credential can prove, with a constant-size proof, that it belongs to the
diploma without revealing the other credentials.

Modules:
--------
- groups: BLS12-381 groups, scalar field arithmetic, point encoding
- crs: Structured reference string generation (powers of s)
- polynomial: Polynomials over Z_r, evaluation, interpolation, division
- kzg: KZG commit, witness creation and pairing-based verification
- encoding: Record → scalar → G1 encoding
- records: Immutable credential records
- tree: Credential tree build, proof generation and verification
- signing: ECDSA issuer signatures over tree headers
- config: Tree shape configuration
- errors: Error types

Usage:
------
    from verkle_credentials import Record, build_tree, generate_proof, verify_proof

    diploma = Record.create("UNI2023-CS-84529", {"program": "Computer Science"})
    leaves = [Record.create("CS101", {"grade": "A"}), Record.create("CS102", {"grade": "B+"})]

    tree = build_tree(diploma, leaves)
    proof = generate_proof(tree, 0)
    assert verify_proof(tree.commitment, proof, tree.scheme)
"""

import logging

__version__ = "0.1.0"

from .config import Config, config
from .errors import (
    DegreeExceeded, EvaluationMismatch, InvalidIndex, InvalidInput, TooManyLeaves, VerkleError,
)
from .kzg import KZGCommitment
from .polynomial import Polynomial
from .records import Record, load_records
from .tree import CredentialTree, Leaf, Proof, build_tree, generate_proof, verify_proof

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Config', 'config',
    'VerkleError', 'TooManyLeaves', 'InvalidIndex', 'DegreeExceeded', 'InvalidInput', 'EvaluationMismatch',
    'KZGCommitment', 'Polynomial', 'Record', 'load_records',
    'CredentialTree', 'Leaf', 'Proof', 'build_tree', 'generate_proof', 'verify_proof',
]
