"""
Credential Verkle Tree
======================

A diploma commits to up to ``num_leaves`` micro-credentials with one KZG
commitment. Each slot i holds either a ``Leaf`` or ``None`` (empty), and the
root polynomial p satisfies

    p(i) = leaf_value(leaf_i.group_element)    for occupied slots
    p(i) = 0                                   for empty slots

A holder proves membership of slot i by presenting the record, its G1
encoding, (i, p(i)) and the KZG witness for that opening.

Node variants:
--------------
- Leaf: one credential record and its G1 encoding
- CredentialTree: the root, holding the diploma, the slots, the polynomial,
  its commitment and the scheme that produced it

Both are frozen; once ``build_tree`` returns nothing mutates the tree.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .config import Config, config as default_config
from .encoding import EMPTY_SLOT_VALUE, leaf_value, record_to_scalar, scalar_to_group_element
from .errors import InvalidIndex, TooManyLeaves
from .groups import points_equal
from .kzg import KZGCommitment
from .polynomial import Polynomial
from .records import Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leaf:
    record: Record
    group_element: tuple

    @classmethod
    def from_record(cls, record: Record) -> 'Leaf':
        return cls(record, scalar_to_group_element(record_to_scalar(record)))

    @property
    def value(self) -> int:
        return leaf_value(self.group_element)


@dataclass(frozen=True)
class CredentialTree:
    diploma: Record
    children: Tuple[Optional[Leaf], ...]
    polynomial: Polynomial
    commitment: tuple
    scheme: KZGCommitment
    config: Config

    @property
    def num_leaves(self) -> int:
        return len(self.children)

    @property
    def leaves(self) -> Tuple[Leaf, ...]:
        """Occupied slots, in slot order."""
        return tuple(child for child in self.children if child is not None)


@dataclass(frozen=True)
class Proof:
    """
    Membership proof for one slot.

    Attributes
    ----------
    record : Record
        The credential being proven
    leaf_group_element : G1 point
        The record's G1 encoding as stored in the tree
    x : int
        Slot index (evaluation point)
    y : int
        Slot value p(x)
    witness : G1 point
        KZG opening proof for p(x) = y
    """
    record: Record
    leaf_group_element: tuple
    x: int
    y: int
    witness: tuple


def slot_value(slot: Optional[Leaf]) -> int:
    if slot is None:
        return EMPTY_SLOT_VALUE
    return slot.value


def build_tree(diploma: Record, leaves: Sequence[Record], config: Config = None,
               scheme: KZGCommitment = None) -> CredentialTree:
    """
    Build a credential tree committing to ``leaves`` under ``diploma``.

    Parameters
    ----------
    diploma : Record
        The root (diploma) record
    leaves : Sequence[Record]
        Micro-credential records, placed in slots 0, 1, ... in order
    config : Config, optional
        Tree shape; defaults to the module-level config
    scheme : KZGCommitment, optional
        Scheme to commit with. If None a new one is set up with a fresh
        secret and max degree ``num_leaves - 1``.

    Returns
    -------
    CredentialTree

    Raises
    ------
    TooManyLeaves
        If there are more records than slots.
    DegreeExceeded
        If a supplied scheme cannot commit to ``num_leaves`` slots.
    """
    config = config or default_config
    num_leaves = config.num_leaves

    if len(leaves) > num_leaves:
        raise TooManyLeaves(
            f"Too many credentials for this tree depth: {len(leaves)} > maximum {num_leaves}")

    if scheme is None:
        scheme = KZGCommitment(config.max_degree)

    children = [Leaf.from_record(record) for record in leaves]
    children.extend([None] * (num_leaves - len(children)))

    points = [(i, slot_value(child)) for i, child in enumerate(children)]
    polynomial = Polynomial.interpolate(points)
    commitment = scheme.commit(polynomial)

    logger.debug("Built tree for %s with %d/%d occupied slots",
                 diploma.identifier, len(leaves), num_leaves)

    return CredentialTree(
        diploma=diploma,
        children=tuple(children),
        polynomial=polynomial,
        commitment=commitment,
        scheme=scheme,
        config=config,
    )


def generate_proof(tree: CredentialTree, index: int) -> Proof:
    """
    Generate the membership proof for slot ``index``.

    Raises
    ------
    InvalidIndex
        If ``index`` is out of range or the slot is empty.
    """
    if not isinstance(index, int) or not 0 <= index < tree.num_leaves:
        raise InvalidIndex(f"Invalid leaf index {index!r}: tree has {tree.num_leaves} slots")

    leaf = tree.children[index]
    if leaf is None:
        raise InvalidIndex(f"Invalid leaf index {index}: slot is empty")

    x = index
    y = leaf.value
    witness = tree.scheme.create_witness(tree.polynomial, x, y)

    return Proof(
        record=leaf.record,
        leaf_group_element=leaf.group_element,
        x=x,
        y=y,
        witness=witness,
    )


def verify_proof(root_commitment, proof: Proof, scheme: KZGCommitment) -> bool:
    """
    Verify a membership proof against a root commitment.

    Checks:
    1. The KZG opening: the tree commits to value y at slot x
    2. The record re-encodes to the presented leaf point
    3. y is the slot value of that leaf point

    Check 1 proves that *some* value sits at the slot; checks 2 and 3 tie that
    value to this particular record.
    """
    if not scheme.verify(root_commitment, proof.x, proof.y, proof.witness):
        logger.debug("Opening check failed for slot %s", proof.x)
        return False

    expected = scalar_to_group_element(record_to_scalar(proof.record))
    if not points_equal(expected, proof.leaf_group_element):
        logger.debug("Record %s does not match its leaf encoding", proof.record.identifier)
        return False

    return leaf_value(proof.leaf_group_element) == proof.y
