"""
Error Types
===========

All errors raised by the commitment and tree layers derive from
``VerkleError``, which is itself a ``ValueError`` so callers that only catch
``ValueError`` keep working.

Every error here is a local usage error. The algorithms are deterministic, so
none of them is worth retrying.
"""


class VerkleError(ValueError):
    """Base class for commitment-tree errors."""


class TooManyLeaves(VerkleError):
    """More leaf records than the tree has slots."""


class InvalidIndex(VerkleError):
    """Proof requested for an out-of-range or empty leaf slot."""


class DegreeExceeded(VerkleError):
    """Polynomial has nonzero coefficients beyond the reference string."""


class InvalidInput(VerkleError):
    """Malformed input: colliding interpolation points, bad records, off-curve points."""


class EvaluationMismatch(VerkleError):
    """Witness requested for an evaluation the polynomial does not satisfy."""
