"""
Issuer Signatures
=================

The issuing institution signs the tree header (diploma record and root
commitment), so a verifier can tell which institution published a commitment
before checking any membership proof against it.

Security Notes:
---------------
- ECDSA over NIST P-256, separate from the pairing curve
- The signature binds the diploma record and the root commitment together,
  so a commitment cannot be re-attached to a different diploma
"""

import hashlib
from typing import Tuple

from ecdsa import BadSignatureError, NIST256p, SigningKey, VerifyingKey
from ecdsa.util import sigdecode_string, sigencode_string

from .encoding import serialize_record
from .groups import serialize_g1
from .records import Record
from .tree import CredentialTree


def generate_signing_keys() -> Tuple[SigningKey, VerifyingKey]:
    """
    Generate ECDSA signing and verification keys for an issuer.

    Returns
    -------
    sk : SigningKey
        The issuer's secret signing key
    vk : VerifyingKey
        The public verification key
    """
    sk = SigningKey.generate(curve=NIST256p)
    vk = sk.get_verifying_key()
    return sk, vk


def hash_for_signing(diploma: Record, commitment) -> bytes:
    """
    SHA-256 over the length-prefixed diploma encoding followed by the
    compressed root commitment.
    """
    record_bytes = serialize_record(diploma)
    message = len(record_bytes).to_bytes(4, 'big') + record_bytes + serialize_g1(commitment)
    return hashlib.sha256(message).digest()


def sign_tree(sk: SigningKey, tree: CredentialTree) -> bytes:
    """
    Sign a tree header: σ = Sign(sk, H(diploma || C)).

    Examples
    --------
    >>> sk, vk = generate_signing_keys()
    >>> sigma = sign_tree(sk, tree)
    """
    h = hash_for_signing(tree.diploma, tree.commitment)
    return sk.sign(h, hashfunc=hashlib.sha256, sigencode=sigencode_string)


def verify_tree_signature(vk: VerifyingKey, diploma: Record, commitment, sigma: bytes) -> bool:
    """
    Verify an issuer signature over (diploma, commitment).

    Returns
    -------
    bool
        True if ``sigma`` was produced by the holder of ``vk`` over exactly
        this diploma and commitment
    """
    h = hash_for_signing(diploma, commitment)
    try:
        return vk.verify(sigma, h, hashfunc=hashlib.sha256, sigdecode=sigdecode_string)
    except BadSignatureError:
        return False
