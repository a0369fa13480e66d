"""
Utility Functions
=================

Multi-scalar multiplication and pairing products over BLS12-381.

Key Operations:
- Multi-scalar multiplication: Compute Σ e_i · B_i in G1
- Pairing products: Check ∏ e(P_i, Q_i) == 1 with one final exponentiation

According to py_ecc:
- ``pairing(Q, P)`` takes the G2 point first and the G1 point second
- ``pairing(..., final_exponentiate=False)`` returns the raw Miller loop output,
  so several loops can be multiplied before a single ``final_exponentiate``
"""

from typing import List, Sequence, Tuple

from py_ecc.fields import optimized_bls12_381_FQ12 as FQ12
from py_ecc.optimized_bls12_381 import Z1, add, curve_order, final_exponentiate, multiply, pairing


def multiexp_g1(bases: List, exponents: List[int]):
    """
    Compute multi-scalar multiplication in G1: Σ exponents[i] · bases[i].

    Parameters
    ----------
    bases : List
        G1 points
    exponents : List[int]
        Scalars in Z_r

    Returns
    -------
    G1 point
        The sum Σ exponents[i] · bases[i]

    Notes
    -----
    - If bases is empty, returns the identity Z1
    - bases and exponents must have the same length
    - Zero exponents are skipped; no windowing or Pippenger tricks are used
    """
    if len(bases) != len(exponents):
        raise ValueError(f"bases and exponents must have same length: {len(bases)} != {len(exponents)}")

    result = Z1
    for base, exp in zip(bases, exponents):
        exp = exp % curve_order
        if exp == 0:
            continue
        result = add(result, multiply(base, exp))

    return result


def pairing_product_is_one(pairs: Sequence[Tuple]) -> bool:
    """
    Check ∏ e(g1_i, g2_i) == 1 in GT.

    Parameters
    ----------
    pairs : Sequence[Tuple]
        (G1 point, G2 point) pairs

    Returns
    -------
    bool
        True if the product of the pairings is the identity of GT

    Notes
    -----
    An equation e(A, B) == e(C, D) is checked as e(A, B) · e(-C, D) == 1,
    which costs one final exponentiation instead of two.
    """
    acc = FQ12.one()
    for g1_point, g2_point in pairs:
        acc *= pairing(g2_point, g1_point, final_exponentiate=False)
    return final_exponentiate(acc) == FQ12.one()
