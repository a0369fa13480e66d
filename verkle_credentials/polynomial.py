"""
Polynomials over Z_r
====================

Dense coefficient representation: index = degree, index 0 = constant term.
Coefficients are kept in a read-only numpy array of Python ints (dtype=object),
so the 255-bit values never overflow and a polynomial can be shared between
threads without copying.

Operations:
- evaluate: p(x) by accumulating c_i · x^i
- interpolate: Lagrange interpolation through (index, value) points
- divide_by_linear: synthetic division by (X - a)
"""

from typing import Sequence, Tuple

import numpy as np

from .errors import InvalidInput
from .groups import FR


class Polynomial:
    """
    A polynomial with coefficients in Z_r.

    Parameters
    ----------
    coefficients : Sequence[int], optional
        Coefficients c_0, c_1, ..., c_d. Values are reduced mod r.
        An empty or missing sequence gives the zero polynomial [0].
    """

    def __init__(self, coefficients: Sequence[int] = None):
        if coefficients is None or len(coefficients) == 0:
            coefficients = [0]
        coeffs = np.array([int(c) % FR.order for c in coefficients], dtype=object)
        coeffs.flags.writeable = False
        self._coeffs = coeffs

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return tuple(self._coeffs.tolist())

    @property
    def degree(self) -> int:
        """Index of the highest nonzero coefficient (0 for the zero polynomial)."""
        nonzero = np.flatnonzero(self._coeffs != 0)
        return int(nonzero[-1]) if len(nonzero) else 0

    def __len__(self):
        return len(self._coeffs)

    def evaluate(self, x: int) -> int:
        """
        Evaluate the polynomial at x.

        Formula:
        --------
        p(x) = Σ_{i=0}^{d} c_i · x^i  (mod r)

        The running power of x and the accumulator are reduced after every
        multiplication and addition.
        """
        x = FR.reduce(x)
        result = 0
        power = 1
        for c in self._coeffs:
            result = FR.add(result, FR.mul(c, power))
            power = FR.mul(power, x)
        return result

    @classmethod
    def interpolate(cls, points: Sequence[Tuple[int, int]]) -> 'Polynomial':
        """
        Lagrange interpolation through ``points``.

        Formula:
        --------
        p(X) = Σ_i y_i · L_i(X),   L_i(X) = ∏_{j≠i} (X - x_j) / (x_i - x_j)

        Parameters
        ----------
        points : Sequence[Tuple[int, int]]
            (x_i, y_i) pairs; the x_i must be distinct mod r

        Returns
        -------
        Polynomial
            The unique polynomial of degree < len(points) through every point.
            Its coefficient vector has length len(points).

        Raises
        ------
        InvalidInput
            If two x-coordinates collide mod r (x_i - x_j has no inverse).
        """
        if len(points) == 0:
            return cls()

        p = FR.order
        xs = [FR.reduce(x) for x, _ in points]
        ys = [FR.reduce(y) for _, y in points]
        n = len(xs)

        coeffs = np.zeros(n, dtype=object)
        for i in range(n):
            # Numerator ∏_{j≠i} (X - x_j), built one linear factor at a time
            basis = np.array([1], dtype=object)
            denom = 1
            for j in range(n):
                if j == i:
                    continue
                diff = FR.sub(xs[i], xs[j])
                if diff == 0:
                    raise InvalidInput(f"Interpolation points {i} and {j} share x = {xs[i]}")

                new_basis = np.zeros(len(basis) + 1, dtype=object)
                new_basis[1:] += basis          # basis * X
                new_basis[:-1] -= basis * xs[j]  # basis * (-x_j)
                basis = new_basis % p
                denom = FR.mul(denom, diff)

            scale = FR.mul(ys[i], FR.inv(denom))
            coeffs = (coeffs + basis * scale) % p

        return cls(coeffs)

    def divide_by_linear(self, a: int) -> Tuple['Polynomial', int]:
        """
        Synthetic division by (X - a).

        Returns
        -------
        (q, rem) : Tuple[Polynomial, int]
            Such that p(X) = q(X) · (X - a) + rem. The remainder equals p(a).

        Notes
        -----
        Walks the coefficients from the highest degree down, carrying the
        running remainder. The quotient has one coefficient fewer than p.
        """
        a = FR.reduce(a)
        c = self._coeffs
        n = len(c)
        if n == 1:
            return Polynomial(), int(c[0])

        quotient = np.zeros(n - 1, dtype=object)
        carry = c[-1]
        for i in range(n - 2, -1, -1):
            quotient[i] = carry
            carry = FR.add(c[i], FR.mul(carry, a))

        return Polynomial(quotient), int(carry)

    def _padded(self, other: 'Polynomial') -> Tuple[np.ndarray, np.ndarray]:
        m = max(len(self), len(other))
        a = np.zeros(m, dtype=object)
        b = np.zeros(m, dtype=object)
        a[:len(self)] = self._coeffs
        b[:len(other)] = other._coeffs
        return a, b

    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        a, b = self._padded(other)
        return Polynomial((a + b) % FR.order)

    def __sub__(self, other: 'Polynomial') -> 'Polynomial':
        a, b = self._padded(other)
        return Polynomial((a - b) % FR.order)

    def _trimmed(self) -> Tuple[int, ...]:
        return self.coefficients[:self.degree + 1]

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._trimmed() == other._trimmed()

    def __hash__(self):
        return hash(self._trimmed())

    def __repr__(self):
        return f"Polynomial({list(self.coefficients)})"
