"""
This module provides finite continued fractions of rationals.

[a0; a1, a2, ...] = a0 + 1/(a1 + 1/(a2 + ...)), where a0 is the integer part
and a1, a2, ... are the fractional parts, with their natural indices.

Terms are Rationals rather than ints, to express continued fractions of
non-finite rationals: all of them are [NaN;]. Infinite continued fractions
are supported in a very limited sense: they all convert back to NaN.
"""

from collections.abc import Sequence
import logging

from .rational import Rational, NaN, ZERO, ONE


logger = logging.getLogger(__name__)


class FiniteContinuedFraction(Sequence):
    """
    Immutable sequence of continued fraction terms, integer part first.

    Use factories value_of (decompose a rational) or from_terms (explicit terms).
    """

    __slots__ = ('_terms',)

    def __init__(self, terms):
        # internal, prefer value_of or from_terms
        terms = tuple(Rational.convert(a) for a in terms)
        if not terms:
            raise ValueError("Continued fraction must have the integer part")
        self._terms = terms

    @classmethod
    def value_of(cls, r):
        """Decompose the rational into canonical continued fraction."""
        r = Rational.convert(r)
        if not r.is_finite():
            return cls([NaN])

        # Euclid algorithm; stops as denominators of remainders strictly decrease
        terms = []
        x = r
        while True:
            i = x.floor()
            terms.append(i)
            f = x - i
            if f.is_zero():
                break
            x = f.reciprocal()

        logger.debug('continued fraction of %s: %d terms', r, len(terms))
        return cls(terms)

    @classmethod
    def from_terms(cls, integer_part, *fractional_parts):
        """
        Create continued fraction from decomposed integer terms.

        Terms are stored as is, e.g., negative or zero fractional parts are not rejected.
        """
        return cls(Rational(a) for a in (integer_part,) + fractional_parts)

    def __getitem__(self, index):
        return self._terms[index]

    def __len__(self):
        return len(self._terms)

    @property
    def integer_part(self) -> Rational:
        return self._terms[0]

    @property
    def fractional_parts(self) -> tuple[Rational, ...]:
        return self._terms[1:]

    @property
    def reciprocal(self):
        """Multiplicative inverse: 1/[a0; a1, ...] = [0; a0, a1, ...] and vice versa."""
        if not self.is_finite():
            return self
        if self.integer_part.is_zero():
            if len(self) == 1:
                # 1/0
                return type(self)([NaN])
            return type(self)(self.fractional_parts)
        return type(self)((ZERO,) + self._terms)

    def terms(self, fractional_terms: int) -> tuple[Rational, ...]:
        """
        Integer part and the first fractional_terms fractional parts.

        E.g., terms(0) is only the integer part.
        """
        if not 0 <= fractional_terms < len(self):
            raise IndexError("Continued fraction {} has no {} fractional terms".format(self, fractional_terms))
        return self._terms[:fractional_terms + 1]

    def is_finite(self) -> bool:
        """Finite rationals give finite continued fractions, non-finite give [NaN;]."""
        return self.integer_part.is_finite()

    def is_simple(self) -> bool:
        """Check that all fractional parts have 1 as numerator."""
        return all(a.numerator == 1 for a in self.fractional_parts)

    def to_rational(self) -> Rational:
        """
        Rational value of the continued fraction.

        Roundtrip Rational -> continued fraction -> Rational is lossy for infinities: it gives NaN.
        """
        if not self.is_finite():
            return NaN
        value = self._terms[-1]
        for a in reversed(self._terms[:-1]):
            value = a + value.reciprocal()
        return value

    def convergents(self):
        """
        Generate convergents [a0;], [a0; a1], [a0; a1, a2], ... as rationals.

        Standard recurrence: h_k = a_k * h_{k-1} + h_{k-2}, k_k = a_k * k_{k-1} + k_{k-2},
        starting from h_{-2}, h_{-1} = 0, 1 and k_{-2}, k_{-1} = 1, 0.
        """
        if not self.is_finite():
            yield NaN
            return
        h_prev, h = ZERO, ONE
        k_prev, k = ONE, ZERO
        for a in self._terms:
            h_prev, h = h, a * h + h_prev
            k_prev, k = k, a * k + k_prev
            yield h / k

    def __eq__(self, other):
        # terms are compared with Rational ==, so [NaN;] != [NaN;]
        if not isinstance(other, FiniteContinuedFraction):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self._terms, other._terms))

    def __hash__(self):
        return hash(self._terms)

    def __str__(self):
        if len(self) == 1:
            return '[{};]'.format(self.integer_part)
        return '[{}; {}]'.format(self.integer_part, ', '.join(str(a) for a in self.fractional_parts))

    def __repr__(self):
        return 'FiniteContinuedFraction({})'.format(self)
