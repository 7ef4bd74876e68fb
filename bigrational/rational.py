"""
This module provides exact rational numbers over arbitrary-precision integers.

Besides finite values there are three non-finite ones: NaN (0/0),
POSITIVE_INFINITY (1/0) and NEGATIVE_INFINITY (-1/0). Division by zero
does not raise, it gives one of them.

Constants ZERO, ONE, NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY are singletons:
the factory always returns the same objects, so identity checks are reliable.
Note that non-finite values are not equal to anything, even to themselves:

    >>> over(0, 0) is NaN
    True
    >>> NaN == NaN
    False
"""

import math
import numbers
import operator

from quicktions import Fraction  # type: ignore

from .utils import as_int, get_lcm, sign, is_power_of_two


class TypeMismatch(TypeError):
    """Conversion of a rational to a type without numeric meaning."""


def _coerce(x):
    # implicit conversion for operators: only rationals and integers
    if isinstance(x, Rational):
        return x
    elif isinstance(x, numbers.Integral):
        return Rational(x)
    else:
        return None


class Rational:
    """
    Rational number n/d in lowest terms with d >= 0.

    Immutable and hashable. Instances are created by the normalizing
    factory only: Rational(n, d), new(n, d) or over(n, d).

    Equality and ordering are different things here: == holds only for
    finite values, while compare_to (and <, <=, >, >=) is a total order
    -oo < finite values < +oo < NaN, with identical objects equal.
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator, denominator=1):
        n = as_int(numerator)
        d = as_int(denominator)
        if d < 0:
            n = -n
            d = -d

        g = math.gcd(n, d)
        if g != 0:
            n //= g
            d //= g

        # constants must be the *same* objects
        if d == 0:
            # after reduction n is one of 0, 1, -1 here, since gcd(n, 0) = |n|
            if n == 0:
                return NaN
            elif n == 1:
                return POSITIVE_INFINITY
            elif n == -1:
                return NEGATIVE_INFINITY
        if n == 0:
            return ZERO
        if n == 1 and d == 1:
            return ONE

        return cls._make(n, d)

    @classmethod
    def _make(cls, n, d):
        # raw constructor, no normalization
        obj = super().__new__(cls)
        object.__setattr__(obj, '_numerator', n)
        object.__setattr__(obj, '_denominator', d)
        return obj

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    def __delattr__(self, name):
        raise AttributeError("Rational is immutable")

    def __reduce__(self):
        # unpickling goes through the factory and restores singletons
        return (Rational, (self._numerator, self._denominator))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def convert(cls, x):
        """Explicit conversion from Rational, int or any numbers.Rational (e.g., Fraction)."""
        if isinstance(x, Rational):
            return x
        elif isinstance(x, numbers.Rational):
            return cls(x.numerator, x.denominator)
        else:
            raise TypeError("Can't convert {} to Rational".format(type(x).__name__))

    @classmethod
    def from_fraction(cls, fraction):
        return cls(fraction.numerator, fraction.denominator)

    @classmethod
    def from_float(cls, x):
        """Exact value of a float; nan and infinities map to the constants."""
        x = float(x)
        if math.isnan(x):
            return NaN
        if math.isinf(x):
            return POSITIVE_INFINITY if x > 0 else NEGATIVE_INFINITY
        return cls.from_fraction(Fraction(x))

    @classmethod
    def parse(cls, text):
        """
        Parse text produced by str(): "n", "n/d", "NaN", "+∞" or "-∞".

        Zero denominator is allowed and normalized as usual, e.g., "4/0" gives +∞.
        """
        text = text.strip()
        for special in (NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY):
            if text == str(special):
                return special
        if '/' in text:
            n, d = text.split('/')
        else:
            n, d = text, 1
        return cls(int(n), int(d))

    def to_fraction(self):
        if not self.is_finite():
            raise ValueError("Can't convert {} to Fraction".format(self))
        return Fraction(self._numerator, self._denominator)

    def to_char(self):
        raise TypeMismatch("Characters are non-numeric")

    def __int__(self):
        """Truncate toward zero, like int(float)."""
        if self is NaN:
            raise ValueError("Can't convert NaN to integer")
        if self.is_infinite():
            raise OverflowError("Can't convert infinity to integer")
        n, d = self._numerator, self._denominator
        return n // d if n >= 0 else -(-n // d)

    __trunc__ = __int__

    def __floor__(self):
        return int(self.floor())

    def __ceil__(self):
        return -int((-self).floor())

    def __float__(self):
        if self is NaN:
            return math.nan
        if self is POSITIVE_INFINITY:
            return math.inf
        if self is NEGATIVE_INFINITY:
            return -math.inf
        try:
            return self._numerator / self._denominator
        except OverflowError:
            # beyond float range
            return math.copysign(math.inf, self._numerator)

    def __bool__(self):
        return self is not ZERO

    def compare_to(self, other) -> int:
        """
        Total order, ignoring ==: so NaN sorts to the end, even as NaN != NaN.

        Returns -1, 0 or 1.
        """
        other = Rational.convert(other)
        if self is other:  # sort stability for constants
            return 0
        if self is NEGATIVE_INFINITY:
            return -1
        if other is NEGATIVE_INFINITY:
            return 1
        # NaN sorts after +oo
        if self is NaN:
            return 1
        if other is NaN:
            return -1
        # +oo is handled by cross-multiplication, as x/0 vs y/d compares d with 0
        a = self._numerator * other._denominator
        b = other._numerator * self._denominator
        return sign(a - b)

    def _compare(self, other, op):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return op(self.compare_to(other), 0)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __eq__(self, other):
        # NB: NaN != NaN, nor infinities are equal to themselves
        if not self.is_finite():
            return False
        if self is other:
            return True
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if not other.is_finite():
            return False
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __hash__(self):
        # agree with hash(int) for whole numbers, as ONE == 1
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __str__(self):
        if self is NaN:
            return 'NaN'
        elif self is POSITIVE_INFINITY:
            return '+∞'
        elif self is NEGATIVE_INFINITY:
            return '-∞'
        elif self._denominator == 1:
            return str(self._numerator)
        else:
            return '{}/{}'.format(self._numerator, self._denominator)

    def __repr__(self):
        return 'Rational({}, {})'.format(self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __neg__(self):
        return Rational(-self._numerator, self._denominator)

    def inc(self):
        """Add one."""
        return Rational(self._numerator + self._denominator, self._denominator)

    def dec(self):
        """Subtract one."""
        return Rational(self._numerator - self._denominator, self._denominator)

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + -other

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + -self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self._numerator * other._numerator, self._denominator * other._denominator)

    __rmul__ = __mul__

    def __truediv__(self, other):
        # NB: division by zero gives NaN or an infinity, no exception
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self * other.reciprocal()

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self.reciprocal()

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        exponent = int(exponent)
        if exponent >= 0:
            return Rational(self._numerator ** exponent, self._denominator ** exponent)
        else:
            return Rational(self._denominator ** -exponent, self._numerator ** -exponent)

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator)

    def reciprocal(self):
        """Multiplicative inverse; reciprocal of infinities is zero, of zero is +oo."""
        return Rational(self._denominator, self._numerator)

    def signum(self):
        if self is NaN:
            return NaN
        return Rational(sign(self._numerator))

    def floor(self):
        """Greatest whole number not exceeding self; non-finite values are returned as is."""
        if not self.is_finite():
            return self
        return Rational(self._numerator // self._denominator)

    def gcd(self, other):
        """Greatest rational that divides both: gcd of numerators over lcm of denominators."""
        other = Rational.convert(other)
        return Rational(
            math.gcd(self._numerator, other._numerator),
            get_lcm([self._denominator, other._denominator]),
        )

    def lcm(self, other):
        """Least rational divisible by both: lcm of numerators over gcd of denominators."""
        other = Rational.convert(other)
        return Rational(
            get_lcm([self._numerator, other._numerator]),
            math.gcd(self._denominator, other._denominator),
        )

    def is_zero(self):
        return self is ZERO

    def is_one(self):
        return self is ONE

    def is_nan(self):
        return self is NaN

    def is_positive_infinity(self):
        return self is POSITIVE_INFINITY

    def is_negative_infinity(self):
        return self is NEGATIVE_INFINITY

    def is_infinite(self):
        # NB: NaN is not infinite
        return self is POSITIVE_INFINITY or self is NEGATIVE_INFINITY

    def is_finite(self):
        # NB: NaN is not finite
        return not self.is_nan() and not self.is_infinite()

    def is_dyadic(self):
        """Check that denominator is a power of two."""
        return self.is_finite() and is_power_of_two(self._denominator)

    def range_to(self, end_inclusive):
        """Progression self, self+1, ... up to end_inclusive; see RationalProgression.step."""
        from .progression import RationalProgression
        return RationalProgression(self, end_inclusive)

    def down_to(self, end_inclusive):
        """Progression self, self-1, ... down to end_inclusive."""
        from .progression import RationalProgression
        return RationalProgression(self, end_inclusive, -ONE)


NaN = Rational._make(0, 0)
ZERO = Rational._make(0, 1)
ONE = Rational._make(1, 1)
POSITIVE_INFINITY = Rational._make(1, 0)
NEGATIVE_INFINITY = Rational._make(-1, 0)

Rational.NaN = NaN
Rational.ZERO = ZERO
Rational.ONE = ONE
Rational.POSITIVE_INFINITY = POSITIVE_INFINITY
Rational.NEGATIVE_INFINITY = NEGATIVE_INFINITY


def new(numerator, denominator=1):
    return Rational(numerator, denominator)


def over(numerator, denominator):
    """Infix-like constructor: over(4, 10) is 2/5."""
    return Rational(numerator, denominator)
