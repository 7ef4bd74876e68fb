import unittest

from bigrational.rational import Rational, ZERO, NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY
from bigrational.continued_fraction import FiniteContinuedFraction

from examples import get_finite_samples, CONTINUED_FRACTIONS


class TestContinuedFraction(unittest.TestCase):

    def test_value_of(self):
        cf = FiniteContinuedFraction.value_of(Rational(7, 3))
        self.assertEqual(list(cf), [Rational(2), Rational(3)])
        self.assertEqual(str(cf), '[2; 3]')
        self.assertEqual(cf.integer_part, Rational(2))
        self.assertEqual(cf.fractional_parts, (Rational(3),))
        for n, d, text in CONTINUED_FRACTIONS:
            self.assertEqual(str(FiniteContinuedFraction.value_of(Rational(n, d))), text)

    def test_roundtrip(self):
        for x in get_finite_samples():
            cf = FiniteContinuedFraction.value_of(x)
            self.assertTrue(cf.is_finite())
            self.assertEqual(cf.to_rational(), x)
            # terms are whole numbers, fractional ones are positive
            self.assertTrue(all(a.denominator == 1 for a in cf))
            self.assertTrue(all(a > ZERO for a in cf.fractional_parts))

    def test_non_finite(self):
        for r in [NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY]:
            cf = FiniteContinuedFraction.value_of(r)
            self.assertEqual(str(cf), '[NaN;]')
            self.assertEqual(len(cf), 1)
            self.assertIs(cf.integer_part, NaN)
            self.assertFalse(cf.is_finite())
            # lossy for infinities
            self.assertIs(cf.to_rational(), NaN)
            self.assertIs(cf.reciprocal, cf)
            self.assertNotEqual(cf, cf)

    def test_from_terms(self):
        cf = FiniteContinuedFraction.from_terms(4, 2, 6, 7)
        self.assertEqual(cf.to_rational(), Rational(415, 93))
        self.assertEqual(cf, FiniteContinuedFraction.value_of(Rational(415, 93)))
        self.assertEqual(str(FiniteContinuedFraction.from_terms(3)), '[3;]')
        self.assertEqual(FiniteContinuedFraction.from_terms(3).to_rational(), Rational(3))
        # not validated: negative fractional parts are kept as is
        odd = FiniteContinuedFraction.from_terms(1, -2)
        self.assertEqual(str(odd), '[1; -2]')
        self.assertEqual(odd.to_rational(), Rational(1, 2))
        with self.assertRaises(TypeError):
            FiniteContinuedFraction.from_terms(1.5)
        with self.assertRaises(ValueError):
            FiniteContinuedFraction([])
        self.assertEqual(FiniteContinuedFraction([2, 3]), FiniteContinuedFraction.from_terms(2, 3))
        with self.assertRaises(TypeError):
            FiniteContinuedFraction(['2', 3])
        with self.assertRaises(TypeError):
            FiniteContinuedFraction([2.5])

    def test_reciprocal(self):
        cf = FiniteContinuedFraction.value_of(Rational(7, 3))
        rec = cf.reciprocal
        self.assertEqual(str(rec), '[0; 2, 3]')
        self.assertEqual(rec.to_rational(), Rational(3, 7))
        self.assertEqual(rec.reciprocal, cf)
        self.assertEqual(str(FiniteContinuedFraction.value_of(Rational(3, 7)).reciprocal), '[2; 3]')
        self.assertEqual(str(FiniteContinuedFraction.from_terms(0).reciprocal), '[NaN;]')
        for x in get_finite_samples():
            if x == 0:
                continue
            rec = FiniteContinuedFraction.value_of(x).reciprocal
            self.assertEqual(rec.to_rational(), x.reciprocal())

    def test_terms(self):
        cf = FiniteContinuedFraction.value_of(Rational(415, 93))
        self.assertEqual(cf.terms(0), (Rational(4),))
        self.assertEqual(cf.terms(2), (Rational(4), Rational(2), Rational(6)))
        self.assertEqual(cf.terms(3), tuple(cf))
        with self.assertRaises(IndexError):
            cf.terms(4)
        with self.assertRaises(IndexError):
            cf.terms(-1)

    def test_sequence(self):
        cf = FiniteContinuedFraction.value_of(Rational(415, 93))
        self.assertEqual(len(cf), 4)
        self.assertEqual(cf[0], Rational(4))
        self.assertEqual(cf[-1], Rational(7))
        self.assertEqual(cf[1:3], (Rational(2), Rational(6)))
        self.assertIn(Rational(6), cf)
        self.assertEqual(cf.index(Rational(6)), 2)

    def test_simple(self):
        self.assertTrue(FiniteContinuedFraction.from_terms(1, 1, 1).is_simple())
        self.assertTrue(FiniteContinuedFraction.from_terms(3).is_simple())
        self.assertTrue(FiniteContinuedFraction.from_terms(0, 1).is_simple())
        self.assertFalse(FiniteContinuedFraction.value_of(Rational(7, 3)).is_simple())

    def test_convergents(self):
        cf = FiniteContinuedFraction.value_of(Rational(415, 93))
        self.assertEqual(
            list(cf.convergents()),
            [Rational(4), Rational(9, 2), Rational(58, 13), Rational(415, 93)],
        )
        for x in get_finite_samples():
            cf = FiniteContinuedFraction.value_of(x)
            convergents = list(cf.convergents())
            self.assertEqual(len(convergents), len(cf))
            self.assertEqual(convergents[-1], x)
        self.assertEqual(list(FiniteContinuedFraction.from_terms(1, 1, 1, 1).convergents())[-1], Rational(5, 3))
        nan_convergents = list(FiniteContinuedFraction.value_of(NaN).convergents())
        self.assertEqual(len(nan_convergents), 1)
        self.assertIs(nan_convergents[0], NaN)

    def test_hash(self):
        a = FiniteContinuedFraction.value_of(Rational(22, 7))
        b = FiniteContinuedFraction.from_terms(3, 7)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, FiniteContinuedFraction.from_terms(3, 7, 1))
        self.assertNotEqual(a, (Rational(3), Rational(7)))
        self.assertEqual(repr(b), 'FiniteContinuedFraction([3; 7])')
