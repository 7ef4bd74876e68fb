import unittest
import contextlib
import io

from bigrational.rational import Rational, ZERO, ONE, NaN

from demo import print_progressions, run_demo


def _capture(func, *args):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        func(*args)
    return out.getvalue()


class TestDemo(unittest.TestCase):

    def test_progressions(self):
        output = _capture(print_progressions, ZERO, Rational(7, 3), Rational(1, 2))
        self.assertIn('incrementing by 1/2: 0 1/2 1 3/2 2', output)
        self.assertIn('decrementing by 1: 7/3 4/3 1/3', output)

    def test_invalid_progressions_reported(self):
        output = _capture(print_progressions, ZERO, ONE, ZERO)
        self.assertIn('Invalid progression 0..1 step 0', output)
        output = _capture(print_progressions, ZERO, NaN, ONE)
        self.assertIn('Invalid progression 0..NaN step 1', output)

    def test_run_demo(self):
        output = _capture(run_demo, ZERO, ONE, ZERO)
        self.assertIn('Invalid progression', output)
        self.assertIn('Continued fraction of NaN is [NaN;], back to NaN', output)
