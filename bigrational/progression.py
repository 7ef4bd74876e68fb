"""
Progressions of rationals: start, start+step, ... up to an inclusive end.
"""

import logging

from .rational import Rational, ZERO, ONE


logger = logging.getLogger(__name__)


class InvalidProgression(ValueError):
    """Progression that cannot be iterated: zero step or NaN among bounds/step."""


class RationalIterator:
    """
    Single-pass iterator over start..end_inclusive with given step.

    Goes up while current <= end if step > 0, down while current >= end otherwise.
    Progression towards +oo (or -oo) never stops: that is not a bug.
    """

    def __init__(self, start: Rational, end_inclusive: Rational, step: Rational) -> None:
        if step == ZERO:
            logger.debug('rejected progression %s..%s: zero step', start, end_inclusive)
            raise InvalidProgression("Infinite loop: zero step")
        if start.is_nan() or end_inclusive.is_nan() or step.is_nan():
            logger.debug('rejected progression %s..%s step %s: NaN', start, end_inclusive, step)
            raise InvalidProgression("NaN != NaN: {}..{} step {}".format(start, end_inclusive, step))

        self._current = start
        self._end_inclusive = end_inclusive
        self._step = step
        self._ascending = step > ZERO

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        if self._ascending:
            return self._current <= self._end_inclusive
        else:
            return self._current >= self._end_inclusive

    def __next__(self) -> Rational:
        if not self.has_next():
            raise StopIteration
        value = self._current
        self._current = value + self._step
        return value


class RationalProgression:
    """
    Closed range start..end_inclusive with a step, default is ONE.

    Iterable many times: each iter() creates a fresh RationalIterator,
    which validates the progression before yielding anything.
    """

    def __init__(self, start, end_inclusive, step=ONE):
        self.start = Rational.convert(start)
        self.end_inclusive = Rational.convert(end_inclusive)
        self.increment = Rational.convert(step)

    def step(self, step):
        """Same bounds, other step (Rational or int)."""
        return RationalProgression(self.start, self.end_inclusive, step)

    def __iter__(self):
        return RationalIterator(self.start, self.end_inclusive, self.increment)

    def __contains__(self, value):
        value = Rational.convert(value)
        return self.start <= value <= self.end_inclusive

    def is_empty(self):
        """Check that start > end_inclusive, whatever the direction of the step."""
        return self.start > self.end_inclusive

    def __str__(self):
        return '{}..{} step {}'.format(self.start, self.end_inclusive, self.increment)

    def __repr__(self):
        return 'RationalProgression({!r}, {!r}, {!r})'.format(self.start, self.end_inclusive, self.increment)
