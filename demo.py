#!/usr/bin/env python3

import logging
import argparse

from bigrational.rational import Rational, ZERO, ONE, NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY, new, over
from bigrational.progression import InvalidProgression
from bigrational.continued_fraction import FiniteContinuedFraction


def print_progressions(start, end, step):
    progression = start.range_to(end).step(step)
    logging.info('progression: %s', progression)
    try:
        print('Progression from {} to {} incrementing by {}:'.format(start, end, step), *progression)
        print('Progression from {} to {} decrementing by {}:'.format(end, start, ONE), *end.down_to(start))
    except InvalidProgression as e:
        print('Invalid progression {}: {}'.format(progression, e))


def run_demo(start=ZERO, end=new(7, 3), step=new(1, 2)):
    print('ZERO is', ZERO)
    print('NaN is', NaN)
    print('POSITIVE_INFINITY is', POSITIVE_INFINITY)
    print('NEGATIVE_INFINITY is', NEGATIVE_INFINITY)
    print('1 is', new(1))
    print('4/10 is', over(4, 10))
    print('4/2 is', over(4, 2))
    print('0/0 is', over(0, 0))
    print('NaN is a unique object is', NaN is over(0, 0))
    print('But no NaN is equal is', NaN != over(0, 0))
    print('4/0 is', over(4, 0))
    print('-4/0 is', over(-4, 0))
    print('-4/-4 is', over(-4, -4))

    rat_a = over(3, 5)
    rat_b = over(2, 3)
    print('{} ÷ {} is {}'.format(rat_a, rat_b, rat_a / rat_b))

    print_progressions(start, end, step)

    try:
        for _ in POSITIVE_INFINITY.range_to(NaN):
            pass
    except InvalidProgression as e:
        print('Expected error for progression containing {}: {!r}'.format(NaN, e))

    print('{} greater than {} is {}'.format(POSITIVE_INFINITY, ZERO, POSITIVE_INFINITY > ZERO))
    print('{} less than {} is {}'.format(NEGATIVE_INFINITY, ZERO, NEGATIVE_INFINITY < ZERO))

    to_sort = [
        POSITIVE_INFINITY, NaN, ZERO, POSITIVE_INFINITY,
        NaN, NEGATIVE_INFINITY, ZERO, NEGATIVE_INFINITY,
    ]
    print('[{}] sorted is [{}]'.format(
        ', '.join(str(r) for r in to_sort),
        ', '.join(str(r) for r in sorted(to_sort)),
    ))

    for r in (end, NaN):
        cf = FiniteContinuedFraction.value_of(r)
        logging.debug('convergents of %s: %s', cf, [str(c) for c in cf.convergents()])
        print('Continued fraction of {} is {}, back to {}'.format(r, cf, cf.to_rational()))


if __name__ == "__main__":
    argparser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    argparser.add_argument('--start', type=str, default='0', help='progression start, e.g., "-1/2"')
    argparser.add_argument('--end', type=str, default='7/3', help='progression end (inclusive)')
    argparser.add_argument('--step', type=str, default='1/2', help='progression step')
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')

    args = argparser.parse_args()
    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose >= 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)  # call after loglevel is set!

    run_demo(
        start=Rational.parse(args.start),
        end=Rational.parse(args.end),
        step=Rational.parse(args.step),
    )
