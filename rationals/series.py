# coding: utf-8

import logging

from .rational import Rational


def exp_partial_sums(terms):
    """
    Partial sums of the power series of e: 1 + 1/1! + 1/2! + ...

    Yields terms + 1 values, the first one is 1/1.
    Denominators grow like k!, so long runs overflow the 64-bit fields.
    """
    if terms < 0:
        raise ValueError('terms must be non-negative, got {}'.format(terms))
    total = Rational(1)
    yield total
    fac = 1
    for k in range(1, terms + 1):
        fac *= k
        total += Rational(1, fac)
        logging.debug('exp series: k=%d, sum=%s', k, total)
        yield total


def approximate_e(terms=11):
    """Rational approximation of Euler's number."""
    approx = Rational(1)
    for approx in exp_partial_sums(terms):
        pass
    logging.info('e ~ %s after %d terms', approx, terms)
    return approx


def geometric_partial_sums(steps, ratio=Rational(1, 2)):
    """
    Partial sums ratio + ratio^2 + ... + ratio^n for n = 1..steps.

    With ratio 1/2 this is Zeno's walk towards 1.
    """
    if steps < 0:
        raise ValueError('steps must be non-negative, got {}'.format(steps))
    ratio = Rational.convert(ratio)
    power = Rational(1)
    total = Rational(0)
    for n in range(1, steps + 1):
        power *= ratio
        total += power
        logging.debug('geometric series: n=%d, sum=%s', n, total)
        yield total


def approximate_one(steps=19):
    """Sum of 1/2 + 1/4 + ... + 1/2^steps; zero steps give 0/1."""
    approx = Rational(0)
    for approx in geometric_partial_sums(steps):
        pass
    logging.info('1 ~ %s after %d steps', approx, steps)
    return approx
