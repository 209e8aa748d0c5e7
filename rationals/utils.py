# coding: utf-8

import logging


INT64_MIN = -2**63
INT64_MAX = 2**63 - 1
_INT64_SPAN = 2**64


def wrap_int64(x):
    """
    Reduce integer to the signed 64-bit range, two's complement wraparound.

    Fields of Rational live in this range, so all products and sums computed
    on them go through here. Overflow is not an error: the value wraps.
    """
    wrapped = (x - INT64_MIN) % _INT64_SPAN + INT64_MIN
    if wrapped != x:
        logging.debug('int64 overflow: %d wrapped to %d', x, wrapped)
    return wrapped


def abs_int64(x):
    """Absolute value in 64-bit arithmetic, abs(INT64_MIN) stays INT64_MIN."""
    return wrap_int64(abs(x))
