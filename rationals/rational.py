import functools
from math import gcd

from .utils import wrap_int64, abs_int64


class DivisionByZero(ZeroDivisionError):
    """Zero denominator, or division by a zero rational."""


def _operand(method):
    """Accept Rational or int as the other operand, defer on anything else."""
    @functools.wraps(method)
    def wrapper(self, other):
        if isinstance(other, int):
            other = Rational(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return method(self, other)
    return wrapper


class Rational:
    """
    Exact rational number with signed 64-bit numerator and denominator.

    Kept in canonical form, within the overflow limits below: numerator
    and denominator are coprime, the denominator is positive and the sign
    lives in the numerator.
    Zero is 0/1.

    Fields behave as machine integers: products and sums wrap around on
    64-bit overflow, and results are exact only while the intermediate
    cross products fit. A denominator that wraps to zero is reported as
    DivisionByZero. A reduced denominator of -2**63 has no positive 64-bit
    form and stays stored as INT64_MIN, as with machine integers; such a
    value reads as non-negative in is_negative().

    Instances are immutable; arithmetic returns new values, so ``x += y``
    rebinds x.
    """

    __slots__ = ('_n', '_d')

    def __init__(self, numerator, denominator=1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError('Rational needs integer numerator and denominator, got {!r}, {!r}'.format(
                numerator, denominator,
            ))
        n = wrap_int64(numerator)
        d = wrap_int64(denominator)
        if d == 0:
            raise DivisionByZero('Denominator must be non-zero.')

        g = gcd(n, d)
        n //= g
        d //= g
        if (n < 0) != (d < 0):
            n = wrap_int64(-abs(n))
            d = abs_int64(d)
        elif n < 0 and d < 0:
            n = wrap_int64(-n)
            d = wrap_int64(-d)
        self._n = n
        self._d = d

    @classmethod
    def from_integer(cls, value):
        return cls(value, 1)

    @classmethod
    def from_fraction(cls, numerator, denominator):
        return cls(numerator, denominator)

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            raise TypeError("Can't convert {!r} to Rational".format(x))

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        return self._d

    def value(self):
        """Floating-point approximation."""
        return self._n / self._d

    def is_negative(self):
        return (self._n < 0) != (self._d < 0)

    def __float__(self):
        return self.value()

    def __int__(self):
        q = abs(self._n) // self._d
        return -q if self._n < 0 else q

    def __bool__(self):
        return self._n != 0

    # unary plus is the absolute value
    def __pos__(self):
        return Rational(abs(self._n), abs(self._d))

    __abs__ = __pos__

    def __neg__(self):
        return Rational(-self._n, self._d)

    @_operand
    def __add__(self, other):
        return Rational(self._n * other._d + self._d * other._n, self._d * other._d)

    __radd__ = __add__

    @_operand
    def __sub__(self, other):
        return Rational(self._n * other._d - self._d * other._n, self._d * other._d)

    @_operand
    def __rsub__(self, other):
        return other - self

    @_operand
    def __mul__(self, other):
        return Rational(self._n * other._n, self._d * other._d)

    __rmul__ = __mul__

    @_operand
    def __truediv__(self, other):
        if other._n == 0:
            raise DivisionByZero('Cannot divide by zero.')
        return Rational(self._n * other._d, self._d * other._n)

    @_operand
    def __rtruediv__(self, other):
        return other / self

    def increment(self):
        """
        Value plus one.

        Without overflow adding the denominator keeps the fraction reduced,
        but a wrapped numerator can share a factor with it, so renormalize.
        """
        return Rational(self._n + abs(self._d), self._d)

    def decrement(self):
        """Value minus one."""
        return Rational(self._n - abs(self._d), self._d)

    def _cross(self, other):
        left = abs_int64(wrap_int64(self._n * other._d))
        right = abs_int64(wrap_int64(self._d * other._n))
        return left, right

    @_operand
    def __eq__(self, other):
        if self.is_negative() != other.is_negative():
            return False
        left, right = self._cross(other)
        return left == right

    @_operand
    def __ne__(self, other):
        return not self == other

    @_operand
    def __lt__(self, other):
        left_neg = self.is_negative()
        if left_neg != other.is_negative():
            return left_neg
        left, right = self._cross(other)
        # both negative: larger magnitude is the smaller value
        return left > right if left_neg else left < right

    @_operand
    def __gt__(self, other):
        return other < self

    @_operand
    def __ge__(self, other):
        return not self < other

    @_operand
    def __le__(self, other):
        return not self > other

    def __hash__(self):
        # whole values hash like the equal int
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def __str__(self):
        return '{}/{}'.format(self._n, self._d)

    def __repr__(self):
        return 'Rational({}, {})'.format(self._n, self._d)
