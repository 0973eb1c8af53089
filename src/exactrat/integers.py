# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Integer representations used as numerator / denominator of rationals.

An integer domain bundles the primitive operations a rational number needs
from its terms: checked addition, subtraction and multiplication, division
truncating toward zero, the matching remainder and a greatest common divisor.

Two domains are provided:

* :data:`INT64` - machine-width signed integers; any primitive whose result
  does not fit into 64 bits raises :exc:`OverflowError`.
* :data:`BIGINT` - arbitrary precision, never overflows.
"""

from __future__ import annotations

from typing import Optional


__all__ = [
    'IntegerDomain',
    'FixedWidth',
    'Unbounded',
    'INT64',
    'BIGINT',
    'common_domain',
]


class IntegerDomain:
    """Signed integer with div / mod / gcd capability."""

    __slots__ = ()

    #: number of bits of the representation, None if unbounded
    bits: Optional[int] = None

    def check(self, value: int) -> int:
        """Return `value` if it is representable, else raise OverflowError."""
        raise NotImplementedError

    def contains(self, value: int) -> bool:
        """Return True if `value` is representable in this domain."""
        try:
            self.check(value)
        except OverflowError:
            return False
        return True

    def add(self, a: int, b: int) -> int:
        """a + b"""
        return self.check(a + b)

    def sub(self, a: int, b: int) -> int:
        """a - b"""
        return self.check(a - b)

    def mul(self, a: int, b: int) -> int:
        """a * b"""
        return self.check(a * b)

    def neg(self, a: int) -> int:
        """-a"""
        return self.check(-a)

    def div(self, a: int, b: int) -> int:
        """Quotient of `a` and `b`, truncated toward zero."""
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        q = abs(a) // abs(b)
        return self.check(q if (a < 0) == (b < 0) else -q)

    def mod(self, a: int, b: int) -> int:
        """Remainder of `a` and `b`, having the sign of `a`.

        Together with :meth:`div` this satisfies a == div(a, b) * b + mod(a, b)
        """
        if b == 0:
            raise ZeroDivisionError("integer modulo by zero")
        r = abs(a) % abs(b)
        return r if a >= 0 else -r

    def gcd(self, a: int, b: int) -> int:
        """Greatest common divisor of `a` and `b` by Euclid's algorithm.

        The loop is applied to the signed operands as given, so the result
        may be negative. If `b` is 0, `a` is returned unchanged.
        """
        g = a
        d = b
        while d != 0:
            g, d = d, self.mod(g, d)
        return g

    def pow10(self, exp: int) -> int:
        """10 ** exp"""
        return self.check(10 ** exp)

    def __repr__(self) -> str:
        """repr(self)"""
        return self.__class__.__name__ + '()'


class FixedWidth(IntegerDomain):
    """Two's-complement integers with a fixed number of bits."""

    __slots__ = ('bits', 'min', 'max')

    def __init__(self, bits: int) -> None:
        if bits < 2:
            raise ValueError(f"Need at least 2 bits, got {bits}.")
        self.bits = bits
        self.min = -(1 << (bits - 1))
        self.max = (1 << (bits - 1)) - 1

    def check(self, value: int) -> int:
        """Return `value` if it is representable, else raise OverflowError."""
        if self.min <= value <= self.max:
            return value
        raise OverflowError(f"{value} does not fit into {self.bits} bits.")

    def __eq__(self, other: object) -> bool:
        """self == other"""
        if isinstance(other, FixedWidth):
            return self.bits == other.bits
        return NotImplemented

    def __hash__(self) -> int:
        """hash(self)"""
        return hash((FixedWidth, self.bits))

    def __repr__(self) -> str:
        """repr(self)"""
        return f"FixedWidth({self.bits})"


class Unbounded(IntegerDomain):
    """Arbitrary precision integers."""

    __slots__ = ()

    def check(self, value: int) -> int:
        """Return `value`."""
        return value

    def __eq__(self, other: object) -> bool:
        """self == other"""
        if isinstance(other, IntegerDomain):
            return isinstance(other, Unbounded)
        return NotImplemented

    def __hash__(self) -> int:
        """hash(self)"""
        return hash(Unbounded)


INT64 = FixedWidth(64)
BIGINT = Unbounded()


def common_domain(a: IntegerDomain, b: IntegerDomain) -> IntegerDomain:
    """Return the wider one of the domains `a` and `b`."""
    if a.bits is None:
        return a
    if b.bits is None:
        return b
    return a if a.bits >= b.bits else b
