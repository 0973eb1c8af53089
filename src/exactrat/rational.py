# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational number value type."""

from __future__ import annotations

from fractions import Fraction
from numbers import Integral
import numbers
import operator
from typing import Any, Optional, Tuple, Union

from .errors import ImproperUseError
from .integers import BIGINT, IntegerDomain, common_domain
from .parsing import parse_decimal
from .rounding import Rounding, round_quotient


__all__ = ['Rational']


RationalT = Union['Rational', int, Fraction]


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, not "
                        f"{type(value).__name__}.")
    return operator.index(value)


def _check_domain(ints: Any) -> IntegerDomain:
    if not isinstance(ints, IntegerDomain):
        raise TypeError(f"Not an integer domain: {ints!r}.")
    return ints


class Rational:
    """Exact rational number, represented as a numerator / denominator pair.

    Args:
        numerator (numbers.Integral): numerator (default: 0)
        denominator (numbers.Integral): denominator (default: 1)
        ints (IntegerDomain): representation of numerator and denominator
            (default: BIGINT)

    Returns:
        :class:`Rational` instance

    Raises:
        TypeError: a term is not an integer or `ints` is not an integer
            domain
        OverflowError: a term does not fit into `ints`
        ImproperUseError: more than one denominator given

    The terms are stored as given, neither reduced nor validated. The sign
    of the value may be carried by either term, so both terms may be
    negative.

    Instances are immutable. All operations return new instances. Results
    of arithmetic operations are reduced by their greatest common divisor.
    """

    __slots__ = ('_num', '_den', '_ints')

    def __new__(cls, numerator: int = 0, *denominator: int,
                ints: IntegerDomain = BIGINT) -> Rational:
        """Return a new :class:`Rational` instance."""
        if len(denominator) > 1:
            raise ImproperUseError("Improper use of Rational: can only have "
                                   "one denominator.")
        ints = _check_domain(ints)
        num = ints.check(_as_int(numerator, "Numerator"))
        den = ints.check(_as_int(denominator[0], "Denominator")
                         if denominator else 1)
        return cls._from_terms(num, den, ints)

    @classmethod
    def _from_terms(cls, num: int, den: int,
                    ints: IntegerDomain) -> Rational:
        rn = object.__new__(cls)
        rn._num = num
        rn._den = den
        rn._ints = ints
        return rn

    @classmethod
    def from_decimal(cls, text: str,
                     ints: IntegerDomain = BIGINT) -> Rational:
        """Convert a decimal literal to a :class:`Rational`.

        Args:
            text (str): string of the form "[-]digits[.digits]"
            ints (IntegerDomain): representation of numerator and denominator

        Returns:
            :class:`Rational` instance equivalent to `text`, with a
            denominator of 10 ** <number of fractional digits>

        Raises:
            TypeError: `text` is not a str
            ParseError: `text` is not a valid decimal literal or is out of
                range for `ints`
        """
        ints = _check_domain(ints)
        num, den = parse_decimal(text, ints)
        return cls._from_terms(num, den, ints)

    @classmethod
    def from_fraction(cls, value: numbers.Rational,
                      ints: IntegerDomain = BIGINT) -> Rational:
        """Convert an int or a :class:`fractions.Fraction` to a
        :class:`Rational`."""
        if isinstance(value, Rational):
            return cls(value._num, value._den, ints=ints)
        if isinstance(value, bool) or \
                not isinstance(value, numbers.Rational):
            raise TypeError(f"Can't convert {value!r} to Rational.")
        return cls(value.numerator, value.denominator, ints=ints)

    @property
    def numerator(self) -> int:
        """Numerator as stored."""
        return self._num

    @property
    def denominator(self) -> int:
        """Denominator as stored."""
        return self._den

    @property
    def ints(self) -> IntegerDomain:
        """Representation of numerator and denominator."""
        return self._ints

    def with_numerator(self, numerator: int) -> Rational:
        """Return a copy of `self` with the numerator replaced."""
        return Rational(numerator, self._den, ints=self._ints)

    def with_denominator(self, denominator: int) -> Rational:
        """Return a copy of `self` with the denominator replaced."""
        return Rational(self._num, denominator, ints=self._ints)

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator as stored."""
        return self._num, self._den

    def as_fraction(self) -> Fraction:
        """Return an instance of :class:`fractions.Fraction` equal to
        `self`."""
        return Fraction(self._num, self._den)

    def simplify(self) -> Rational:
        """Return `self` reduced by the greatest common divisor of its
        terms.

        Raises:
            ZeroDivisionError: denominator is 0
        """
        ints = self._ints
        num, den = self._num, self._den
        if den == 0:
            raise ZeroDivisionError("Can't simplify a rational with a "
                                    "denominator of 0.")
        gcd = ints.gcd(num, den)
        return Rational._from_terms(ints.div(num, gcd), ints.div(den, gcd),
                                    ints)

    def is_negative(self) -> bool:
        """Return True if `self` < 0."""
        num, den = self._num, self._den
        return (num > 0 and den < 0) or (num < 0 and den > 0)

    def is_positive(self) -> bool:
        """Return True if `self` > 0."""
        num, den = self._num, self._den
        return (num > 0 and den > 0) or (num < 0 and den < 0)

    def is_zero(self) -> bool:
        """Return True if `self` == 0."""
        return self._num == 0

    def sign(self) -> int:
        """Return -1, 0 or 1 according to the sign of `self`."""
        if self.is_positive():
            return 1
        if self.is_negative():
            return -1
        return 0

    def _coerce(self, other: Any) -> Optional[Rational]:
        if isinstance(other, Rational):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, Integral):
            num, den = int(other), 1
        elif isinstance(other, Fraction):
            num, den = other.numerator, other.denominator
        else:
            return None
        # operands not fitting into the domain of self get widened
        ints = self._ints
        if not (ints.contains(num) and ints.contains(den)):
            ints = BIGINT
        return Rational._from_terms(num, den, ints)

    def _coerce_or_raise(self, other: Any) -> Rational:
        rn = self._coerce(other)
        if rn is None:
            raise TypeError(f"Unsupported operand: {other!r}.")
        return rn

    # comparisons

    def equal(self, other: RationalT) -> bool:
        """Return True if `self` and `other` denote the same number.

        The terms are compared by cross-multiplication, so 1/2 equals 2/4
        and -1/2 equals 1/-2. Use :meth:`same_terms` to compare the stored
        terms.

        Raises:
            ZeroDivisionError: a denominator is 0
        """
        other = self._coerce_or_raise(other)
        if self._den == 0 or other._den == 0:
            raise ZeroDivisionError("Can't compare a rational with a "
                                    "denominator of 0.")
        return self._num * other._den == other._num * self._den

    def same_terms(self, other: Rational) -> bool:
        """Return True if `self` and `other` have identical stored terms."""
        return self._num == other._num and self._den == other._den

    def gt(self, other: RationalT) -> bool:
        """Return True if `self` > `other`."""
        return self.subtract(other).is_positive()

    def lt(self, other: RationalT) -> bool:
        """Return True if `self` < `other`."""
        return self.subtract(other).is_negative()

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        return self.equal(rn)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        return self.lt(rn)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        return not self.gt(rn)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        return self.gt(rn)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        return not self.lt(rn)

    def __hash__(self) -> int:
        """hash(self)"""
        return hash(self.as_fraction())

    # arithmetic

    def multiply(self, other: RationalT) -> Rational:
        """Return `self` * `other`."""
        other = self._coerce_or_raise(other)
        ints = common_domain(self._ints, other._ints)
        return Rational._from_terms(ints.mul(self._num, other._num),
                                    ints.mul(self._den, other._den),
                                    ints).simplify()

    def divide(self, other: RationalT) -> Rational:
        """Return `self` / `other`.

        Raises:
            ZeroDivisionError: `other` is 0
        """
        other = self._coerce_or_raise(other)
        if other._num == 0:
            raise ZeroDivisionError(f"Division of {self} by zero.")
        ints = common_domain(self._ints, other._ints)
        return Rational._from_terms(ints.mul(self._num, other._den),
                                    ints.mul(self._den, other._num),
                                    ints).simplify()

    def add(self, other: RationalT) -> Rational:
        """Return `self` + `other`."""
        other = self._coerce_or_raise(other)
        ints = common_domain(self._ints, other._ints)
        if self._den == other._den:
            num = ints.add(self._num, other._num)
            den = self._den
        else:
            num = ints.add(ints.mul(self._num, other._den),
                           ints.mul(other._num, self._den))
            den = ints.mul(self._den, other._den)
        return Rational._from_terms(num, den, ints).simplify()

    def subtract(self, other: RationalT) -> Rational:
        """Return `self` - `other`."""
        other = self._coerce_or_raise(other)
        ints = common_domain(self._ints, other._ints)
        if self._den == other._den:
            num = ints.sub(self._num, other._num)
            den = self._den
        else:
            num = ints.sub(ints.mul(self._num, other._den),
                           ints.mul(other._num, self._den))
            den = ints.mul(self._den, other._den)
        return Rational._from_terms(num, den, ints).simplify()

    def invert(self) -> Rational:
        """Return 1 / `self`, i. e. `self` with its terms swapped.

        Raises:
            ZeroDivisionError: `self` is 0
        """
        if self._num == 0:
            raise ZeroDivisionError("Can't invert zero.")
        return Rational._from_terms(self._den, self._num, self._ints)

    def negate(self) -> Rational:
        """Return -`self`."""
        return Rational._from_terms(self._ints.neg(self._num), self._den,
                                    self._ints)

    def _binop(self, other: Any, op: str, reflected: bool = False) -> Any:
        rn = self._coerce(other)
        if rn is None:
            return NotImplemented
        if reflected:
            return getattr(rn, op)(self)
        return getattr(self, op)(rn)

    def __add__(self, other: Any) -> Rational:
        """self + other"""
        return self._binop(other, 'add')

    def __radd__(self, other: Any) -> Rational:
        """other + self"""
        return self._binop(other, 'add', reflected=True)

    def __sub__(self, other: Any) -> Rational:
        """self - other"""
        return self._binop(other, 'subtract')

    def __rsub__(self, other: Any) -> Rational:
        """other - self"""
        return self._binop(other, 'subtract', reflected=True)

    def __mul__(self, other: Any) -> Rational:
        """self * other"""
        return self._binop(other, 'multiply')

    def __rmul__(self, other: Any) -> Rational:
        """other * self"""
        return self._binop(other, 'multiply', reflected=True)

    def __truediv__(self, other: Any) -> Rational:
        """self / other"""
        return self._binop(other, 'divide')

    def __rtruediv__(self, other: Any) -> Rational:
        """other / self"""
        return self._binop(other, 'divide', reflected=True)

    def __pow__(self, exp: Any) -> Rational:
        """self ** exp"""
        if isinstance(exp, bool) or not isinstance(exp, Integral):
            return NotImplemented
        exp = int(exp)
        base = self if exp >= 0 else self.invert()
        ints = self._ints
        exp = abs(exp)
        return Rational._from_terms(ints.check(base._num ** exp),
                                    ints.check(base._den ** exp),
                                    ints).simplify()

    def __neg__(self) -> Rational:
        """-self"""
        return self.negate()

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __abs__(self) -> Rational:
        """abs(self)"""
        return self.negate() if self.is_negative() else self

    # rounding

    def evaluate(self, rounding: Optional[Rounding] = None) -> int:
        """Return `self` rounded to an integer.

        Args:
            rounding (Rounding): rounding mode to be applied; if None, the
                current default rounding mode (initially ROUND_HALF_EVEN)
                is used

        Returns:
            int: rounded value

        Raises:
            ZeroDivisionError: denominator is 0
            OverflowError: an intermediate result does not fit into the
                integer domain of `self`
        """
        return round_quotient(self._num, self._den, self._ints, rounding)

    def quantize(self, quant: RationalT,
                 rounding: Optional[Rounding] = None) -> Rational:
        """Return integer multiple of `quant` closest to `self`.

        Args:
            quant (Rational, int or Fraction): quantum to get a multiple
                from
            rounding (Rounding): rounding mode (default: None)

        If no `rounding` mode is given, the current default mode is used.

        Raises:
            TypeError: `quant` is not a rational number
            ValueError: `quant` is 0
        """
        rn = self._coerce(quant)
        if rn is None:
            raise TypeError(f"Can't quantize to a {type(quant)}.")
        if rn.is_zero():
            raise ValueError("Quantum must not be 0.")
        mult = self.divide(rn).evaluate(rounding)
        return rn.multiply(mult)

    def __round__(self, ndigits: Optional[int] = None) -> Union[int,
                                                                 Rational]:
        """round(self [, ndigits])

        Round `self` to a given precision in decimal digits, using the
        current default rounding mode.

        Args:
            ndigits (Integral): number of fractional digits to be rounded to

        Returns:
            :class:`int`: if `ndigits` is None
            :class:`Rational`: otherwise
        """
        if ndigits is None:
            return self.evaluate()
        if isinstance(ndigits, bool) or not isinstance(ndigits, Integral):
            raise TypeError("ndigits must be an integer.")
        ints = self._ints
        ndigits = int(ndigits)
        scale = ints.pow10(abs(ndigits))
        if ndigits >= 0:
            num = round_quotient(ints.mul(self._num, scale), self._den, ints)
            return Rational._from_terms(num, scale, ints).simplify()
        num = round_quotient(self._num, ints.mul(self._den, scale), ints)
        return Rational._from_terms(ints.mul(num, scale), 1, ints)

    # conversions

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._num != 0

    def __int__(self) -> int:
        """int(self)"""
        return self._ints.div(self._num, self._den)

    __trunc__ = __int__

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._num // self._den

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._num // self._den)

    def __float__(self) -> float:
        """float(self)"""
        return self._num / self._den

    def __copy__(self) -> Rational:
        """Return self (Rational instances are immutable)."""
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        """Return self (Rational instances are immutable)."""
        return self

    def __str__(self) -> str:
        """str(self)"""
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        """repr(self)"""
        args = [str(self._num)]
        if self._den != 1:
            args.append(str(self._den))
        if self._ints != BIGINT:
            args.append(f"ints={self._ints!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"
