# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for rational number arithmetic."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Optional

from .integers import IntegerDomain


__all__ = [
    'Rounding',
    'get_dflt_rounding_mode',
    'set_dflt_rounding_mode',
    'round_quotient',
]


# rounding modes equivalent to those defined in standard lib module 'decimal'
@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, 'Round away from zero if last digit after rounding '
                     'towards zero would have been 0 or 5; otherwise round '
                     'towards zero.')
    ROUND_CEILING = (2, 'Round towards Infinity.')
    ROUND_DOWN = (3, 'Round towards zero.')
    ROUND_FLOOR = (4, 'Round towards -Infinity.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'integer.')
    ROUND_HALF_UP = (7, 'Round to nearest with ties going away from zero.')
    ROUND_UP = (8, 'Round away from zero.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_EVEN)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (ROUNDING): rounding mode to be set as default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def round_quotient(num: int, den: int, ints: IntegerDomain,
                   rounding: Optional[Rounding] = None) -> int:
    """Return `num` / `den` rounded to an integer.

    Args:
        num (int): dividend
        den (int): divisor
        ints (IntegerDomain): integer domain used for the computation
        rounding (Rounding): rounding mode to be applied; if None, the
            current default rounding mode is used

    Returns:
        int: rounded quotient

    Raises:
        ZeroDivisionError: `den` is 0
        OverflowError: an intermediate result does not fit into `ints`

    The decision is taken from the quotient truncated toward zero and the
    first decimal digit of the remainder, which carries the sign of the
    quotient. A remainder digit of 5 is an exact tie only if no further
    remainder digits follow.
    """
    if rounding is None:
        rounding = get_dflt_rounding_mode()
    elif not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    quot = ints.div(num, den)
    if ints.mod(num, den) == 0:
        return quot
    scaled = ints.mul(num, 10)
    digit = ints.sub(ints.div(scaled, den), ints.mul(quot, 10))
    is_final_digit = ints.mod(scaled, den) == 0
    if rounding is Rounding.ROUND_HALF_EVEN:
        if is_final_digit and (digit == 5 or digit == -5):
            # tie: mod has the sign of quot, so this moves away from zero
            # exactly when quot is odd
            return ints.add(quot, ints.mod(quot, 2))
        if digit >= 5:
            return ints.add(quot, 1)
        if digit <= -5:
            return ints.sub(quot, 1)
        return quot
    negative = (num < 0) != (den < 0)
    if rounding is Rounding.ROUND_DOWN:
        away = False
    elif rounding is Rounding.ROUND_UP:
        away = True
    elif rounding is Rounding.ROUND_CEILING:
        away = not negative
    elif rounding is Rounding.ROUND_FLOOR:
        away = negative
    elif rounding is Rounding.ROUND_HALF_UP:
        away = abs(digit) >= 5
    elif rounding is Rounding.ROUND_HALF_DOWN:
        away = abs(digit) > 5 or (abs(digit) == 5 and not is_final_digit)
    else:   # rounding is Rounding.ROUND_05UP
        away = ints.mod(quot, 5) == 0
    if not away:
        return quot
    return ints.sub(quot, 1) if negative else ints.add(quot, 1)
