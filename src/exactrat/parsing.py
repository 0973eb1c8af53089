# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Parsing of decimal literals."""

from __future__ import annotations

import logging
import re
from typing import Tuple

from .errors import ParseError
from .integers import IntegerDomain


__all__ = ['parse_decimal']

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r'[0-9]+')


def parse_decimal(text: str, ints: IntegerDomain) -> Tuple[int, int]:
    """Return numerator and denominator equivalent to decimal literal `text`.

    Args:
        text (str): string of the form "[-]digits[.digits]"
        ints (IntegerDomain): integer domain the terms must fit into

    Returns:
        (int, int): numerator and denominator, the latter being a power of
            10 according to the number of fractional digits

    Raises:
        TypeError: `text` is not a str
        ParseError: `text` is not a valid decimal literal or its terms do
            not fit into `ints`
    """
    if not isinstance(text, str):
        raise TypeError(f"Can't parse a decimal from {type(text)}.")
    negative = text.startswith('-')
    body = text[1:] if negative else text
    parts = body.split('.')
    if len(parts) > 2 or not all(_DIGITS.fullmatch(p) for p in parts):
        logger.debug("Rejected decimal literal %r.", text)
        raise ParseError(f"Not a decimal string: {text!r}.")
    digits = ''.join(parts)
    n_frac_digits = len(parts[1]) if len(parts) == 2 else 0
    try:
        num = ints.check(int(digits))
        den = ints.pow10(n_frac_digits)
        if negative:
            num = ints.neg(num)
    except OverflowError as exc:
        logger.debug("Decimal literal %r out of range for %r.", text, ints)
        raise ParseError(f"Decimal string out of range: {text!r}.") from exc
    except ValueError as exc:
        # int() limits the number of digits it converts
        logger.debug("Failed to convert decimal literal %r.", text)
        raise ParseError(f"Can't convert decimal string: {exc}") from exc
    return num, den
