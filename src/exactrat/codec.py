# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Serialization of rationals as numerator / denominator pairs.

A rational is encoded as a mapping with exactly the keys "numerator" and
"denominator", both holding integers. The terms are transferred as stored,
so decoding an encoded rational gives a rational with identical terms.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping

from .errors import DecodeError
from .integers import BIGINT, IntegerDomain
from .rational import Rational


__all__ = ['encode', 'decode', 'dumps', 'loads']

logger = logging.getLogger(__name__)

_KEYS = ('numerator', 'denominator')


def encode(value: Rational) -> Dict[str, int]:
    """Return the numerator / denominator mapping of `value`."""
    if not isinstance(value, Rational):
        raise TypeError(f"Can't encode {value!r}.")
    num, den = value.as_integer_ratio()
    return {'numerator': num, 'denominator': den}


def decode(data: Mapping[str, Any], ints: IntegerDomain = BIGINT) -> Rational:
    """Return the rational encoded in `data`.

    Args:
        data (Mapping): mapping with keys "numerator" and "denominator"
        ints (IntegerDomain): representation of numerator and denominator

    Raises:
        DecodeError: `data` does not have the required shape or its terms
            do not fit into `ints`
    """
    if not isinstance(data, Mapping):
        raise DecodeError(f"Expected a mapping, got {type(data).__name__}.")
    if set(data) != set(_KEYS):
        logger.debug("Rejected keys %r.", sorted(map(str, data)))
        raise DecodeError(f"Expected keys {_KEYS}, got {tuple(data)}.")
    terms = [data[key] for key in _KEYS]
    for key, term in zip(_KEYS, terms):
        if isinstance(term, bool) or not isinstance(term, int):
            raise DecodeError(f"{key} must be an integer, got {term!r}.")
    try:
        return Rational(*terms, ints=ints)
    except OverflowError as exc:
        raise DecodeError(f"Terms out of range for {ints!r}.") from exc


def dumps(value: Rational) -> str:
    """Return JSON text encoding `value`."""
    return json.dumps(encode(value))


def loads(text: str, ints: IntegerDomain = BIGINT) -> Rational:
    """Return the rational encoded in JSON text `text`.

    Raises:
        TypeError: `text` is not a str, bytes or bytearray
        DecodeError: `text` is not valid JSON or does not have the required
            shape
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise TypeError(f"Can't decode a rational from {type(text)}.")
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.debug("Malformed JSON: %r.", text)
        raise DecodeError(f"Malformed JSON: {exc}") from exc
    return decode(data, ints)
