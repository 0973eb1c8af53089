# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic."""

import logging

from .codec import decode, dumps, encode, loads
from .errors import DecodeError, ImproperUseError, ParseError
from .integers import BIGINT, INT64, FixedWidth, IntegerDomain, Unbounded
from .rational import Rational
from .rounding import Rounding, get_dflt_rounding_mode, set_dflt_rounding_mode
from .version import version_tuple as __version__  # noqa: F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define public namespace
__all__ = [
    'BIGINT',
    'DecodeError',
    'FixedWidth',
    'INT64',
    'ImproperUseError',
    'IntegerDomain',
    'ParseError',
    'Rational',
    'Rounding',
    'Unbounded',
    'decode',
    'dumps',
    'encode',
    'get_dflt_rounding_mode',
    'loads',
    'set_dflt_rounding_mode',
]
