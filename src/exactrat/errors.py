# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by package 'exactrat'."""


__all__ = ['DecodeError', 'ImproperUseError', 'ParseError']


class ImproperUseError(AssertionError):
    """A precondition of the API has been violated by the caller.

    This signals a broken invariant at the call site, not bad input; it is
    not meant to be caught.
    """


class ParseError(ValueError):
    """Given string is not a valid decimal literal."""


class DecodeError(ValueError):
    """Given data is not a valid serialized rational."""
