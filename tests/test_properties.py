# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'exactrat' (properties)."""

import pytest

from exactrat import BIGINT, INT64, Rational


@pytest.mark.parametrize(("num", "den"),
                         ((170, 10),
                          (9 ** 394, 10 ** 247),
                          (-19, 4000),
                          (19, -4000)),
                         ids=("compact", "large", "fraction", "neg-den"))
def test_numerator(num, den):
    rn = Rational(num, den)
    assert rn.numerator == num


@pytest.mark.parametrize(("num", "den"),
                         ((-17, 1),
                          (9 ** 394, 10 ** 247),
                          (190, 400000),
                          (190, -400000)),
                         ids=("compact", "large", "fraction", "neg-den"))
def test_denominator(num, den):
    rn = Rational(num, den)
    assert rn.denominator == den


def test_ints():
    assert Rational(3).ints is BIGINT
    assert Rational(3, ints=INT64).ints is INT64
    assert Rational.from_decimal("1.5", ints=INT64).ints is INT64
