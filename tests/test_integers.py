# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'exactrat' (integer domains)."""

import pytest
from hypothesis import given, strategies

from exactrat import BIGINT, INT64, FixedWidth, Unbounded
from exactrat.integers import common_domain


@pytest.mark.parametrize(("a", "b", "quot", "rem"),
                         ((7, 2, 3, 1),
                          (-7, 2, -3, -1),
                          (7, -2, -3, 1),
                          (-7, -2, 3, -1),
                          (0, -5, 0, 0),
                          (6, 3, 2, 0)),
                         ids=lambda p: str(p))
def test_div_mod_truncate(ints, a, b, quot, rem):
    assert ints.div(a, b) == quot
    assert ints.mod(a, b) == rem


@given(a=strategies.integers(),
       b=strategies.integers().filter(lambda x: x != 0))
def test_div_mod_identity_hypo(a, b):
    q, r = BIGINT.div(a, b), BIGINT.mod(a, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


def test_div_mod_by_zero(ints):
    with pytest.raises(ZeroDivisionError):
        ints.div(1, 0)
    with pytest.raises(ZeroDivisionError):
        ints.mod(1, 0)


@pytest.mark.parametrize(("a", "b", "gcd"),
                         ((12, 18, 6),
                          (-12, 18, 6),
                          (12, -18, -6),
                          (-12, -18, -6),
                          (0, 5, 5),
                          (0, -5, -5),
                          (5, 0, 5)),
                         ids=lambda p: str(p))
def test_gcd(ints, a, b, gcd):
    assert ints.gcd(a, b) == gcd


@pytest.mark.parametrize("value", (2 ** 63 - 1, -2 ** 63, 0),
                         ids=("max", "min", "0"))
def test_fixed_width_in_range(value):
    assert INT64.check(value) == value
    assert INT64.contains(value)


@pytest.mark.parametrize("value", (2 ** 63, -2 ** 63 - 1, 10 ** 100),
                         ids=("max+1", "min-1", "large"))
def test_fixed_width_out_of_range(value):
    with pytest.raises(OverflowError):
        INT64.check(value)
    assert not INT64.contains(value)
    assert BIGINT.check(value) == value


def test_fixed_width_ops_checked():
    with pytest.raises(OverflowError):
        INT64.add(2 ** 62, 2 ** 62)
    with pytest.raises(OverflowError):
        INT64.sub(-2 ** 62, 2 ** 62 + 1)
    with pytest.raises(OverflowError):
        INT64.mul(2 ** 32, 2 ** 31)
    with pytest.raises(OverflowError):
        INT64.neg(-2 ** 63)
    with pytest.raises(OverflowError):
        INT64.div(-2 ** 63, -1)
    with pytest.raises(OverflowError):
        INT64.pow10(19)
    assert INT64.pow10(18) == 10 ** 18


def test_fixed_width_too_narrow():
    with pytest.raises(ValueError):
        FixedWidth(1)


def test_domain_equality():
    assert FixedWidth(64) == INT64
    assert FixedWidth(32) != INT64
    assert Unbounded() == BIGINT
    assert BIGINT != INT64
    assert hash(FixedWidth(64)) == hash(INT64)


@pytest.mark.parametrize(("a", "b", "res"),
                         ((INT64, BIGINT, BIGINT),
                          (BIGINT, INT64, BIGINT),
                          (FixedWidth(32), INT64, INT64),
                          (INT64, INT64, INT64)),
                         ids=("64,big", "big,64", "32,64", "64,64"))
def test_common_domain(a, b, res):
    assert common_domain(a, b) == res
