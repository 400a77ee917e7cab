"""Run the doctests embedded in the modules of :mod:`cpc`."""

import doctest

import pytest

import cpc.atomic
import cpc.boolean
import cpc.formula
import cpc.parser
import cpc.renderer
import cpc.support.logging
import cpc.translation


@pytest.mark.parametrize('module', [
    cpc.atomic, cpc.boolean, cpc.formula, cpc.parser, cpc.renderer,
    cpc.support.logging, cpc.translation], ids=lambda module: module.__name__)
def test_doctests(module):
    failures, tests = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert tests > 0
    assert failures == 0
