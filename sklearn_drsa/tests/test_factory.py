"""Tests for `sklearn_drsa.factory`."""

import pytest

from sklearn_drsa.exceptions import FieldParseError
from sklearn_drsa.factory import parse_field, parse_row
from sklearn_drsa.fields import FieldKind, IntegerField, RealField, \
    EnumerationField, PairField, UnknownSimpleFieldMV15, UnknownSimpleFieldMV2
from sklearn_drsa.table import EvaluationAttribute

from .datasets import QUALITY

INTEGER = EvaluationAttribute('i', 'cost', FieldKind.INTEGER)
REAL = EvaluationAttribute('r', 'gain', FieldKind.REAL,
                           missing_value_type=UnknownSimpleFieldMV2)
ENUMERATION = EvaluationAttribute('e', 'gain', FieldKind.ENUMERATION,
                                  element_list=QUALITY)
PAIR = EvaluationAttribute('p', 'gain', FieldKind.PAIR,
                           component_kind=FieldKind.INTEGER)


@pytest.mark.parametrize(['text', 'attribute', 'expected'], [
    pytest.param('42', INTEGER, IntegerField(42, 'cost'), id="integer"),
    pytest.param(' -3 ', INTEGER, IntegerField(-3, 'cost'), id="integer ws"),
    pytest.param('2.5', REAL, RealField(2.5), id="real"),
    pytest.param('good', ENUMERATION, EnumerationField(QUALITY, 2),
                 id="enumeration"),
    pytest.param('(1, 3)', PAIR, PairField(IntegerField(1), IntegerField(3)),
                 id="pair"),
    pytest.param('(?, 3)', PAIR,
                 PairField(UnknownSimpleFieldMV15(), IntegerField(3)),
                 id="pair missing component"),
    pytest.param('?', INTEGER, UnknownSimpleFieldMV15(), id="missing ?"),
    pytest.param('*', REAL, UnknownSimpleFieldMV2(), id="missing *"),
    pytest.param('', ENUMERATION, UnknownSimpleFieldMV15(), id="missing empty"),
])
def test_parse_field(text, attribute, expected):
    assert parse_field(text, attribute) == expected


@pytest.mark.parametrize(['text', 'attribute'], [
    pytest.param('4.5', INTEGER, id="integer with fraction"),
    pytest.param('abc', REAL, id="real"),
    pytest.param('inf', REAL, id="real infinite"),
    pytest.param('superb', ENUMERATION, id="unknown element"),
    pytest.param('1, 3', PAIR, id="pair without parentheses"),
    pytest.param('(1, 2, 3)', PAIR, id="pair with 3 components"),
    pytest.param('(1, x)', PAIR, id="pair with invalid component"),
])
def test_parse_field_invalid(text, attribute):
    with pytest.raises(FieldParseError):
        parse_field(text, attribute)


def test_parse_row():
    assert parse_row(['1', '?', 'bad', '(2, 2)'],
                     [INTEGER, REAL, ENUMERATION, PAIR]) \
        == [IntegerField(1, 'cost'), UnknownSimpleFieldMV2(),
            EnumerationField(QUALITY, 0), PairField(IntegerField(2),
                                                    IntegerField(2))]
    with pytest.raises(FieldParseError):
        parse_row(['1'], [INTEGER, REAL])
