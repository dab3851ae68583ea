"""Tests for `sklearn_drsa.calculator`."""

import pytest

from sklearn_drsa.calculator import MeanCalculator, mean, \
    EvaluationFieldCalculator
from sklearn_drsa.exceptions import InvalidValueError, NullArgumentError, \
    TypeMismatchError
from sklearn_drsa.fields import FieldKind, ElementList, IntegerField, \
    RealField, EnumerationField, PairField, UnknownSimpleFieldMV15

from .datasets import QUALITY


@pytest.mark.parametrize(['a', 'b', 'expected'], [
    pytest.param(4, 6, 5, id="4,6"),
    pytest.param(3, 4, 3, id="3,4 truncated"),
    pytest.param(-3, -4, -3, id="-3,-4 truncated towards zero"),
    pytest.param(-5, 2, -1, id="-5,2"),
    pytest.param(0, 0, 0, id="equal"),
])
def test_mean_integer(a, b, expected):
    result = mean(IntegerField(a, 'cost'), IntegerField(b, 'cost'))
    assert result == IntegerField(expected, 'cost')
    assert mean(IntegerField(b, 'cost'), IntegerField(a, 'cost')) == result


def test_mean_real():
    assert mean(RealField(1.0), RealField(2.0)) == RealField(1.5)
    assert mean(RealField(2.0), RealField(1.0)) == RealField(1.5)
    assert mean(RealField(-1.0, 'none'), RealField(2.0, 'none')) \
        == RealField(0.5, 'none')
    assert mean(RealField(2.0, 'none'), RealField(-1.0, 'none')) \
        == RealField(0.5, 'none')


def test_mean_equal_returns_first():
    for a, b in [(IntegerField(3), IntegerField(3)),
                 (RealField(2.5), RealField(2.5)),
                 (EnumerationField(QUALITY, 1), EnumerationField(QUALITY, 1)),
                 (PairField(IntegerField(1), IntegerField(2)),
                  PairField(IntegerField(1), IntegerField(2)))]:
        assert mean(a, b) is a
        assert mean(a, b) == b


def test_mean_enumeration():
    result = mean(EnumerationField(QUALITY, 0, 'cost'),
                  EnumerationField(QUALITY, 3, 'cost'))
    assert result == EnumerationField(QUALITY, 1, 'cost')
    assert result.element == 'medium'
    assert result.element_list is QUALITY
    assert mean(EnumerationField(QUALITY, 3, 'cost'),
                EnumerationField(QUALITY, 0, 'cost')) == result


@pytest.mark.parametrize('index', [0, 2], ids=['bad', 'good'])
def test_mean_enumeration_different_element_lists(index):
    other_list = ElementList(['bad', 'ok', 'good', 'great'])
    with pytest.raises(InvalidValueError):
        mean(EnumerationField(QUALITY, index),
             EnumerationField(other_list, index))
    with pytest.raises(InvalidValueError):
        mean(EnumerationField(QUALITY, 0), EnumerationField(other_list, 3))


def test_mean_pair():
    a = PairField(IntegerField(2), IntegerField(4))
    b = PairField(IntegerField(4), IntegerField(9))
    assert mean(a, b) == PairField(IntegerField(3), IntegerField(6))
    assert mean(b, a) == mean(a, b)
    partial = PairField(UnknownSimpleFieldMV15(), IntegerField(4))
    assert mean(partial, b) == PairField(UnknownSimpleFieldMV15(),
                                         IntegerField(6))


def test_mean_missing_values(missing_value_type):
    u = missing_value_type()
    for known in [IntegerField(1), RealField(1), EnumerationField(QUALITY, 1),
                  PairField(IntegerField(1), IntegerField(2))]:
        assert mean(known, u) is u
        assert mean(u, known) is u
    other = UnknownSimpleFieldMV15()
    assert mean(u, other) is u
    assert mean(other, u) is other


def test_mean_invalid_arguments():
    with pytest.raises(NullArgumentError):
        mean(IntegerField(1), None)
    with pytest.raises(NullArgumentError):
        mean(None, IntegerField(1))
    with pytest.raises(NullArgumentError):
        mean(UnknownSimpleFieldMV15(), None)
    with pytest.raises(TypeMismatchError):
        mean(IntegerField(1), RealField(1))
    with pytest.raises(TypeMismatchError):
        mean(PairField(IntegerField(1), IntegerField(2)), IntegerField(1))
    with pytest.raises(TypeMismatchError):
        mean(IntegerField(1), 1)
    with pytest.raises(TypeMismatchError):
        mean(2.5, RealField(1))


def test_calculate_double_dispatch():
    """`field.calculate` hands over to the calculator, subclasses can
    extend the dispatch table."""

    class MaxCalculator(EvaluationFieldCalculator):
        dispatch = {(FieldKind.INTEGER, FieldKind.INTEGER): 'max_integer'}

        def max_integer(self, first, second):
            return max(first, second, key=lambda f: f.value)

    calculator = MaxCalculator()
    assert IntegerField(2).calculate(calculator, IntegerField(7)) \
        == IntegerField(7)
    with pytest.raises(TypeMismatchError):
        RealField(2).calculate(calculator, RealField(7))
    assert RealField(2).calculate(MeanCalculator(), RealField(7)) \
        == RealField(4.5)
