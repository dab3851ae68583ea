"""Tests for `sklearn_drsa.table`."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from sklearn_drsa.exceptions import NullArgumentError, TypeMismatchError
from sklearn_drsa.fields import FieldKind, AttributePreferenceType, \
    IntegerField, RealField, UnknownSimpleFieldMV15, UnknownSimpleFieldMV2
from sklearn_drsa.table import EvaluationAttribute, InformationTable

from .datasets import mixed_table


def test_from_arrays():
    X = np.array([[1, 2.5, 3],
                  [4, np.nan, 6]])
    table = InformationTable.from_arrays(
        X, [1, 0], preference_types=['gain', 'cost', 'none'],
        active_attributes=[0, 1], integer_attributes=np.array([0, 2]),
        missing_value_type=UnknownSimpleFieldMV2)
    assert table.n_objects == 2
    assert table.n_attributes == 3
    assert [a.name for a in table.attributes] == ['a1', 'a2', 'a3']
    assert [a.kind for a in table.attributes] \
        == [FieldKind.INTEGER, FieldKind.REAL, FieldKind.INTEGER]
    assert table.attributes[1].preference_type is AttributePreferenceType.COST
    assert_array_equal(table.get_active_attribute_indices(), [0, 1])
    assert table.get_field(0, 0) == IntegerField(1)
    assert table.get_field(0, 1) == RealField(2.5, 'cost')
    assert table.get_field(1, 1) == UnknownSimpleFieldMV2()
    assert table.get_field(1, 2) == IntegerField(6, 'none')
    assert_array_equal(table.decisions, [1, 0])
    assert table.has_missing_values()


def test_from_arrays_empty():
    table = InformationTable.from_arrays(np.empty((0, 2)))
    assert table.n_objects == 0
    assert table.n_attributes == 2
    table = InformationTable.from_arrays(np.empty((0, 2)), np.empty(0))
    assert len(table) == 0
    assert table.decisions.shape == (0,)


def test_from_arrays_invalid():
    with pytest.raises(ValueError):
        InformationTable.from_arrays([[1, 2]], preference_types=['gain'])
    with pytest.raises(ValueError):
        InformationTable.from_arrays([[1, 2]], active_attributes='some')
    with pytest.raises(ValueError):
        InformationTable.from_arrays([[1.5, 2]], integer_attributes=[0])
    with pytest.raises(ValueError):
        InformationTable.from_arrays([[1, 2]], [1, 2])
    with pytest.warns(UserWarning):
        InformationTable.from_arrays([[1, np.nan], [2, np.nan]])


def test_accessors():
    table = mixed_table()
    assert len(table) == 4
    assert table.get_object(1)[2] == IntegerField(4)
    assert table.get_column(2) == tuple(IntegerField(v) for v in (3, 4, 2, 5))
    for invalid in [(4, 0), (0, 6), (-1, 0)]:
        with pytest.raises(IndexError):
            table.get_field(*invalid)
    with pytest.raises(IndexError):
        table.get_column(6)
    selected = table.select([3, 1])
    assert selected.n_objects == 2
    assert selected.get_object(0) == table.get_object(3)
    assert_array_equal(selected.decisions, [3, 2])


def test_invalid_tables():
    attribute = EvaluationAttribute('a', 'gain', FieldKind.INTEGER)
    with pytest.raises(ValueError):
        InformationTable([attribute], [[IntegerField(1), IntegerField(2)]])
    with pytest.raises(TypeMismatchError):
        InformationTable([attribute], [[RealField(1)]])
    with pytest.raises(NullArgumentError):
        InformationTable([attribute], [[None]])
    with pytest.raises(ValueError):
        InformationTable([attribute], [[IntegerField(1)]], decisions=[1, 2])
    # any missing value type fits any attribute
    InformationTable([attribute], [[UnknownSimpleFieldMV15()],
                                   [UnknownSimpleFieldMV2()]])


def test_invalid_attributes():
    with pytest.raises(ValueError):
        EvaluationAttribute('a', kind=FieldKind.UNKNOWN_MV15)
    with pytest.raises(ValueError):
        EvaluationAttribute('a', kind=FieldKind.ENUMERATION)
    with pytest.raises(ValueError):
        EvaluationAttribute('a', kind=FieldKind.PAIR,
                            component_kind=FieldKind.PAIR)
    with pytest.raises(ValueError):
        EvaluationAttribute('a', missing_value_type=IntegerField)
    with pytest.raises(ValueError):
        EvaluationAttribute('a', preference_type='better')
    assert EvaluationAttribute('a').make_unknown() == UnknownSimpleFieldMV15()
