"""
Elementary conditions of decision rules, tested against evaluation fields.

A condition compares the value of one attribute with a limiting evaluation.
There are two flavours of each relation, differing in which side is the
receiver of the field comparison; this matters for MV1.5 missing values:

- *threshold vs object* (the limiting evaluation is the receiver): objects
  with a missing value do not satisfy the condition.
- *object vs threshold* (the object's value is the receiver): objects with
  a missing value satisfy the condition.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from sklearn_drsa.fields import ComparisonResult, EvaluationField, TRUE
from sklearn_drsa.table import InformationTable
from sklearn_drsa.util import check_index, check_not_none


class Condition(ABC):
    """Condition on attribute `attribute_index` with `limiting_evaluation`.
    """
    relation_symbol: str = None

    def __init__(self, attribute_index: int,
                 limiting_evaluation: EvaluationField):
        check_not_none(attribute_index, "Attribute index is null.")
        self.attribute_index = attribute_index
        self.limiting_evaluation = check_not_none(
            limiting_evaluation, "Limiting evaluation is null.")

    @abstractmethod
    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        """:return: True iff `evaluation` fulfills this condition."""
        raise NotImplementedError

    def covers(self, table: InformationTable, object_index: int) -> bool:
        """:return: True iff object `object_index` of `table` fulfills this
            condition.
        """
        check_not_none(table, "Information table is null.")
        return self.satisfied_by(table.get_field(object_index,
                                                 self.attribute_index))

    def covered_objects(self, table: InformationTable) -> np.ndarray:
        """:return: An array of shape `(n_objects,)` and type bool, telling for
            each object whether it fulfills this condition.
        """
        check_not_none(table, "Information table is null.")
        column = table.get_column(self.attribute_index)
        return np.fromiter((self.satisfied_by(field) for field in column),
                           dtype=bool, count=len(column))

    def __eq__(self, other):
        return type(other) is type(self) \
            and other.attribute_index == self.attribute_index \
            and other.limiting_evaluation == self.limiting_evaluation

    def __hash__(self):
        return hash((type(self), self.attribute_index,
                     self.limiting_evaluation))

    def __repr__(self):
        return '%s(%d, %r)' % (type(self).__name__, self.attribute_index,
                               self.limiting_evaluation)


class ConditionAtLeastThresholdVSObject(Condition):
    relation_symbol = '>='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        return self.limiting_evaluation.is_at_most_as_good_as(check_not_none(
            evaluation, "Evaluation to be verified is null.")) is TRUE


class ConditionAtLeastObjectVSThreshold(Condition):
    relation_symbol = '>='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        check_not_none(evaluation, "Evaluation to be verified is null.")
        return evaluation.is_at_least_as_good_as(
            self.limiting_evaluation) is TRUE


class ConditionAtMostThresholdVSObject(Condition):
    relation_symbol = '<='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        return self.limiting_evaluation.is_at_least_as_good_as(check_not_none(
            evaluation, "Evaluation to be verified is null.")) is TRUE


class ConditionAtMostObjectVSThreshold(Condition):
    relation_symbol = '<='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        check_not_none(evaluation, "Evaluation to be verified is null.")
        return evaluation.is_at_most_as_good_as(
            self.limiting_evaluation) is TRUE


class ConditionEqualThresholdVSObject(Condition):
    relation_symbol = '='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        result = self.limiting_evaluation.compare_to_enum(check_not_none(
            evaluation, "Evaluation to be verified is null."))
        return result is ComparisonResult.EQUAL


class ConditionEqualObjectVSThreshold(Condition):
    relation_symbol = '='

    def satisfied_by(self, evaluation: EvaluationField) -> bool:
        check_not_none(evaluation, "Evaluation to be verified is null.")
        result = evaluation.compare_to_enum(self.limiting_evaluation)
        return result is ComparisonResult.EQUAL


def match_conditions(table: InformationTable,
                     conditions: Sequence[Condition]) -> np.ndarray:
    """Apply the conjunction of `conditions` to all objects of `table`.

    :return: An array of shape `(n_objects,)` and type bool, telling for each
        object whether it fulfills all conditions. An empty conjunction
        matches every object.
    """
    check_not_none(table, "Information table is null.")
    check_not_none(conditions, "Conditions are null.")
    matches = np.ones(table.n_objects, dtype=bool)
    for condition in conditions:
        check_index(condition.attribute_index, table.n_attributes,
                    'Attribute index')
        matches &= condition.covered_objects(table)
    return matches
