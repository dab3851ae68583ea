"""
Aggregation of two evaluation fields, e.g. their mean.

`EvaluationField.calculate(calculator, other)` enters here. Instead of
double dispatch over the field class hierarchy, a calculator looks up the
method for the pair `(first.kind, other.kind)` in its `dispatch` table.
Missing values are handled before the lookup: they propagate through any
aggregation instead of being imputed.
"""

from typing import Dict, Tuple

from sklearn_drsa.exceptions import InvalidValueError, TypeMismatchError
from sklearn_drsa.fields import FieldKind, UNKNOWN_KINDS, TRUE, \
    EvaluationField, IntegerField, RealField, EnumerationField, PairField, \
    check_field
from sklearn_drsa.util import truncating_half


class EvaluationFieldCalculator:
    """Base of calculators aggregating two evaluation fields.

    Fields
    -----
    dispatch : dict mapping `(FieldKind, FieldKind)` to a method name.
        Known kind pairs this calculator handles. Subclasses extend or
        override it, and implement the named methods taking
        `(first, second)`. Pairs missing from the table raise
        `TypeMismatchError`.
    """

    dispatch: Dict[Tuple[FieldKind, FieldKind], str] = {}

    def calculate(self, first: EvaluationField, second: EvaluationField
                  ) -> EvaluationField:
        """Aggregate `first` with `second`.

        - If `first` is a missing value, return it.
        - If `second` is a missing value, return it.
        - Otherwise call the method from `dispatch`.

        :raise NullArgumentError: if any of the fields is None.
        :raise TypeMismatchError: if any argument is no field, or `dispatch`
          has no entry for the kinds.
        """
        check_field(first, "First field is null.")
        check_field(second, "Second field is null.")
        if first.kind in UNKNOWN_KINDS:
            return first
        if second.kind in UNKNOWN_KINDS:
            return second
        try:
            method_name = self.dispatch[first.kind, second.kind]
        except KeyError:
            raise TypeMismatchError("%s cannot aggregate %s field with %s "
                                    "field." % (type(self).__name__,
                                                first.kind.value,
                                                second.kind.value)) from None
        return getattr(self, method_name)(first, second)


class MeanCalculator(EvaluationFieldCalculator):
    """Calculates the mean of two evaluation fields of the same kind.

    Equal fields yield the first field unchanged. Integer and enumeration
    means are truncated towards zero. The result carries the preference type
    (and element list) of the first field.
    """

    dispatch = {
        (FieldKind.INTEGER, FieldKind.INTEGER): 'mean_integer',
        (FieldKind.REAL, FieldKind.REAL): 'mean_real',
        (FieldKind.ENUMERATION, FieldKind.ENUMERATION): 'mean_enumeration',
        (FieldKind.PAIR, FieldKind.PAIR): 'mean_pair',
    }

    def mean_integer(self, first: IntegerField, second: IntegerField
                     ) -> IntegerField:
        if first.is_equal_to(second) is TRUE:
            return first
        return IntegerField(truncating_half(first.value + second.value),
                            first.preference_type)

    def mean_real(self, first: RealField, second: RealField) -> RealField:
        if first.is_equal_to(second) is TRUE:
            return first
        return RealField((first.value + second.value) / 2,
                         first.preference_type)

    def mean_enumeration(self, first: EnumerationField,
                         second: EnumerationField) -> EnumerationField:
        # the index means nothing without a common scale, even if equal
        if not first.has_equal_element_list(second):
            raise InvalidValueError("Fields have different element lists.")
        if first.is_equal_to(second) is TRUE:
            return first
        return EnumerationField(first.element_list,
                                truncating_half(first.value + second.value),
                                first.preference_type)

    def mean_pair(self, first: PairField, second: PairField) -> PairField:
        """Componentwise mean.

        Override in a subclass for other semantics, e.g. interval hulls.
        """
        if first == second:
            return first
        return PairField(self.calculate(first.first, second.first),
                         self.calculate(first.second, second.second))


_mean_calculator = MeanCalculator()


def mean(first: EvaluationField, second: EvaluationField) -> EvaluationField:
    """:return: `first.calculate(MeanCalculator(), second)`"""
    check_field(first, "First field is null.")
    return first.calculate(_mean_calculator, second)
