"""
Creation of evaluation fields from their textual representation, for the
kind of a given attribute.
"""

from typing import Sequence

from sklearn_drsa.exceptions import FieldParseError, InvalidValueError
from sklearn_drsa.fields import FieldKind, EvaluationField, IntegerField, \
    RealField, EnumerationField, PairField, ElementList, \
    AttributePreferenceType, MissingValueType
from sklearn_drsa.table import EvaluationAttribute
from sklearn_drsa.util import check_not_none

MISSING_VALUE_MARKERS = ('?', '*', '')


def _parse_simple(text: str,
                  kind: FieldKind,
                  preference_type: AttributePreferenceType,
                  missing_value_type: MissingValueType,
                  element_list: ElementList = None) -> EvaluationField:
    text = text.strip()
    if text in MISSING_VALUE_MARKERS:
        return missing_value_type()
    if kind is FieldKind.INTEGER:
        try:
            return IntegerField(int(text), preference_type)
        except ValueError:
            raise FieldParseError("Cannot parse %r as integer." % text) \
                from None
    if kind is FieldKind.REAL:
        try:
            value = float(text)
        except ValueError:
            raise FieldParseError("Cannot parse %r as real number." % text) \
                from None
        return RealField(value, preference_type)
    if kind is FieldKind.ENUMERATION:
        index = element_list.index(text)
        if index < 0:
            raise FieldParseError("%r is not an element of %r."
                                  % (text, element_list))
        return EnumerationField(element_list, index, preference_type)
    raise FieldParseError("Cannot parse fields of kind %s." % kind)


def parse_field(text: str, attribute: EvaluationAttribute) -> EvaluationField:
    """Create the field of `attribute` represented by `text`.

    Missing values are written as one of `MISSING_VALUE_MARKERS` and yield
    the attribute's missing value marker. Pair values are written `(a, b)`,
    each component may be missing.

    :raise FieldParseError: if `text` is no valid value of `attribute`.
    """
    check_not_none(text, "Text to parse is null.")
    check_not_none(attribute, "Attribute is null.")
    text = text.strip()
    if text in MISSING_VALUE_MARKERS:
        return attribute.make_unknown()
    try:
        if attribute.kind is FieldKind.PAIR:
            if not (text.startswith('(') and text.endswith(')')):
                raise FieldParseError("Pair value %r is not enclosed in "
                                      "parentheses." % text)
            components = text[1:-1].split(',')
            if len(components) != 2:
                raise FieldParseError("Pair value %r does not have exactly "
                                      "two components." % text)
            return PairField(*(_parse_simple(component,
                                             attribute.component_kind,
                                             attribute.preference_type,
                                             attribute.missing_value_type,
                                             attribute.element_list)
                               for component in components))
        return _parse_simple(text, attribute.kind, attribute.preference_type,
                             attribute.missing_value_type,
                             attribute.element_list)
    except InvalidValueError as e:
        raise FieldParseError("Invalid value %r for attribute %s: %s"
                              % (text, attribute.name, e)) from e


def parse_row(values: Sequence[str],
              attributes: Sequence[EvaluationAttribute]
              ) -> Sequence[EvaluationField]:
    """:return: the fields of one object, parsed from `values`."""
    check_not_none(values, "Values are null.")
    if len(values) != len(attributes):
        raise FieldParseError("Got %d values for %d attributes."
                              % (len(values), len(attributes)))
    return [parse_field(value, attribute)
            for value, attribute in zip(values, attributes)]
