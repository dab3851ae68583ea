"""
Evaluation fields: the values in the cells of an information table, and the
three-valued comparisons between them.

The set of field variants is closed, see `FieldKind`. All comparisons are
implemented by the module level functions `ternary_compare`,
`reverse_ternary_compare`, `compare_to_ex` and `reverse_compare_to_ex`,
which match on the kinds of both operands; the field classes just hold the
values and forward to these functions.

Missing values
=====

There are two variants of missing value markers, differing in how they
participate in comparisons.

- `UnknownSimpleFieldMV15`: Compared "forward" (i.e. the missing value is
  the receiver) it is at least as good as, at most as good as and equal to
  any simple field. Compared "reverse" (a known field is the receiver, the
  missing value the argument) all these relations are FALSE. This
  non-symmetric relation keeps lower approximations conservative.
- `UnknownSimpleFieldMV2`: Symmetric, all relations are TRUE in both
  directions.
"""

import math
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple, Type

from sklearn_drsa.exceptions import InvalidValueError, TypeMismatchError, \
    UncomparableError
from sklearn_drsa.util import check_not_none, sign


class TernaryLogicValue(Enum):
    """Result of a comparison which may be undefined."""
    TRUE = 'true'
    FALSE = 'false'
    UNCOMPARABLE = 'uncomparable'

    @classmethod
    def of(cls, value: bool) -> 'TernaryLogicValue':
        return cls.TRUE if value else cls.FALSE


class ComparisonResult(Enum):
    """`compare_to_ex` mapped to an enum, see `EvaluationField.compare_to_enum`.
    """
    SMALLER_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1
    UNCOMPARABLE = None


class AttributePreferenceType(Enum):
    """Orientation of an attribute's value scale.

    - GAIN: higher values are better.
    - COST: lower values are better.
    - NONE: no preference, only equality is meaningful.
    """
    GAIN = 'gain'
    COST = 'cost'
    NONE = 'none'


class FieldKind(Enum):
    """The closed set of evaluation field variants."""
    INTEGER = 'integer'
    REAL = 'real'
    ENUMERATION = 'enumeration'
    PAIR = 'pair'
    UNKNOWN_MV15 = 'mv1.5'
    UNKNOWN_MV2 = 'mv2'


KNOWN_SIMPLE_KINDS = frozenset({FieldKind.INTEGER,
                                FieldKind.REAL,
                                FieldKind.ENUMERATION})
UNKNOWN_KINDS = frozenset({FieldKind.UNKNOWN_MV15, FieldKind.UNKNOWN_MV2})
SIMPLE_KINDS = KNOWN_SIMPLE_KINDS | UNKNOWN_KINDS
KNOWN_KINDS = KNOWN_SIMPLE_KINDS | {FieldKind.PAIR}

TRUE = TernaryLogicValue.TRUE
FALSE = TernaryLogicValue.FALSE
UNCOMPARABLE = TernaryLogicValue.UNCOMPARABLE


def _preference_type(preference_type) -> AttributePreferenceType:
    """Accept an `AttributePreferenceType` or its value, e.g. `'gain'`."""
    check_not_none(preference_type, "Preference type is null.")
    return AttributePreferenceType(preference_type)


def check_field(value, message: str) -> None:
    """:raise NullArgumentError: if `value` is None.
    :raise TypeMismatchError: if `value` is no `EvaluationField`.
    """
    check_not_none(value, message)
    if not isinstance(value, EvaluationField):
        raise TypeMismatchError("Expected an evaluation field, got %r."
                                % (value,))


# comparisons


class Relation(Enum):
    """The relations tested by `ternary_compare`."""
    AT_LEAST = 'at least as good as'
    AT_MOST = 'at most as good as'
    EQUAL = 'equal to'


# maps (relation, receiver preference) to a test on the sign of
# `receiver.value - other.value`
_RELATION_HOLDS: Dict[Tuple[Relation, AttributePreferenceType],
                      Callable[[int], bool]] = {
    (Relation.AT_LEAST, AttributePreferenceType.GAIN): lambda s: s >= 0,
    (Relation.AT_LEAST, AttributePreferenceType.COST): lambda s: s <= 0,
    (Relation.AT_LEAST, AttributePreferenceType.NONE): lambda s: s == 0,
    (Relation.AT_MOST, AttributePreferenceType.GAIN): lambda s: s <= 0,
    (Relation.AT_MOST, AttributePreferenceType.COST): lambda s: s >= 0,
    (Relation.AT_MOST, AttributePreferenceType.NONE): lambda s: s == 0,
    (Relation.EQUAL, AttributePreferenceType.GAIN): lambda s: s == 0,
    (Relation.EQUAL, AttributePreferenceType.COST): lambda s: s == 0,
    (Relation.EQUAL, AttributePreferenceType.NONE): lambda s: s == 0,
}

# result of any reverse comparison, i.e. known receiver and missing argument
_REVERSE_RESULT = {
    FieldKind.UNKNOWN_MV15: FALSE,
    FieldKind.UNKNOWN_MV2: TRUE,
}


def _known_sign(field: 'KnownSimpleField', other: 'KnownSimpleField') -> int:
    """:return: sign of `field.value - other.value`, both of the same kind.
    :raise InvalidValueError: for enumerations without common element list.
    """
    if field.kind is FieldKind.ENUMERATION \
            and not field.has_equal_element_list(other):
        raise InvalidValueError("Enumeration fields have different element "
                                "lists: %r, %r." % (field, other))
    return sign(field.value - other.value)


def _conjunction(first: TernaryLogicValue, second: TernaryLogicValue
                 ) -> TernaryLogicValue:
    if UNCOMPARABLE in (first, second):
        return UNCOMPARABLE
    return TernaryLogicValue.of(first is TRUE and second is TRUE)


def ternary_compare(relation: Relation,
                    field: 'EvaluationField',
                    other: 'EvaluationField') -> TernaryLogicValue:
    """Test whether `field` (the receiver) is in `relation` to `other`.

    Known fields are oriented by the receiver's preference type. A known
    receiver compared to a missing value defers to
    `reverse_ternary_compare`. Pair fields compare componentwise and relate
    to missing values only through their components.
    """
    check_field(other, "Field is null.")
    kind, other_kind = field.kind, other.kind
    if kind in UNKNOWN_KINDS:
        return TRUE if other_kind in SIMPLE_KINDS else UNCOMPARABLE
    if other_kind in UNKNOWN_KINDS:
        if kind is FieldKind.PAIR:
            return UNCOMPARABLE
        return reverse_ternary_compare(relation, other, field)
    if kind is not other_kind:
        return UNCOMPARABLE
    if kind is FieldKind.PAIR:
        return _conjunction(ternary_compare(relation, field.first,
                                            other.first),
                            ternary_compare(relation, field.second,
                                            other.second))
    holds = _RELATION_HOLDS[relation, field.preference_type]
    return TernaryLogicValue.of(holds(_known_sign(field, other)))


def reverse_ternary_compare(relation: Relation,
                            unknown: 'EvaluationField',
                            known: 'EvaluationField') -> TernaryLogicValue:
    """Test whether `known` is in `relation` to the missing value `unknown`.

    Result depends only on the missing value variant, see module docs.
    """
    check_field(known, "Field is null.")
    if unknown.kind not in UNKNOWN_KINDS:
        raise TypeMismatchError("Reverse comparison is only defined for "
                                "missing values, not %r." % unknown)
    return _REVERSE_RESULT[unknown.kind]


def compare_to_ex(field: 'EvaluationField', other: 'EvaluationField') -> int:
    """Total-order-style comparison of `field` with `other`.

    :return: -1, 0, or 1, the natural sign of `field - other`, regardless of
      preference type. A missing value receiver is tied with any simple field.
    :raise TypeMismatchError: on incompatible kinds.
    :raise UncomparableError: if there is no defined order, e.g. from a known
      field onto an MV1.5 missing value, or for pairs ordered differently in
      their two components.
    """
    check_field(other, "Field is null.")
    kind, other_kind = field.kind, other.kind
    if kind in UNKNOWN_KINDS:
        if other_kind in SIMPLE_KINDS:
            return 0
        raise TypeMismatchError("%r cannot be compared to missing value %r."
                                % (other, field))
    if other_kind in UNKNOWN_KINDS:
        if kind is FieldKind.PAIR:
            raise TypeMismatchError("Pair field %r cannot be compared to "
                                    "missing value %r." % (field, other))
        return -reverse_compare_to_ex(other, field)
    if kind is not other_kind:
        raise TypeMismatchError("Cannot compare %s field with %s field."
                                % (kind.value, other_kind.value))
    if kind is FieldKind.PAIR:
        signs = {compare_to_ex(field.first, other.first),
                 compare_to_ex(field.second, other.second)}
        signs.discard(0)
        if len(signs) > 1:
            raise UncomparableError("Pair fields %r and %r are ordered "
                                    "differently in their components."
                                    % (field, other))
        return signs.pop() if signs else 0
    return _known_sign(field, other)


def reverse_compare_to_ex(unknown: 'EvaluationField',
                          known: 'EvaluationField') -> int:
    """Compare `known` to the missing value `unknown`, seen from `known`.

    :raise UncomparableError: for MV1.5, there is no order from a known field
      back onto it.
    """
    check_field(known, "Field is null.")
    if unknown.kind is FieldKind.UNKNOWN_MV15:
        raise UncomparableError("%r cannot be compared to unknown field."
                                % known)
    if unknown.kind is FieldKind.UNKNOWN_MV2:
        return 0
    raise TypeMismatchError("Reverse comparison is only defined for missing "
                            "values, not %r." % unknown)


# field types


class EvaluationField:
    """Base of all evaluation fields, i.e. values of a cell of an information
    table. Instances are immutable and hashable.

    Concrete fields are identified by their `kind` (see `FieldKind`), all
    comparisons dispatch on the kinds of both operands.
    """
    kind: FieldKind = None
    __slots__ = ()

    def is_at_least_as_good_as(self, other: 'EvaluationField'
                               ) -> TernaryLogicValue:
        return ternary_compare(Relation.AT_LEAST, self, other)

    def is_at_most_as_good_as(self, other: 'EvaluationField'
                              ) -> TernaryLogicValue:
        return ternary_compare(Relation.AT_MOST, self, other)

    def is_equal_to(self, other: 'EvaluationField') -> TernaryLogicValue:
        return ternary_compare(Relation.EQUAL, self, other)

    def is_different_than(self, other: 'EvaluationField'
                          ) -> TernaryLogicValue:
        """Negation of `is_equal_to`, UNCOMPARABLE stays UNCOMPARABLE."""
        equal = self.is_equal_to(other)
        if equal is UNCOMPARABLE:
            return UNCOMPARABLE
        return TernaryLogicValue.of(equal is FALSE)

    def reverse_is_at_least_as_good_as(self, known: 'EvaluationField'
                                       ) -> TernaryLogicValue:
        """Whether `known` is at least as good as this missing value."""
        return reverse_ternary_compare(Relation.AT_LEAST, self, known)

    def reverse_is_at_most_as_good_as(self, known: 'EvaluationField'
                                      ) -> TernaryLogicValue:
        """Whether `known` is at most as good as this missing value."""
        return reverse_ternary_compare(Relation.AT_MOST, self, known)

    def reverse_is_equal_to(self, known: 'EvaluationField'
                            ) -> TernaryLogicValue:
        """Whether `known` is equal to this missing value."""
        return reverse_ternary_compare(Relation.EQUAL, self, known)

    def compare_to_ex(self, other: 'EvaluationField') -> int:
        return compare_to_ex(self, other)

    def reverse_compare_to_ex(self, known: 'EvaluationField') -> int:
        return reverse_compare_to_ex(self, known)

    def compare_to_enum(self, other: 'EvaluationField') -> ComparisonResult:
        """Like `compare_to_ex`, but UncomparableError is mapped to
        `ComparisonResult.UNCOMPARABLE`.
        """
        try:
            return ComparisonResult(self.compare_to_ex(other))
        except UncomparableError:
            return ComparisonResult.UNCOMPARABLE

    def calculate(self, calculator, other: 'EvaluationField'
                  ) -> 'EvaluationField':
        """Aggregate `self` with `other`, see
        `sklearn_drsa.calculator.EvaluationFieldCalculator`.
        """
        return calculator.calculate(self, other)

    def is_unknown(self) -> bool:
        return self.kind in UNKNOWN_KINDS

    def equal_when_compared_to_any_evaluation(self) -> bool:
        """True iff `is_equal_to` is TRUE for any simple field argument."""
        return self.kind in UNKNOWN_KINDS

    def equal_when_reverse_compared_to_any_evaluation(self) -> bool:
        """True iff any known field `is_equal_to` this one."""
        return self.kind is FieldKind.UNKNOWN_MV2


class KnownSimpleField(EvaluationField):
    """A known value on an ordered scale oriented by `preference_type`."""
    __slots__ = ('_value', '_preference_type')

    def __init__(self, value, preference_type):
        self._value = value
        self._preference_type = _preference_type(preference_type)

    @property
    def value(self):
        return self._value

    @property
    def preference_type(self) -> AttributePreferenceType:
        return self._preference_type

    def _key(self):
        return self.kind, self._value, self._preference_type

    def __eq__(self, other):
        if not isinstance(other, EvaluationField):
            return NotImplemented
        return other.kind is self.kind and other._key() == self._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return '%s(%r, %s)' % (type(self).__name__, self._value,
                               self._preference_type.name)


class IntegerField(KnownSimpleField):
    kind = FieldKind.INTEGER
    __slots__ = ()

    def __init__(self, value: int, preference_type='gain'):
        check_not_none(value, "Value is null.")
        if isinstance(value, float) and not value.is_integer():
            raise InvalidValueError("Integer field value %r is not integral."
                                    % value)
        super().__init__(int(value), preference_type)


class RealField(KnownSimpleField):
    kind = FieldKind.REAL
    __slots__ = ()

    def __init__(self, value: float, preference_type='gain'):
        check_not_none(value, "Value is null.")
        value = float(value)
        if not math.isfinite(value):
            raise InvalidValueError("%r is no valid real field value, use a "
                                    "missing value field instead." % value)
        super().__init__(value, preference_type)


class ElementList:
    """Immutable, ordered list of enumeration elements (strings).

    Enumeration fields are only comparable if they share an element list;
    lists are compared structurally, using a precomputed hash first.
    """
    __slots__ = ('_elements', '_hash')

    def __init__(self, elements: Iterable[str]):
        check_not_none(elements, "Elements are null.")
        self._elements = tuple(str(e) for e in elements)
        if len(set(self._elements)) != len(self._elements):
            raise InvalidValueError("Element list contains duplicates: %r"
                                    % (self._elements,))
        self._hash = hash(self._elements)

    @property
    def elements(self) -> Tuple[str, ...]:
        return self._elements

    def index(self, element: str) -> int:
        """:return: index of `element`, or -1 if it is not in this list."""
        try:
            return self._elements.index(element)
        except ValueError:
            return -1

    def __len__(self):
        return len(self._elements)

    def __getitem__(self, index: int) -> str:
        return self._elements[index]

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other):
        if not isinstance(other, ElementList):
            return NotImplemented
        return self is other or (self._hash == other._hash
                                 and self._elements == other._elements)

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return 'ElementList(%r)' % (self._elements,)


class EnumerationField(KnownSimpleField):
    """An ordinal value, i.e. an index into an `ElementList`. The order of the
    elements in the list defines the order of the values.
    """
    kind = FieldKind.ENUMERATION
    __slots__ = ('_element_list',)

    def __init__(self, element_list: ElementList, index: int,
                 preference_type='gain'):
        check_not_none(element_list, "Element list is null.")
        check_not_none(index, "Index is null.")
        if not 0 <= index < len(element_list):
            raise InvalidValueError("Index %d out of range of %r."
                                    % (index, element_list))
        super().__init__(int(index), preference_type)
        self._element_list = element_list

    @property
    def element_list(self) -> ElementList:
        return self._element_list

    @property
    def element(self) -> str:
        return self._element_list[self._value]

    def has_equal_element_list(self, other: 'EnumerationField') -> bool:
        check_not_none(other, "Field is null.")
        return self._element_list == other.element_list

    def _key(self):
        return super()._key() + (self._element_list,)

    def __str__(self):
        return self.element

    def __repr__(self):
        return 'EnumerationField(%r, %r, %s)' % (
            self._element_list, self.element, self._preference_type.name)


class PairField(EvaluationField):
    """A composite of two simple fields, e.g. bounds of an interval."""
    kind = FieldKind.PAIR
    __slots__ = ('_first', '_second')

    def __init__(self, first: EvaluationField, second: EvaluationField):
        check_not_none(first, "First field is null.")
        check_not_none(second, "Second field is null.")
        for component in (first, second):
            if component.kind not in SIMPLE_KINDS:
                raise TypeMismatchError("Pair components must be simple "
                                        "fields, got %r." % component)
        self._first = first
        self._second = second

    @property
    def first(self) -> EvaluationField:
        return self._first

    @property
    def second(self) -> EvaluationField:
        return self._second

    def __eq__(self, other):
        if not isinstance(other, EvaluationField):
            return NotImplemented
        return other.kind is FieldKind.PAIR and \
            (self._first, self._second) == (other.first, other.second)

    def __hash__(self):
        return hash((self.kind, self._first, self._second))

    def __str__(self):
        return '(%s, %s)' % (self._first, self._second)

    def __repr__(self):
        return 'PairField(%r, %r)' % (self._first, self._second)


class UnknownSimpleField(EvaluationField):
    """A missing value marker. Its identity is its class: all instances of one
    missing value variant are equal, and hash alike.
    """
    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, EvaluationField):
            return NotImplemented
        return type(other) is type(self)

    def __hash__(self):
        return hash(type(self))

    def __str__(self):
        return '?'

    def __repr__(self):
        return '%s()' % type(self).__name__


class UnknownSimpleFieldMV15(UnknownSimpleField):
    """Missing value, non-symmetric policy. See module docs."""
    kind = FieldKind.UNKNOWN_MV15
    __slots__ = ()


class UnknownSimpleFieldMV2(UnknownSimpleField):
    """Missing value, symmetric policy. See module docs."""
    kind = FieldKind.UNKNOWN_MV2
    __slots__ = ()


MissingValueType = Type[UnknownSimpleField]
