"""
Information tables: objects described by evaluation fields of a fixed
sequence of attributes, optionally with (ordered) decision class labels.
"""

import warnings
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from sklearn.utils import check_array, check_X_y

from sklearn_drsa.exceptions import TypeMismatchError
from sklearn_drsa.fields import AttributePreferenceType, FieldKind, \
    KNOWN_KINDS, UNKNOWN_KINDS, SIMPLE_KINDS, ElementList, EvaluationField, \
    IntegerField, RealField, UnknownSimpleField, UnknownSimpleFieldMV15, \
    MissingValueType
from sklearn_drsa.util import build_active_mask, check_index, check_not_none

PreferenceTypes = Union[str, AttributePreferenceType,
                        Sequence[Union[str, AttributePreferenceType]]]


class EvaluationAttribute:
    """Describes one column of an `InformationTable`.

    Parameters
    -----
    name : str

    preference_type : AttributePreferenceType or its value, e.g. `'cost'`.

    kind : FieldKind
        Kind of the known values in this column, one of INTEGER, REAL,
        ENUMERATION, PAIR.

    active : bool
        If True (the default), the attribute is a condition attribute, i.e.
        it takes part in the dominance relation.

    missing_value_type : subclass of UnknownSimpleField
        The marker used for missing values in this column.

    element_list : ElementList
        Required iff `kind` is ENUMERATION.

    component_kind : FieldKind
        Kind of both components of PAIR values, one of the simple known
        kinds. Ignored for other kinds.
    """

    def __init__(self,
                 name: str,
                 preference_type='gain',
                 kind: FieldKind = FieldKind.REAL,
                 active: bool = True,
                 missing_value_type: MissingValueType = UnknownSimpleFieldMV15,
                 element_list: Optional[ElementList] = None,
                 component_kind: FieldKind = FieldKind.REAL):
        check_not_none(name, "Attribute name is null.")
        check_not_none(kind, "Attribute kind is null.")
        if kind not in KNOWN_KINDS:
            raise ValueError("Attribute kind has to be one of %s, but got %s."
                             % (sorted(k.value for k in KNOWN_KINDS), kind))
        if kind is FieldKind.ENUMERATION and element_list is None:
            raise ValueError("Enumeration attribute %s needs an element list."
                             % name)
        if kind is FieldKind.PAIR and (component_kind not in SIMPLE_KINDS
                                       or component_kind in UNKNOWN_KINDS
                                       or component_kind is FieldKind.ENUMERATION
                                       and element_list is None):
            raise ValueError("Invalid pair component kind %s for attribute %s."
                             % (component_kind, name))
        if not (isinstance(missing_value_type, type)
                and issubclass(missing_value_type, UnknownSimpleField)):
            raise ValueError("missing_value_type must be a missing value "
                             "field class, got %r." % (missing_value_type,))
        self.name = name
        self.preference_type = AttributePreferenceType(preference_type)
        self.kind = kind
        self.active = active
        self.missing_value_type = missing_value_type
        self.element_list = element_list
        self.component_kind = component_kind

    def make_unknown(self) -> UnknownSimpleField:
        """:return: a missing value marker for this attribute."""
        return self.missing_value_type()

    def accepts(self, field: EvaluationField) -> bool:
        """:return: True iff `field` may be a value of this attribute."""
        return field.kind is self.kind or field.kind in UNKNOWN_KINDS

    def __repr__(self):
        return 'EvaluationAttribute(%r, %s, %s%s)' % (
            self.name, self.preference_type.name, self.kind.name,
            '' if self.active else ', inactive')


class InformationTable:
    """Objects (rows) described by evaluation fields of `attributes`.

    Objects and attributes are addressed by dense zero-based indices, stable
    for the lifetime of the table. Tables are never modified after
    construction.

    Attributes
    -----
    attributes : tuple of EvaluationAttribute

    rows : tuple of tuples of EvaluationField
        `rows[i][j]` is the value of object `i` for attribute `j`.

    decisions : np.ndarray of shape (n_objects,) or None
        Decision class label of each object. Labels are ordered by
        preference, i.e. a higher label is a better class.
    """

    def __init__(self,
                 attributes: Sequence[EvaluationAttribute],
                 rows: Sequence[Sequence[EvaluationField]],
                 decisions=None):
        check_not_none(attributes, "Attributes are null.")
        check_not_none(rows, "Rows are null.")
        self.attributes: Tuple[EvaluationAttribute, ...] = tuple(attributes)
        n_attributes = len(self.attributes)
        table = []
        for object_index, row in enumerate(rows):
            row = tuple(check_not_none(row, "Row %d is null." % object_index))
            if len(row) != n_attributes:
                raise ValueError("Row %d has %d fields, but there are %d "
                                 "attributes." % (object_index, len(row),
                                                  n_attributes))
            for attribute, field in zip(self.attributes, row):
                check_not_none(field, "Field of object %d, attribute %s is "
                                      "null." % (object_index, attribute.name))
                if not attribute.accepts(field):
                    raise TypeMismatchError(
                        "Field %r of object %d does not fit attribute %r."
                        % (field, object_index, attribute))
            table.append(row)
        self.rows: Tuple[Tuple[EvaluationField, ...], ...] = tuple(table)
        if decisions is not None:
            decisions = np.asarray(decisions)
            if decisions.shape != (len(self.rows),):
                raise ValueError("Expected %d decisions, got array of shape "
                                 "%s." % (len(self.rows), decisions.shape))
        self.decisions: Optional[np.ndarray] = decisions

    @classmethod
    def from_arrays(cls,
                    X,
                    y=None,
                    preference_types: PreferenceTypes = 'gain',
                    active_attributes=None,
                    integer_attributes=None,
                    missing_value_type: MissingValueType = UnknownSimpleFieldMV15,
                    attribute_names: Optional[Sequence[str]] = None,
                    ) -> 'InformationTable':
        """Build a table of numeric fields from array `X`.

        :param X: array-like of shape `(n_objects, n_attributes)`. NaN entries
          become missing values of type `missing_value_type`.
        :param y: None or array-like of shape `(n_objects,)`, the decisions.
        :param preference_types: one preference type for all attributes, or a
          sequence with one per attribute.
        :param active_attributes: None, 'all', array of indices or mask, see
          `util.build_active_mask`.
        :param integer_attributes: None, 'all', array of indices or mask of
          the attributes holding `IntegerField`s. Others hold `RealField`s.
        :param attribute_names: Names, defaults to `a1, a2, ...`.
        """
        if y is None:
            X = check_array(X, dtype=np.float64, ensure_all_finite='allow-nan',
                            ensure_min_samples=0)
        else:
            X, y = check_X_y(X, y, dtype=np.float64,
                             ensure_all_finite='allow-nan',
                             ensure_min_samples=0)
        n_attributes = X.shape[1]

        if isinstance(preference_types, (str, AttributePreferenceType)):
            preference_types = [preference_types] * n_attributes
        if len(preference_types) != n_attributes:
            raise ValueError("Got %d preference types for %d attributes."
                             % (len(preference_types), n_attributes))
        active_mask = build_active_mask(active_attributes, n_attributes)
        if active_mask is None:
            raise ValueError("active_attributes must be one of: None, 'all', "
                             "array of indices or mask, but got %s."
                             % (active_attributes,))
        integer_mask = build_active_mask(integer_attributes
                                         if integer_attributes is not None
                                         else [],
                                         n_attributes)
        if integer_mask is None:
            raise ValueError("integer_attributes must be one of: None, 'all', "
                             "array of indices or mask, but got %s."
                             % (integer_attributes,))
        if attribute_names is None:
            attribute_names = ['a%d' % (j + 1) for j in range(n_attributes)]
        elif len(attribute_names) != n_attributes:
            raise ValueError("Got %d attribute names for %d attributes."
                             % (len(attribute_names), n_attributes))

        missing = np.isnan(X)
        all_missing = missing.all(axis=0) & (X.shape[0] > 0)
        for j in np.flatnonzero(all_missing):
            # issue a warning, user can decide handling. See module `warnings`
            warnings.warn("All values of attribute %s are missing."
                          % attribute_names[j])
        if integer_mask.any():
            known_integers = X[:, integer_mask][~missing[:, integer_mask]]
            if not np.equal(np.mod(known_integers, 1), 0).all():
                raise ValueError("Attributes declared integer hold values "
                                 "with fractional parts.")

        attributes = [
            EvaluationAttribute(name,
                                preference_type,
                                FieldKind.INTEGER if integer else FieldKind.REAL,
                                active=bool(active),
                                missing_value_type=missing_value_type)
            for name, preference_type, integer, active
            in zip(attribute_names, preference_types, integer_mask,
                   active_mask)]
        field_types = [IntegerField if integer else RealField
                       for integer in integer_mask]
        rows = [[missing_value_type() if missing[i, j]
                 else field_types[j](X[i, j], attributes[j].preference_type)
                 for j in range(n_attributes)]
                for i in range(X.shape[0])]
        return cls(attributes, rows, y)

    @property
    def n_objects(self) -> int:
        return len(self.rows)

    @property
    def n_attributes(self) -> int:
        return len(self.attributes)

    def get_field(self, object_index: int, attribute_index: int
                  ) -> EvaluationField:
        """:return: The value of object `object_index` for attribute
            `attribute_index`.
        :raise IndexError: if any index is out of range.
        """
        object_index = check_index(object_index, self.n_objects,
                                   'Object index')
        attribute_index = check_index(attribute_index, self.n_attributes,
                                      'Attribute index')
        return self.rows[object_index][attribute_index]

    def get_object(self, object_index: int) -> Tuple[EvaluationField, ...]:
        """:return: All fields of object `object_index`."""
        return self.rows[check_index(object_index, self.n_objects,
                                     'Object index')]

    def get_column(self, attribute_index: int) -> Tuple[EvaluationField, ...]:
        """:return: The fields of all objects for attribute
            `attribute_index`.
        """
        attribute_index = check_index(attribute_index, self.n_attributes,
                                      'Attribute index')
        return tuple(row[attribute_index] for row in self.rows)

    def get_active_attribute_indices(self) -> np.ndarray:
        """:return: Indices of the active (condition) attributes."""
        return np.flatnonzero([a.active for a in self.attributes])

    def has_missing_values(self) -> bool:
        return any(field.kind in UNKNOWN_KINDS
                   for row in self.rows for field in row)

    def select(self, object_indices) -> 'InformationTable':
        """:return: A new table with only the objects `object_indices`, in
            that order. Indices of the new table are positions in
            `object_indices`.
        """
        object_indices = [check_index(i, self.n_objects, 'Object index')
                          for i in object_indices]
        decisions = None if self.decisions is None \
            else self.decisions[object_indices]
        return type(self)(self.attributes,
                          [self.rows[i] for i in object_indices],
                          decisions)

    def __len__(self):
        return self.n_objects

    def __repr__(self):
        return '<InformationTable: %d objects, %d attributes>' % (
            self.n_objects, self.n_attributes)


def attribute_indices(table: InformationTable, attributes=None) -> List[int]:
    """Resolve `attributes` against `table`.

    :param attributes: None to use the active attributes of `table`, or a
      sequence of attribute indices.
    :return: list of validated attribute indices.
    """
    check_not_none(table, "Information table is null.")
    if attributes is None:
        return table.get_active_attribute_indices().tolist()
    return [check_index(q, table.n_attributes, 'Attribute index')
            for q in attributes]
