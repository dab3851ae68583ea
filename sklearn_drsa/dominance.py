"""
Dominance relation between objects of an `InformationTable`, and the
dominance cones of each object.

Object `y` dominates object `x` (`y D x`) iff for every active attribute `q`
`q(y).is_at_least_as_good_as(q(x))` is TRUE. The inverse relation looks from
the other side: `x` is dominated by `y` iff for every `q`
`q(x).is_at_most_as_good_as(q(y))` is TRUE. Without missing values both
relations coincide, with MV1.5 missing values they do not, because
comparisons starting at a missing value differ from those ending at one.

Cones of object `x`:

- positive cone `D+(x) = {y : y D x}`
- negative cone `D-(x) = {y : x D y}`
- positive inverse cone `InvD+(x) = {y : x is dominated by y}`
- negative inverse cone `InvD-(x) = {y : y is dominated by x}`
"""

import warnings
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

import numpy as np
import scipy.sparse

from sklearn_drsa.fields import TRUE
from sklearn_drsa.table import InformationTable, attribute_indices
from sklearn_drsa.util import check_index, check_not_none


def dominates(table: InformationTable, y: int, x: int,
              attributes: Optional[Sequence[int]] = None) -> bool:
    """:return: True iff object `y` dominates object `x` in `table`.
    :param attributes: Attribute indices to consider. If None, the active
      attributes of `table`.
    """
    return all(table.get_field(y, q).is_at_least_as_good_as(
                   table.get_field(x, q)) is TRUE
               for q in attribute_indices(table, attributes))


def is_dominated_by(table: InformationTable, x: int, y: int,
                    attributes: Optional[Sequence[int]] = None) -> bool:
    """:return: True iff object `x` is dominated by object `y` in `table`,
        according to the inverse dominance relation.
    :param attributes: see `dominates`.
    """
    return all(table.get_field(x, q).is_at_most_as_good_as(
                   table.get_field(y, q)) is TRUE
               for q in attribute_indices(table, attributes))


class ConeType(Enum):
    POSITIVE_D = 'D+'
    NEGATIVE_D = 'D-'
    POSITIVE_INV_D = 'InvD+'
    NEGATIVE_INV_D = 'InvD-'


Cone = FrozenSet[int]


class DominanceCones:
    """Dominance cones of all objects of one `InformationTable`.

    Cones are computed lazily: the first access to any cone of object `x`
    runs one pass over all objects, filling all four cones of `x` from the
    same field comparisons. Each cone is stored at most once ("write-once"
    slots) and never recomputed; the table must not change while this
    instance is used. Alternatively, `calculate_all` computes all
    remaining cones at once.

    Parameters
    -----
    table : InformationTable

    attributes : None or sequence of int
        Attributes defining the dominance relation. If None, the active
        attributes of `table`.

    Fields
    -----
    ConeSetClass : type
        Immutable set type used for the cones, `frozenset` by default.

    Attributes
    -----
    attributes_ : list of int
        The attribute indices used.

    n_passes_ : np.ndarray of shape (n_objects,)
        How often the cones of each object have been computed (0 or 1).
    """

    ConeSetClass = frozenset

    def __init__(self, table: InformationTable,
                 attributes: Optional[Sequence[int]] = None):
        self.table = check_not_none(
            table, "Information table for calculation of dominance cones is "
                   "null.")
        self.attributes_: List[int] = attribute_indices(table, attributes)
        if not self.attributes_:
            warnings.warn("No attributes given, every object dominates every "
                          "other object.")
        n_objects = table.n_objects
        # columns of the relevant attributes, to save repeated index checks
        self._columns = [table.get_column(q) for q in self.attributes_]
        self._cones: Dict[ConeType, List[Optional[Cone]]] = {
            cone_type: [None] * n_objects for cone_type in ConeType}
        self.n_passes_ = np.zeros(n_objects, dtype=int)

    @property
    def n_objects(self) -> int:
        return self.table.n_objects

    def get_cone(self, cone_type: ConeType, object_index: int) -> Cone:
        """:return: the cone of type `cone_type` of object `object_index`.
        :raise IndexError: for an invalid `object_index`.
        """
        check_not_none(cone_type, "Cone type is null.")
        x = check_index(object_index, self.n_objects, 'Object index')
        cone = self._cones[ConeType(cone_type)][x]
        if cone is None:
            self._calculate_object(x)
            cone = self._cones[ConeType(cone_type)][x]
        return cone

    def get_positive_d_cone(self, object_index: int) -> Cone:
        """:return: `D+(x)`, the objects dominating `x`."""
        return self.get_cone(ConeType.POSITIVE_D, object_index)

    def get_negative_d_cone(self, object_index: int) -> Cone:
        """:return: `D-(x)`, the objects dominated by `x`."""
        return self.get_cone(ConeType.NEGATIVE_D, object_index)

    def get_positive_inv_d_cone(self, object_index: int) -> Cone:
        """:return: `InvD+(x)`, the objects `x` is dominated by (inverse
            relation). Used to approximate upward unions.
        """
        return self.get_cone(ConeType.POSITIVE_INV_D, object_index)

    def get_negative_inv_d_cone(self, object_index: int) -> Cone:
        """:return: `InvD-(x)`, the objects dominated by `x` (inverse
            relation).
        """
        return self.get_cone(ConeType.NEGATIVE_INV_D, object_index)

    def is_calculated(self, object_index: int) -> bool:
        x = check_index(object_index, self.n_objects, 'Object index')
        return self._cones[ConeType.POSITIVE_D][x] is not None

    def _store(self, x: int, positive, negative, positive_inv, negative_inv):
        """Write the four (empty) slots of object `x`."""
        assert not self.is_calculated(x), "cones of %d already set" % x
        self._cones[ConeType.POSITIVE_D][x] = self.ConeSetClass(positive)
        self._cones[ConeType.NEGATIVE_D][x] = self.ConeSetClass(negative)
        self._cones[ConeType.POSITIVE_INV_D][x] = \
            self.ConeSetClass(positive_inv)
        self._cones[ConeType.NEGATIVE_INV_D][x] = \
            self.ConeSetClass(negative_inv)
        self.n_passes_[x] += 1

    def _relations(self, x: int, y: int):
        """:return: tuple of bool `(y D x, x D y, x Inv y, y Inv x)` where
            `Inv` is "is dominated by" of the inverse relation.
        """
        y_dominates = x_dominates = x_inv = y_inv = True
        for column in self._columns:
            x_field = column[x]
            y_field = column[y]
            y_dominates = y_dominates and \
                y_field.is_at_least_as_good_as(x_field) is TRUE
            x_dominates = x_dominates and \
                x_field.is_at_least_as_good_as(y_field) is TRUE
            x_inv = x_inv and x_field.is_at_most_as_good_as(y_field) is TRUE
            y_inv = y_inv and y_field.is_at_most_as_good_as(x_field) is TRUE
            if not (y_dominates or x_dominates or x_inv or y_inv):
                break
        return y_dominates, x_dominates, x_inv, y_inv

    def _calculate_object(self, x: int) -> None:
        """One pass over all objects, computing the four cones of `x`."""
        # dominance is reflexive
        positive, negative, positive_inv, negative_inv = [x], [x], [x], [x]
        for y in range(self.n_objects):
            if y == x:
                continue
            y_dominates, x_dominates, x_inv, y_inv = self._relations(x, y)
            if y_dominates:
                positive.append(y)
            if x_dominates:
                negative.append(y)
            if x_inv:
                positive_inv.append(y)
            if y_inv:
                negative_inv.append(y)
        self._store(x, positive, negative, positive_inv, negative_inv)

    def calculate_all(self) -> 'DominanceCones':
        """Compute the cones of all objects not calculated yet.

        Each unordered pair of objects is visited once, and every relation
        evaluated updates the cones of both objects. Pairs of objects which
        are both calculated already are skipped.

        :return: self
        """
        n_objects = self.n_objects
        pending = [x for x in range(n_objects) if not self.is_calculated(x)]
        if not pending:
            return self
        is_pending = np.zeros(n_objects, dtype=bool)
        is_pending[pending] = True
        cones = {cone_type: [[x] for x in range(n_objects)]
                 for cone_type in ConeType}
        positive = cones[ConeType.POSITIVE_D]
        negative = cones[ConeType.NEGATIVE_D]
        positive_inv = cones[ConeType.POSITIVE_INV_D]
        negative_inv = cones[ConeType.NEGATIVE_INV_D]
        for x in range(n_objects):
            for y in range(x + 1, n_objects):
                if not (is_pending[x] or is_pending[y]):
                    continue
                y_dominates, x_dominates, x_inv, y_inv = self._relations(x, y)
                if y_dominates:
                    positive[x].append(y)
                    negative[y].append(x)
                if x_dominates:
                    positive[y].append(x)
                    negative[x].append(y)
                if x_inv:
                    positive_inv[x].append(y)
                    negative_inv[y].append(x)
                if y_inv:
                    positive_inv[y].append(x)
                    negative_inv[x].append(y)
        for x in pending:
            self._store(x, positive[x], negative[x],
                        positive_inv[x], negative_inv[x])
        return self

    def to_sparse(self, cone_type: ConeType = ConeType.POSITIVE_D
                  ) -> scipy.sparse.csr_matrix:
        """:return: Relation matrix `M` of shape `(n_objects, n_objects)` and
            dtype bool, where `M[x, y]` iff `y` is in the cone of `x`.
        """
        self.calculate_all()
        rows, columns = [], []
        for x in range(self.n_objects):
            cone = self._cones[ConeType(cone_type)][x]
            rows.extend([x] * len(cone))
            columns.extend(cone)
        data = np.ones(len(rows), dtype=bool)
        return scipy.sparse.csr_matrix((data, (rows, columns)),
                                       shape=(self.n_objects, self.n_objects),
                                       dtype=bool)
