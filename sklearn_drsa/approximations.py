"""
Unions of ordered decision classes and their rough approximations, computed
from dominance cones.

For an upward union `Cl>=t` (objects with decision at least `t`) the lower
approximation holds the objects of the union whose positive inverse cone is
contained in the union. For a downward union `Cl<=t` it uses the negative
cones. Upper approximations are the complements of the lower approximations
of the complementary unions.
"""

from enum import Enum
from typing import FrozenSet, List, Optional

import numpy as np

from sklearn_drsa.dominance import ConeType, DominanceCones
from sklearn_drsa.table import InformationTable
from sklearn_drsa.util import check_not_none


class UnionType(Enum):
    AT_LEAST = 'at_least'
    AT_MOST = 'at_most'


# cone used for lower approximations of the respective union
_LOWER_APPROXIMATION_CONE = {
    UnionType.AT_LEAST: ConeType.POSITIVE_INV_D,
    UnionType.AT_MOST: ConeType.NEGATIVE_D,
}


class ClassUnion:
    """Upward or downward union of decision classes of a table, with its
    approximations.

    Parameters
    -----
    union_type : UnionType

    limiting_decision :
        The class `t` in `Cl>=t` resp. `Cl<=t`.

    cones : DominanceCones
        Cones of the table with the decisions to approximate.

    Attributes
    -----
    objects : frozenset of int
        Objects belonging to the union.

    complementary_objects : frozenset of int
        All other objects of the table.
    """

    def __init__(self, union_type: UnionType, limiting_decision,
                 cones: DominanceCones):
        check_not_none(limiting_decision, "Limiting decision is null.")
        self.cones = check_not_none(cones, "Dominance cones are null.")
        self.union_type = UnionType(union_type)
        self.limiting_decision = limiting_decision
        decisions = cones.table.decisions
        if decisions is None:
            raise ValueError("Information table has no decisions.")
        if self.union_type is UnionType.AT_LEAST:
            mask = decisions >= limiting_decision
        else:
            mask = decisions <= limiting_decision
        self.objects: FrozenSet[int] = frozenset(np.flatnonzero(mask).tolist())
        self.complementary_objects: FrozenSet[int] = \
            frozenset(np.flatnonzero(~mask).tolist())
        self._lower = None
        self._upper = None

    @property
    def complementary_union_type(self) -> UnionType:
        return UnionType.AT_MOST if self.union_type is UnionType.AT_LEAST \
            else UnionType.AT_LEAST

    def _lower_approximation_of(self, union_type: UnionType,
                                objects: FrozenSet[int]) -> FrozenSet[int]:
        cone_type = _LOWER_APPROXIMATION_CONE[union_type]
        return frozenset(x for x in objects
                         if self.cones.get_cone(cone_type, x) <= objects)

    @property
    def lower_approximation(self) -> FrozenSet[int]:
        """Objects certainly belonging to the union."""
        if self._lower is None:
            self._lower = self._lower_approximation_of(self.union_type,
                                                       self.objects)
        return self._lower

    @property
    def upper_approximation(self) -> FrozenSet[int]:
        """Objects possibly belonging to the union."""
        if self._upper is None:
            complementary_lower = self._lower_approximation_of(
                self.complementary_union_type, self.complementary_objects)
            self._upper = frozenset(range(self.cones.n_objects)) \
                - complementary_lower
        return self._upper

    @property
    def boundary(self) -> FrozenSet[int]:
        """Objects possibly, but not certainly belonging to the union."""
        return self.upper_approximation - self.lower_approximation

    @property
    def accuracy(self) -> float:
        """`|lower| / |upper|`, or 0 for an empty upper approximation."""
        upper = self.upper_approximation
        return len(self.lower_approximation) / len(upper) if upper else 0.0

    @property
    def quality(self) -> float:
        """`|lower| / |union|`, or 0 for an empty union."""
        return len(self.lower_approximation) / len(self.objects) \
            if self.objects else 0.0

    def __repr__(self):
        return 'ClassUnion(%s, %r, %d objects)' % (
            self.union_type.name, self.limiting_decision, len(self.objects))


def make_unions(table: InformationTable,
                cones: Optional[DominanceCones] = None) -> List[ClassUnion]:
    """:return: All non-trivial upward and downward unions of the decision
        classes of `table`, i.e. `Cl>=t` for all but the worst and `Cl<=t` for
        all but the best class `t`.
    :param cones: Cones of `table`, created if None.
    """
    check_not_none(table, "Information table is null.")
    if table.decisions is None:
        raise ValueError("Information table has no decisions.")
    if cones is None:
        cones = DominanceCones(table)
    elif cones.table is not table:
        raise ValueError("Dominance cones belong to another table.")
    classes = np.unique(table.decisions)
    return [ClassUnion(UnionType.AT_LEAST, t, cones) for t in classes[1:]] \
        + [ClassUnion(UnionType.AT_MOST, t, cones) for t in classes[:-1]]


def quality_of_approximation(table: InformationTable,
                             cones: Optional[DominanceCones] = None) -> float:
    """:return: Share of objects in no boundary of any union, i.e. objects
        consistent with the dominance principle. 1 for an empty table.
    """
    check_not_none(table, "Information table is null.")
    if not table.n_objects:
        return 1.0
    inconsistent = set()
    for union in make_unions(table, cones):
        inconsistent |= union.boundary
    return 1 - len(inconsistent) / table.n_objects
