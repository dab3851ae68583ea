"""Artificial information tables for the sklearn_drsa unittests."""

import numpy as np
from sklearn.utils import check_random_state

from sklearn_drsa.fields import FieldKind, ElementList, IntegerField, \
    RealField, EnumerationField, PairField, UnknownSimpleFieldMV15
from sklearn_drsa.table import EvaluationAttribute, InformationTable

QUALITY = ElementList(['bad', 'medium', 'good', 'excellent'])


def single_gain_table(values=(10, 20, 20), decisions=None):
    """One integer gain attribute, one object per value."""
    attribute = EvaluationAttribute('a1', 'gain', FieldKind.INTEGER)
    return InformationTable([attribute],
                            [[IntegerField(v, 'gain')] for v in values],
                            decisions)


def missing_value_table(missing_value_type=UnknownSimpleFieldMV15):
    """One integer gain attribute with values `[10, ?, 20]`."""
    attribute = EvaluationAttribute('a1', 'gain', FieldKind.INTEGER,
                                    missing_value_type=missing_value_type)
    return InformationTable([attribute],
                            [[IntegerField(10)],
                             [missing_value_type()],
                             [IntegerField(20)]],
                            decisions=[1, 2, 2])


def mixed_table():
    """All kinds of attributes, incl. an inactive one and missing values.

    Object 1 dominates object 0, object 2 is missing values.
    """
    attributes = [
        EvaluationAttribute('price', 'cost', FieldKind.REAL),
        EvaluationAttribute('quality', 'gain', FieldKind.ENUMERATION,
                            element_list=QUALITY),
        EvaluationAttribute('rooms', 'gain', FieldKind.INTEGER),
        EvaluationAttribute('area', 'gain', FieldKind.PAIR,
                            component_kind=FieldKind.INTEGER),
        EvaluationAttribute('colour', 'none', FieldKind.INTEGER),
        EvaluationAttribute('id', 'none', FieldKind.INTEGER, active=False),
    ]

    def row(price, quality, rooms, area, colour, id_):
        return [RealField(price, 'cost') if price is not None
                else UnknownSimpleFieldMV15(),
                EnumerationField(QUALITY, QUALITY.index(quality), 'gain')
                if quality is not None else UnknownSimpleFieldMV15(),
                IntegerField(rooms, 'gain'),
                PairField(IntegerField(area[0]), IntegerField(area[1])),
                IntegerField(colour, 'none'),
                IntegerField(id_, 'none')]

    rows = [row(250.0, 'medium', 3, (60, 70), 1, 100),
            row(200.0, 'good', 4, (70, 80), 1, 101),
            row(None, None, 2, (50, 60), 1, 102),
            row(150.0, 'excellent', 5, (90, 95), 2, 103)]
    return InformationTable(attributes, rows, decisions=[1, 2, 1, 3])


def random_table(n_objects=25, n_attributes=3, missing_ratio=0.0,
                 n_classes=3, random=None):
    """Small integer valued table with random preference types and missing
    values, for property tests.
    """
    if random is None:
        random = check_random_state(7)
    X = random.randint(0, 4, size=(n_objects, n_attributes)).astype(float)
    X[random.random_sample(X.shape) < missing_ratio] = np.nan
    y = random.randint(0, n_classes, size=n_objects)
    preference_types = random.choice(['gain', 'cost'], size=n_attributes)
    return InformationTable.from_arrays(X, y,
                                        preference_types=preference_types,
                                        integer_attributes='all')
