"""pytest fixtures for the test cases in this directory."""
from typing import Type

import pytest

from sklearn_drsa.dominance import ConeType, DominanceCones
from sklearn_drsa.fields import UnknownSimpleField, UnknownSimpleFieldMV15, \
    UnknownSimpleFieldMV2

from .datasets import random_table, single_gain_table


def format_cones(cones: DominanceCones) -> str:
    """:return: all (calculated) cones of `cones`, one object per line."""
    lines = []
    for x in range(cones.n_objects):
        if not cones.is_calculated(x):
            continue
        lines.append('%d: %s' % (x, ' '.join(
            '%s=%s' % (cone_type.value,
                       sorted(cones.get_cone(cone_type, x)))
            for cone_type in ConeType)))
    return '\n'.join(lines)


# pytest plugin, to print cones on test failure
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    default = yield
    report = default.get_result()
    if report.failed and report.user_properties:
        for name, prop in report.user_properties:
            if name == 'cones':
                report.longrepr.addsection(name, format_cones(prop))
                break
    return default


@pytest.fixture
def record_cones(record_property):
    def _record(cones: DominanceCones):
        record_property("cones", cones)
    return _record


@pytest.fixture(params=[UnknownSimpleFieldMV15, UnknownSimpleFieldMV2],
                ids=['mv1.5', 'mv2'])
def missing_value_type(request) -> Type[UnknownSimpleField]:
    """Fixture running for each of the missing value variants.

    :return: A missing value field class.
    """
    return request.param


@pytest.fixture
def gain_table():
    """Single gain attribute with values `[10, 20, 20]`."""
    return single_gain_table()


@pytest.fixture(params=[0.0, 0.3], ids=['complete', 'missing'])
def random_information_table(request):
    return random_table(missing_ratio=request.param)
