"""
Measure & plot runtime of the dominance cone computation with various object
and attribute counts.
"""

import sys
import time
import timeit
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np


def time_cones(table_args: str, eager: bool) -> Optional[Sequence[float]]:
    setup = ';\n'.join((
        "import sklearn_drsa; from sklearn_drsa.tests import datasets",
        "from sklearn_drsa.dominance import DominanceCones",
        "table = datasets.random_table(%s)" % table_args))
    if eager:
        stmt = "DominanceCones(table).calculate_all()"
    else:
        stmt = "cones = DominanceCones(table)\n" \
               "for x in range(table.n_objects): cones.get_positive_d_cone(x)"
    timer = timeit.Timer(stmt, setup)
    try:
        ti_number, raw_autorange_timing = timer.autorange()
        raw_timings = timer.repeat(number=ti_number) + [raw_autorange_timing]
    except ValueError:
        return None
    return sorted(timing / ti_number for timing in raw_timings)


def n_objects_gen(max=np.inf) -> Iterable[int]:
    mg = 1
    while mg * 50 < max:
        for t in (10, 20, 50):
            yield t * mg
        mg *= 10


def timing_for_param(eager: bool, missing_ratio: float,
                     max_objects: int = 1000) -> Iterable:
    for n_objects in n_objects_gen(max_objects):
        for n_attributes in (1, 2, 4, 8, 16):
            argstr = "n_objects=%d, n_attributes=%d, missing_ratio=%f" \
                     % (n_objects, n_attributes, missing_ratio)
            timings = time_cones(argstr, eager)
            if timings:
                yield n_objects, n_attributes, timings


def plot_timings(timings, title=None, figure=None):
    if figure is None:
        figure: plt.Figure = plt.figure()
    axes = figure.add_subplot(1, 1, 1)
    axes.set_xlabel('n_objects')
    axes.set_ylabel('time[s]')
    if title is not None:
        axes.set_title(title)
    n_objects = timings.T[0]
    n_attributes = timings.T[1]
    tm_min = timings.T[2]
    for n in np.unique(n_attributes):
        mask = n_attributes == n
        axes.loglog(n_objects[mask], tm_min[mask], '.-', label=str(int(n)))
    axes.legend(title='n_attributes')
    axes.grid(True)
    figure.tight_layout()
    return figure


def log(message):
    print("%s %s" % (time.strftime('%Y-%m-%dT%H:%M:%S%z'), message),
          file=sys.stderr)


if __name__ == "__main__":
    eager = 'eager' in sys.argv[1:]
    missing_ratio = 0.1 if 'missing' in sys.argv[1:] else 0.0

    mode = 'calculate_all' if eager else 'lazy'
    log("start timing of %s cones" % mode)
    print("n_objects, n_attributes, timings...")
    all_timings = []
    try:
        for n_objects, n_attributes, timings in timing_for_param(
                eager, missing_ratio):
            onelist = [n_objects, n_attributes] + timings
            all_timings.append(onelist)
            print('[' + ",".join([str(x) for x in onelist]) + '],')
    except KeyboardInterrupt:
        pass
    log("stop timing of %s cones, got %d timings" % (mode, len(all_timings)))
    if all_timings:
        log("plotting")
        plot_timings(np.array(all_timings),
                     'runtime of %s cones' % mode).show()

    input('Press any key to exit.')
