"""
Additional functionality, not needed to compute dominance cones or
approximations: plotting of dominance relations.
"""

import warnings
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure  # needed only for type hints

from sklearn_drsa.dominance import ConeType, DominanceCones


def plot_dominance_relation(cones: DominanceCones,
                            cone_type: ConeType = ConeType.POSITIVE_D,
                            *,
                            title: Optional[str] = None,
                            figure: Optional[Figure] = None,
                            sort_by_cone_size: bool = True,
                            ) -> Figure:
    """Plot the relation matrix `M[x, y] = y in cone(x)` of `cones`.

    :param cone_type: The cones to draw, see `DominanceCones.to_sparse`.
    :param title: string or None. If not None, set as axes title.
    :param figure: If None, use `plt.figure()` to create one, otherwise draw
      into this figure.
    :param sort_by_cone_size: If True, order objects by descending cone size,
      which makes chains of dominating objects visible as a staircase.
    :return: the figure.
    """
    matrix = cones.to_sparse(cone_type).toarray()
    if figure is None:
        figure = plt.figure()
    if not matrix.size:
        # issue a warning, user can decide handling. See module `warnings`
        warnings.warn("Empty information table, useless plot.")
        return figure
    order = np.arange(len(matrix))
    if sort_by_cone_size:
        order = np.argsort(-matrix.sum(axis=1), kind='stable')
    matrix = matrix[np.ix_(order, order)]

    axes = figure.add_subplot(1, 1, 1)
    axes.imshow(matrix.astype(float), cmap='Greys', interpolation='nearest',
                vmin=0, vmax=1)
    axes.set_xlabel('y')
    axes.set_ylabel('x')
    if len(order) <= 30:
        axes.set_xticks(np.arange(len(order)))
        axes.set_xticklabels(order)
        axes.set_yticks(np.arange(len(order)))
        axes.set_yticklabels(order)
    axes.set_title(title if title is not None
                   else 'y in %s(x)' % ConeType(cone_type).value)
    return figure
