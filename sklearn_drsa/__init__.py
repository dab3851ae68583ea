"""Dominance-based Rough Set Approach (DRSA): evaluation fields, dominance
cones, and aggregation of evaluations.

Limitations / Assumptions
=====

- information tables are immutable, objects and attributes are addressed by
  dense zero-based indices
- decision classes are ordered by their labels, a higher label is better
- two missing value policies: MV1.5 (non-symmetric) and MV2 (symmetric)
- pair fields relate to missing values only through their components
- no rule induction, only the relations and aggregations it needs
- single-threaded, cones of one `DominanceCones` are written once each
"""

__all__ = ['approximations', 'calculator', 'conditions', 'dominance',
           'exceptions', 'extra', 'factory', 'fields', 'table', 'tests',
           'util']
