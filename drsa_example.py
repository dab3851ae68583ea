# script building an information table from a small multi-criteria dataset
# with missing values and printing dominance cones and class approximations

import numpy as np

from sklearn_drsa.approximations import make_unions, quality_of_approximation
from sklearn_drsa.dominance import DominanceCones
from sklearn_drsa.fields import UnknownSimpleFieldMV15
from sklearn_drsa.table import InformationTable


# students evaluated on mathematics, physics (gain) and absences (cost),
# decision: overall class 1 (bad), 2 (medium), 3 (good)
X = np.array([[8, 7, 2],
              [6, 6, 5],
              [6, np.nan, 3],
              [4, 5, 10],
              [8, 8, 1],
              [4, 6, 4],
              [9, 8, np.nan]])
y = np.array([3, 2, 2, 1, 3, 2, 3])
feature_names = ['mathematics', 'physics', 'absences']

table = InformationTable.from_arrays(
    X, y, preference_types=['gain', 'gain', 'cost'],
    integer_attributes='all', missing_value_type=UnknownSimpleFieldMV15,
    attribute_names=feature_names)
cones = DominanceCones(table).calculate_all()

# print dominance cones
print("attributes: " + ', '.join(a.name for a in table.attributes))
print("# dominance cones #")
for x in range(table.n_objects):
    print("object {} {}: D+ = {}, D- = {}, InvD+ = {}".format(
        x, [str(f) for f in table.get_object(x)],
        sorted(cones.get_positive_d_cone(x)),
        sorted(cones.get_negative_d_cone(x)),
        sorted(cones.get_positive_inv_d_cone(x))))

print("\n# approximations #")
for union in make_unions(table, cones):
    print("{}: lower {}, upper {}, accuracy {:.2f}".format(
        union, sorted(union.lower_approximation),
        sorted(union.upper_approximation), union.accuracy))
print("quality of approximation: {:.2f}".format(
    quality_of_approximation(table, cones)))
