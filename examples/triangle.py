"""Higher order maps over triangle primitives.

The corners of a triangle are given by a point-function of a
*continuous* index: 0, 1 and 2 are the corners and values in between
move smoothly along the circumscribed circle.  Geometric primitives are
then just nested lists of indices:

- triangle surface: ``[0.0, 1.0, 2.0]``
- triangle edge: ``[0.0, 1.0]``
- triangle corner: ``[[0.0, 1.0], [1.0, 2.0]]``

``hmap`` evaluates a function at every index while keeping the nesting,
so a corner maps to a corner of points.  Rotating the triangle is a
function from indices to indices, and ``hpair`` lines up a primitive
with its rotated copy so the two can be interpolated.
"""

import math

from hopoint.algebra import TAU, k
from hopoint.call import hmap, hpair
from hopoint.func import Func
from hopoint.point import PointFunc
from hopoint.shape import SCALAR, pair


def show(title, values, coords):
    print(f"{title} {values}:")
    for c in coords:
        print(f"\t{c}")


def main():
    p = PointFunc(Func(lambda i: math.cos(i / 3.0 * TAU), SCALAR),
                  Func(lambda i: math.sin(i / 3.0 * TAU), SCALAR),
                  k(0.0))
    rotate = Func(lambda i: (i + 1.0) % 3.0, SCALAR)

    def halfway(ab):
        a, b = ab
        # rotate the same direction for all points
        if b < a:
            b += 3.0
        return (a + (b - a) * 0.5) % 3.0

    in_between = Func(halfway, pair(SCALAR, SCALAR))

    triangle = [0.0, 1.0, 2.0]
    edge = [0.0, 1.0]
    corner = [[0.0, 1.0], [1.0, 2.0]]

    print(f"triangle {triangle}")
    print(f"\txs: {hmap(triangle, p.x)}")
    print(f"\tys: {hmap(triangle, p.y)}")
    print(f"\tzs: {hmap(triangle, p.z)}")
    show("triangle coords", triangle, hmap(triangle, p))
    rotated_triangle = hmap(triangle, rotate)
    show("rotated triangle coords", rotated_triangle, hmap(rotated_triangle, p))

    show("edge coords", edge, hmap(edge, p))
    rotated_edge = hmap(edge, rotate)
    show("rotated edge coords", rotated_edge, hmap(rotated_edge, p))

    print(f"corner {corner}")
    print(f"\txs: {hmap(corner, p.x)}")
    corner_coords = hmap(corner, p)
    show("corner coords", corner, corner_coords)
    rotated_corner = hmap(corner, rotate)
    show("rotated corner coords", rotated_corner, hmap(rotated_corner, p))

    in_between_edge = hmap(hpair(edge, rotated_edge), in_between)
    show("in-between rotated edge coords", in_between_edge, hmap(in_between_edge, p))
    in_between_corner = hmap(hpair(corner, rotated_corner), in_between)
    show("in-between rotated corner coords", in_between_corner,
         hmap(in_between_corner, p))


if __name__ == "__main__":
    main()
