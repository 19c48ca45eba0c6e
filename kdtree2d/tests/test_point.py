import numpy as np
import pytest
from numpy.testing import assert_equal

from kdtree2d import Point, squared_distance


class TestPoint:
    def test_defaults(self):
        assert Point() == Point(0, 0) == (0.0, 0.0)
        assert Point(3).y == 0

    def test_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_value_semantics(self):
        assert Point(1.5, -2) == Point(1.5, -2.0)
        assert Point(1, 2) != Point(2, 1)
        assert len({Point(1, 2), Point(1.0, 2.0)}) == 1
        assert_equal(np.asarray(Point(1, 2)), [1., 2.])


class TestSquaredDistance:
    @pytest.mark.parametrize('b, ref', [((5, 4), 2), ((2, 3), 20),
                                        ((9, 6), 10), ((4, 7), 8),
                                        ((8, 1), 20), ((7, 2), 10),
                                        ((6, 5), 0)])
    def test_values(self, b, ref):
        assert squared_distance(Point(6, 5), Point(*b)) == ref

    def test_symmetric(self):
        rng = np.random.default_rng(2346987234)
        a, b = rng.normal(size=(2, 2))
        assert squared_distance(a, b) == squared_distance(b, a)

    def test_mixed_inputs(self):
        # Points, tuples and arrays are interchangeable
        ref = squared_distance(Point(0, 0), Point(3, 4))
        assert ref == 25
        assert squared_distance((0, 0), np.array([3., 4.])) == ref
        assert squared_distance(np.zeros(2), Point(3, 4)) == ref

    def test_no_root_taken(self):
        assert squared_distance(Point(0, 0), Point(0, 3)) == 9
