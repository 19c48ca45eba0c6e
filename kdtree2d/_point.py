from typing import NamedTuple, Sequence

__all__ = ['Point', 'squared_distance']


class Point(NamedTuple):
    """A point in the plane.

    Instances are immutable and compare equal when their coordinates do.

    Parameters
    ----------
    x, y : float, optional
        The coordinates of the point. Default is the origin.

    """
    x: float = 0.0
    y: float = 0.0


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared Euclidean distance between two points.

    The square root is never taken; the ordering of distances is unchanged,
    so squared distances can be compared against one another directly.

    Parameters
    ----------
    a, b : Point or length-2 sequence of float
        The points. Only the first two elements are used.

    Returns
    -------
    float
        ``(a[0] - b[0])**2 + (a[1] - b[1])**2``

    Examples
    --------
    >>> from kdtree2d import Point, squared_distance
    >>> squared_distance(Point(6, 5), Point(5, 4))
    2

    """
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy
