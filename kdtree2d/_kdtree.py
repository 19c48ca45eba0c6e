from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from ._point import Point, squared_distance

if TYPE_CHECKING:
    import numpy.typing as npt
    from typing import Literal


__all__ = ['KDTree2D', 'NearestResult', 'EmptyIndexError',
           'build', 'find_nearest']

logger = logging.getLogger(__name__)

# Could add other policies; for instance, one that skips only the
# finiteness check.
_SKIP_ALL = "skip_all"


class EmptyIndexError(ValueError):
    """Raised when a nearest-neighbor query is made against an empty index."""


@dataclass
class NearestResult:
    point: Point
    index: int
    squared_distance: float


def _kdtree_iv(points, iv_policy):
    # NumPy does not consume iterators; generators of points are allowed
    if (isinstance(points, Iterable)
            and not isinstance(points, (np.ndarray, Sequence))):
        points = list(points)

    if iv_policy == _SKIP_ALL:
        return np.array(points, dtype=np.float64).reshape(-1, 2)

    message = ("`points` must be convertible to a real floating point array "
               "of shape `(n, 2)`.")
    try:
        data = np.array(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(message) from e

    # an empty sequence is allowed; it produces an empty index
    if data.size == 0 and data.ndim == 1:
        data = data.reshape(0, 2)
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError(message)

    if not np.all(np.isfinite(data)):
        message = ("`points` contains non-finite coordinates; results of "
                   "nearest-neighbor queries involving them are unspecified.")
        # user code -> `KDTree2D()` or `build()` -> `_build` -> here
        warnings.warn(message, RuntimeWarning, stacklevel=4)

    return data


def _target_iv(target, iv_policy):
    if iv_policy == _SKIP_ALL:
        return np.asarray(target, dtype=np.float64)

    message = ("`target` must be convertible to a real floating point array "
               "of shape `(2,)`.")
    try:
        target = np.asarray(target, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError(message) from e
    if target.shape != (2,):
        raise ValueError(message)
    return target


class KDTree2D:
    """Balanced 2-d tree for nearest-neighbor lookup in the plane.

    The tree is built once, by recursive median partition of the points
    alternating between the x axis (even depth) and the y axis (odd depth),
    and is read-only afterwards.

    Parameters
    ----------
    points : array_like of shape (n, 2)
        The points to index: an iterable of `Point` or of pairs, or a
        two-column array. The points are copied; the caller's sequence is
        never reordered. May be empty.
    iv_policy : {None, "skip_all"}, optional
        Specifies the level of input validation to perform. Left unspecified,
        the shapes of `points` and query targets are checked and a
        ``RuntimeWarning`` is emitted if `points` contains non-finite
        coordinates. Pass ``'skip_all'`` to avoid the overhead of these
        checks when rough edges are acceptable.

    Attributes
    ----------
    data : ndarray of shape (n, 2)
        Read-only copy of `points`, in the original order.
    n : int
        The number of points.
    depth : int
        The height of the tree: ``0`` when empty, ``1`` for a single point.

    Notes
    -----
    Nodes are stored as an arena. Node ``i`` holds ``data[i]``; its children
    are ``children[i] = (left, right)``, where ``-1`` means there is no child,
    and it splits on ``axis[i]``. Each node is chosen with
    `numpy.argpartition`, which places the median-rank point of the range
    without fully sorting it, so the tree is built in :math:`O(n \\log n)`
    expected time and has height :math:`\\lceil \\log_2 (n + 1) \\rceil`.

    Examples
    --------
    >>> from kdtree2d import KDTree2D, Point
    >>> tree = KDTree2D([(2, 3), (5, 4), (9, 6), (4, 7), (8, 1), (7, 2)])
    >>> tree.find_nearest(Point(6, 5))
    Point(x=5.0, y=4.0)

    """
    def __init__(self, points, *, iv_policy=None):
        self._build(points, iv_policy)

    def _build(self, points, iv_policy):
        # Called directly by both public entry points, `__init__` and
        # `build`, so that warnings point at the user's frame.
        self.iv_policy = iv_policy
        self.data = _kdtree_iv(points, self.iv_policy)
        self.n = len(self.data)
        self.children = np.full((self.n, 2), -1)
        self.axis = np.full(self.n, -1)
        self.depth = 0
        self.root = self._construct(np.arange(self.n), 0)

        for array in (self.data, self.children, self.axis):
            array.flags.writeable = False

        logger.debug("Built KDTree2D with %d points and depth %d.",
                     self.n, self.depth)

    @property
    def iv_policy(self):
        """{None, "skip_all"}:
        Specifies the level of input validation to perform.
        """
        return self._iv_policy

    @iv_policy.setter
    def iv_policy(self, iv_policy):
        iv_policy = str(iv_policy).lower() if iv_policy is not None else None
        iv_policies = {None, _SKIP_ALL}
        if iv_policy not in iv_policies:
            message = (f"Attribute `iv_policy` of `{self.__class__.__name__}` "
                       f"must be one of {iv_policies}, if specified.")
            raise ValueError(message)
        self._iv_policy = iv_policy

    def _construct(self, indices, level):
        n = len(indices)
        if n == 0:
            return -1

        self.depth = max(self.depth, level + 1)
        axis = level % 2
        if n == 1:
            node = indices[0]
            self.axis[node] = axis
            return node

        i = n // 2
        indices = indices[np.argpartition(self.data[indices, axis], i)]

        node = indices[i]
        self.axis[node] = axis

        # construct children
        next_level = level + 1
        left = self._construct(indices[:i], next_level)
        right = self._construct(indices[i + 1:], next_level)
        self.children[node] = left, right

        return node

    def __len__(self):
        return self.n

    def __repr__(self):
        return f"{self.__class__.__name__}(n={self.n}, depth={self.depth})"

    def query(self, target: npt.ArrayLike) -> NearestResult:
        """Find the indexed point closest to `target`.

        Parameters
        ----------
        target : Point or array_like of shape (2,)
            The query point.

        Returns
        -------
        res : NearestResult
            An object with attributes:

            point : Point
                An indexed point at minimum distance from `target`. When
                several points are equally close, the first one found by
                the search is returned.
            index : int
                The position of `point` in the sequence the tree was built
                from.
            squared_distance : float
                The squared Euclidean distance between `point` and `target`.

        Raises
        ------
        EmptyIndexError
            If the tree was built from zero points.

        """
        target = _target_iv(target, self.iv_policy)

        if self.root == -1:
            logger.debug("Nearest-neighbor query against an empty index.")
            message = (f"Cannot query an empty `{self.__class__.__name__}`; "
                       "it was built from zero points.")
            raise EmptyIndexError(message)

        node, distance = self._nearest_neighbor(target, self.root, -1, np.inf)
        if node == -1:
            # Only possible when every distance compared is NaN.
            node, distance = self.root, np.nan

        return NearestResult(point=Point(*self.data[node].tolist()),
                             index=int(node),
                             squared_distance=float(distance))

    def find_nearest(self, target: npt.ArrayLike) -> Point:
        """Return the indexed point closest to `target`.

        Equivalent to ``self.query(target).point``; see `query`.
        """
        return self.query(target).point

    def _nearest_neighbor(self, target, node, best_node, best_distance):
        if node == -1:
            return best_node, best_distance

        # Distance to current node
        this_distance = squared_distance(target, self.data[node])
        if this_distance < best_distance:
            best_node, best_distance = node, this_distance

        axis = self.axis[node]
        splitting_plane_distance = target[axis] - self.data[node, axis]
        if splitting_plane_distance <= 0:
            near, far = self.children[node]
        else:
            far, near = self.children[node]

        # Closest near-side node
        best_node, best_distance = self._nearest_neighbor(
            target, near, best_node, best_distance)

        # Closest far-side node, if the splitting plane is near enough
        if splitting_plane_distance**2 < best_distance:
            best_node, best_distance = self._nearest_neighbor(
                target, far, best_node, best_distance)

        return best_node, best_distance


def build(points: npt.ArrayLike, *,
          iv_policy: Literal['skip_all'] | None = None) -> KDTree2D:
    """Build a `KDTree2D` from a collection of points.

    The points are copied; `points` itself is left in its original order.
    See `KDTree2D` for a description of the parameters.
    """
    tree = KDTree2D.__new__(KDTree2D)
    tree._build(points, iv_policy)
    return tree


def find_nearest(index: KDTree2D, target: npt.ArrayLike) -> Point:
    """Return the point in `index` closest to `target`.

    Raises
    ------
    EmptyIndexError
        If `index` was built from zero points.

    """
    return index.find_nearest(target)
