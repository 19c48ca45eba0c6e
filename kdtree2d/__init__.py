"""
=====================================================
Nearest-neighbor search in the plane (:mod:`kdtree2d`)
=====================================================

.. currentmodule:: kdtree2d

Spatial index
=============

.. autosummary::
   :toctree: generated/

   KDTree2D      -- Balanced 2-d tree over a fixed set of points
   build         -- Build a `KDTree2D` from a collection of points
   find_nearest  -- Nearest indexed point to a target
   NearestResult -- Result of `KDTree2D.query`

Points
======

.. autosummary::
   :toctree: generated/

   Point            -- Immutable (x, y) coordinate pair
   squared_distance -- Squared Euclidean distance between two points

Exceptions
==========

.. autosummary::
   :toctree: generated/

   EmptyIndexError -- Query against an index built from zero points

"""
from ._point import Point, squared_distance
from ._kdtree import (KDTree2D, NearestResult, EmptyIndexError,
                      build, find_nearest)

__all__ = ['Point', 'squared_distance', 'KDTree2D', 'NearestResult',
           'EmptyIndexError', 'build', 'find_nearest']

__version__ = "0.1.0"
