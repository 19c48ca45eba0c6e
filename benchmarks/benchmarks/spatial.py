import numpy as np
from .common import Benchmark, safe_import

with safe_import():
    from kdtree2d import KDTree2D, build


class Build(Benchmark):
    param_names = ['n', 'layout']
    params = [
        [100, 1000, 10000],
        ['uniform', 'clustered', 'grid']
    ]

    def setup(self, n, layout):
        rng = np.random.default_rng(12345678)
        if layout == 'uniform':
            self.points = rng.uniform(size=(n, 2))
        elif layout == 'clustered':
            centers = rng.uniform(size=(10, 2))
            self.points = (centers[rng.integers(10, size=n)]
                           + rng.normal(scale=0.01, size=(n, 2)))
        else:
            # many duplicate coordinates on both axes
            side = int(np.ceil(np.sqrt(n)))
            self.points = rng.integers(side, size=(n, 2)).astype(float)

    def time_build(self, n, layout):
        build(self.points)

    def time_build_skip_iv(self, n, layout):
        build(self.points, iv_policy='skip_all')

    def peakmem_build(self, n, layout):
        build(self.points)


class FindNearest(Benchmark):
    param_names = ['n']
    params = [
        [100, 1000, 10000]
    ]

    def setup(self, n):
        rng = np.random.default_rng(12345678)
        self.points = rng.uniform(size=(n, 2))
        self.targets = rng.uniform(-0.1, 1.1, size=(100, 2))
        self.tree = KDTree2D(self.points)

    def time_find_nearest(self, n):
        for target in self.targets:
            self.tree.find_nearest(target)

    def time_brute_force(self, n):
        # baseline: linear scan over all points
        for target in self.targets:
            d = self.points - target
            np.argmin(np.einsum('ij,ij->i', d, d))

    def track_depth(self, n):
        return self.tree.depth
