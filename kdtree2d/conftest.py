import os

from hypothesis import settings

# Property tests build a fresh tree for every example.
settings.register_profile("kdtree2d", max_examples=100, deadline=None)
settings.register_profile("thorough", max_examples=1000, deadline=None)
settings.load_profile(os.environ.get("KDTREE2D_HYPOTHESIS_PROFILE", "kdtree2d"))
