from popularity.blender import blend, popularity_for, top_technologies
from popularity.table import BASELINE_POPULARITY

__all__ = ["BASELINE_POPULARITY", "blend", "popularity_for", "top_technologies"]
