"""
Utility modules for filter schema generation.
"""

from .normalization import model_matches, normalize_list, normalize_model_label

__all__ = [
    "model_matches",
    "normalize_list",
    "normalize_model_label",
]
