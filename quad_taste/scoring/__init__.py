"""Profile aggregation, category metrics and style labels."""
from .classifier import classify_style, classify_tradition, CONTEMPORARY, TRANSITIONAL, TRADITIONAL
from .profile import TasteProfile
from .aggregator import ProfileAggregator
from .metrics import (
    CategoryMetrics,
    OverallMetrics,
    CategoryMetricDeriver,
    normalize_code,
)

__all__ = [
    "classify_style",
    "classify_tradition",
    "CONTEMPORARY",
    "TRANSITIONAL",
    "TRADITIONAL",
    "TasteProfile",
    "ProfileAggregator",
    "CategoryMetrics",
    "OverallMetrics",
    "CategoryMetricDeriver",
    "normalize_code",
]
