"""Feature compilers, one module per styling concern."""

from pagecraft.styles.features.registry import (
    FEATURES,
    FeatureCompiler,
    FeatureKey,
    lookup_feature,
    run_features,
)

__all__ = [
    "FEATURES",
    "FeatureCompiler",
    "FeatureKey",
    "lookup_feature",
    "run_features",
]
