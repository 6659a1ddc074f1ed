from subscriptions.domain.features import (
    FeatureRow,
    FeatureType,
    clean_benefits,
    decode_features,
    encode_features,
)
from subscriptions.domain.models import Plan, PlanCommand

__all__ = [
    "FeatureRow",
    "FeatureType",
    "clean_benefits",
    "decode_features",
    "encode_features",
    "Plan",
    "PlanCommand",
]
