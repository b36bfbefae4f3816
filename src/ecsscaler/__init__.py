"""Scale an ECS service together with the Auto Scaling group behind it."""

from .delta import resolve_delta
from .exceptions import (
    ConfigurationError,
    InvalidDeltaError,
    PoolNotFoundError,
    ScalerError,
    ScalingFailedError,
)
from .models import (
    Delta,
    DeltaKind,
    Direction,
    PoolBounds,
    ScalingContext,
    ScalingOutcome,
    ScalingReport,
    ScalingRequest,
)
from .scaler import CapacityScaler

__all__ = [
    "CapacityScaler",
    "ConfigurationError",
    "Delta",
    "DeltaKind",
    "Direction",
    "InvalidDeltaError",
    "PoolBounds",
    "PoolNotFoundError",
    "ScalerError",
    "ScalingContext",
    "ScalingFailedError",
    "ScalingOutcome",
    "ScalingReport",
    "ScalingRequest",
    "resolve_delta",
]
