"""Control-plane clients for the ECS/ASG scaler."""

from .base import ServiceClient, PoolClient
from .ecs import EcsServiceClient
from .autoscaling import AutoScalingPoolClient

__all__ = [
    "ServiceClient",
    "PoolClient",
    "EcsServiceClient",
    "AutoScalingPoolClient",
]
