"""Scaling calculators for the ECS/ASG scaler."""

from .base import ScalingCalculator, round_half_up_percent
from .task_count import TaskCountCalculator
from .pool_bounds import PoolBoundsCalculator, desired_pool_size

__all__ = [
    "ScalingCalculator",
    "TaskCountCalculator",
    "PoolBoundsCalculator",
    "desired_pool_size",
    "round_half_up_percent",
]
