"""Value objects passed between the scaler components."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Which way to scale."""

    UP = "up"
    DOWN = "down"


class DeltaKind(str, Enum):
    """How a delta magnitude is interpreted."""

    ABSOLUTE = "absolute"
    PERCENTAGE = "percentage"


class Delta(BaseModel):
    """A resolved scaling amount."""

    model_config = ConfigDict(frozen=True)

    magnitude: int = Field(ge=0)
    kind: DeltaKind
    raw: str = ""

    @property
    def is_percentage(self) -> bool:
        return self.kind is DeltaKind.PERCENTAGE


class PoolBounds(BaseModel):
    """MinSize, MaxSize and DesiredCapacity of an Auto Scaling group."""

    model_config = ConfigDict(frozen=True)

    min_size: int = Field(ge=0)
    max_size: int = Field(ge=0)
    desired_capacity: int = Field(ge=0)


class ScalingContext(BaseModel):
    """Direction, delta and mode shared by both calculators for one run."""

    model_config = ConfigDict(frozen=True)

    direction: Direction
    delta: Delta
    dry_run: bool = False

    @property
    def is_scale_up(self) -> bool:
        return self.direction is Direction.UP


class ScalingOutcome(BaseModel):
    """Computed result of a scaling run."""

    model_config = ConfigDict(frozen=True)

    new_service_task_count: Optional[int] = Field(default=None, ge=0)
    new_pool_bounds: PoolBounds
    adjustment_skipped: bool = False


class ScalingRequest(BaseModel):
    """An operator's scaling request."""

    model_config = ConfigDict(frozen=True)

    cluster: str = Field(min_length=1)
    service: str = Field(min_length=1)
    pool: str = Field(min_length=1)
    direction: Direction
    delta: str
    dry_run: bool = False


class ScalingReport(BaseModel):
    """Everything the report renderer needs about a finished run."""

    model_config = ConfigDict(frozen=True)

    request: ScalingRequest
    delta: Delta
    current_service_task_count: int
    current_cluster_task_count: int
    current_pool_bounds: PoolBounds
    outcome: ScalingOutcome
