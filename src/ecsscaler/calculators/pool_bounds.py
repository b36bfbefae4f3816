"""Auto Scaling group bounds calculator."""

import logging

from ..config import Config
from ..models import PoolBounds, ScalingOutcome
from .base import ScalingCalculator

logger = logging.getLogger(__name__)


def desired_pool_size(task_count: int) -> int:
    """
    Pool size needed to host ``task_count`` tasks.

    Integer division would turn a single task into a pool of zero,
    so one task always gets one instance.
    """
    if task_count == 1:
        return 1
    return task_count // Config.TASKS_PER_INSTANCE


class PoolBoundsCalculator(ScalingCalculator):
    """
    Computes new MinSize, MaxSize and DesiredCapacity for the pool.

    Scaling up only ever raises a bound and scaling down only ever lowers
    one. Each bound is compared to the desired pool size on its own; only the
    MinSize comparison decides whether the adjustment counts as skipped.
    """

    def project_task_count(self, cluster_task_count: int) -> int:
        """
        Cluster task count after the service update.

        In dry-run the service is never updated, so the delta is applied
        to the observed count to get what the cluster would have run.
        Otherwise the caller has already re-read the real count.

        Args:
            cluster_task_count: Tasks currently running in the cluster

        Returns:
            Task count the pool should be sized for
        """
        if not self.context.dry_run:
            return cluster_task_count

        projected = self._apply_delta(cluster_task_count)
        self.logger.info(
            f"Dry run: projecting cluster task count {cluster_task_count} "
            f"to {projected}"
        )
        return projected

    def calculate(self, cluster_task_count: int, bounds: PoolBounds) -> ScalingOutcome:
        """
        Calculate new pool bounds for the cluster task count.

        Args:
            cluster_task_count: Tasks running in the whole cluster
            bounds: Current pool bounds

        Returns:
            ScalingOutcome without the service task count
        """
        task_count = self.project_task_count(cluster_task_count)
        desired = desired_pool_size(task_count)

        def adjust(bound: int) -> bool:
            if self.context.is_scale_up:
                return desired > bound
            return desired < bound

        adjustment_skipped = not adjust(bounds.min_size)
        new_bounds = PoolBounds(
            min_size=bounds.min_size if adjustment_skipped else desired,
            max_size=desired if adjust(bounds.max_size) else bounds.max_size,
            desired_capacity=(
                desired if adjust(bounds.desired_capacity) else bounds.desired_capacity
            ),
        )

        if adjustment_skipped:
            self.logger.warning(
                f"Current pool capacity is sufficient: desired size {desired} "
                f"does not move MinSize {bounds.min_size} "
                f"{self.context.direction.value}"
            )

        self.logger.info(
            f"Pool bounds: tasks={task_count}, desired_size={desired}, "
            f"min {bounds.min_size}->{new_bounds.min_size}, "
            f"max {bounds.max_size}->{new_bounds.max_size}, "
            f"desired {bounds.desired_capacity}->{new_bounds.desired_capacity}"
        )

        return ScalingOutcome(
            new_pool_bounds=new_bounds,
            adjustment_skipped=adjustment_skipped,
        )
