"""Service task count calculator."""

import logging

from .base import ScalingCalculator

logger = logging.getLogger(__name__)


class TaskCountCalculator(ScalingCalculator):
    """Computes the new desired task count of an ECS service."""

    def calculate(self, current_task_count: int) -> int:
        """
        Calculate the new desired task count for the service.

        Args:
            current_task_count: Tasks currently running for the service

        Returns:
            New desired task count, clamped at zero
        """
        new_count = self._apply_delta(current_task_count)

        self.logger.info(
            f"Service task count: current={current_task_count}, "
            f"delta={self.context.delta.raw or self.context.delta.magnitude}, "
            f"direction={self.context.direction.value}, new={new_count}"
        )

        return new_count
