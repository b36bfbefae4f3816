"""Scaling run orchestration for an ECS service and its Auto Scaling group."""

from typing import Optional
import logging

from .calculators import PoolBoundsCalculator, TaskCountCalculator
from .clients import (
    AutoScalingPoolClient,
    EcsServiceClient,
    PoolClient,
    ServiceClient,
)
from .delta import resolve_delta
from .exceptions import ScalingFailedError
from .models import ScalingContext, ScalingReport, ScalingRequest

logger = logging.getLogger(__name__)


class CapacityScaler:
    """
    Scales an ECS service and the Auto Scaling group that hosts it.

    A run works in this order:
    - Resolve the delta and validate the Auto Scaling group
    - Compute and apply the new service task count
    - Re-read the cluster task count and size the group to it

    In dry-run mode nothing is updated and the cluster task count is projected
    instead of re-read after the update.
    """

    def __init__(
        self,
        service_client: Optional[ServiceClient] = None,
        pool_client: Optional[PoolClient] = None,
        region: Optional[str] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.service_client = service_client or EcsServiceClient(region=region)
        self.pool_client = pool_client or AutoScalingPoolClient(region=region)

    def run(self, request: ScalingRequest) -> ScalingReport:
        """
        Execute one scaling request.

        Args:
            request: The operator's scaling request

        Returns:
            ScalingReport with current and new values

        Raises:
            InvalidDeltaError: If the delta expression is invalid
            PoolNotFoundError: If the Auto Scaling group does not exist
            ScalingFailedError: If an update request fails
        """
        context = ScalingContext(
            direction=request.direction,
            delta=resolve_delta(request.delta),
            dry_run=request.dry_run,
        )

        if context.dry_run:
            self.logger.info("Executing in dry run mode, no updates will be made")

        # Fail on a bad pool before anything has been changed
        current_bounds = self.pool_client.get_pool_bounds(request.pool)

        service_count = self.service_client.get_service_task_count(
            request.cluster, request.service
        )
        new_service_count = TaskCountCalculator(context).calculate(service_count)

        if not context.dry_run:
            self.logger.info(
                f"Updating desired count for {request.cluster}/{request.service}"
            )
            if not self.service_client.update_desired_count(
                request.cluster, request.service, new_service_count
            ):
                raise ScalingFailedError(
                    f"Failed to update desired count of service {request.service}"
                )

        cluster_count = self.service_client.get_cluster_task_count(request.cluster)
        outcome = PoolBoundsCalculator(context).calculate(cluster_count, current_bounds)
        outcome = outcome.model_copy(
            update={"new_service_task_count": new_service_count}
        )

        if not context.dry_run:
            if outcome.new_pool_bounds == current_bounds:
                self.logger.info(
                    f"Autoscaling group {request.pool} already at computed bounds"
                )
            else:
                self.logger.info(f"Scaling autoscaling group {request.pool}")
                if not self.pool_client.update_pool_bounds(
                    request.pool, outcome.new_pool_bounds
                ):
                    raise ScalingFailedError(
                        f"Failed to update autoscaling group {request.pool}"
                    )

        return ScalingReport(
            request=request,
            delta=context.delta,
            current_service_task_count=service_count,
            current_cluster_task_count=cluster_count,
            current_pool_bounds=current_bounds,
            outcome=outcome,
        )
