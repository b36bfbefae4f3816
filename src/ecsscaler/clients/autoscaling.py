"""EC2 Auto Scaling group client."""

from typing import Optional
import logging

import boto3
from botocore.exceptions import ClientError

from ..exceptions import PoolNotFoundError
from ..models import PoolBounds
from .base import PoolClient

logger = logging.getLogger(__name__)


class AutoScalingPoolClient(PoolClient):
    """Pool client backed by the boto3 Auto Scaling API."""

    def __init__(self, region: Optional[str] = None, client=None):
        super().__init__(region)
        self._client = client

    @property
    def client(self):
        """Get or create the boto3 Auto Scaling client."""
        if self._client is None:
            self._client = boto3.client("autoscaling", region_name=self.region)
        return self._client

    def get_pool_bounds(self, pool: str) -> PoolBounds:
        """
        Fetch MinSize, MaxSize and DesiredCapacity of an Auto Scaling group.

        Args:
            pool: Auto Scaling group name

        Returns:
            Current PoolBounds

        Raises:
            PoolNotFoundError: If no group with that name exists
        """
        self.logger.info(f"Validating autoscaling group {pool}")
        response = self.client.describe_auto_scaling_groups(
            AutoScalingGroupNames=[pool]
        )
        groups = response.get("AutoScalingGroups", [])
        if not groups:
            raise PoolNotFoundError(pool)

        group = groups[0]
        bounds = PoolBounds(
            min_size=group["MinSize"],
            max_size=group["MaxSize"],
            desired_capacity=group["DesiredCapacity"],
        )
        self.logger.info(
            f"Autoscaling group {pool}: MinSize={bounds.min_size}, "
            f"MaxSize={bounds.max_size}, DesiredCapacity={bounds.desired_capacity}"
        )
        return bounds

    def update_pool_bounds(self, pool: str, bounds: PoolBounds) -> bool:
        """
        Update MinSize, MaxSize and DesiredCapacity of an Auto Scaling group.

        Args:
            pool: Auto Scaling group name
            bounds: New bounds

        Returns:
            True if successful, False otherwise
        """
        try:
            self.client.update_auto_scaling_group(
                AutoScalingGroupName=pool,
                MinSize=bounds.min_size,
                MaxSize=bounds.max_size,
                DesiredCapacity=bounds.desired_capacity,
            )
        except ClientError as e:
            self.logger.error(f"Failed to scale autoscaling group {pool}: {e}")
            return False

        self.logger.info(
            f"Scaled autoscaling group {pool} to MinSize={bounds.min_size}, "
            f"MaxSize={bounds.max_size}, DesiredCapacity={bounds.desired_capacity}"
        )
        return True
