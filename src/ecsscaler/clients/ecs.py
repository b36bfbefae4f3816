"""ECS service client."""

from typing import Optional, Dict, Any
import logging

import boto3
from botocore.exceptions import ClientError

from .base import ServiceClient

logger = logging.getLogger(__name__)


class EcsServiceClient(ServiceClient):
    """Service client backed by the boto3 ECS API."""

    def __init__(self, region: Optional[str] = None, client=None):
        super().__init__(region)
        self._client = client

    @property
    def client(self):
        """Get or create the boto3 ECS client."""
        if self._client is None:
            self._client = boto3.client("ecs", region_name=self.region)
        return self._client

    def _count_tasks(self, **params: Any) -> int:
        """Count running task ARNs across all list_tasks pages."""
        paginator = self.client.get_paginator("list_tasks")
        count = 0
        for page in paginator.paginate(desiredStatus="RUNNING", **params):
            count += len(page.get("taskArns", []))
        return count

    def get_service_task_count(self, cluster: str, service: str) -> int:
        """Count running tasks for an ECS service."""
        self.logger.info(f"Checking number of running tasks for service {cluster}/{service}")
        count = self._count_tasks(cluster=cluster, serviceName=service)
        self.logger.info(f"Service {cluster}/{service} has {count} running tasks")
        return count

    def get_cluster_task_count(self, cluster: str) -> int:
        """Count running tasks across an ECS cluster."""
        self.logger.info(f"Checking total number of running tasks in cluster {cluster}")
        count = self._count_tasks(cluster=cluster)
        self.logger.info(f"Cluster {cluster} has {count} running tasks")
        return count

    def update_desired_count(self, cluster: str, service: str, desired_count: int) -> bool:
        """
        Update the desired count of an ECS service.

        Args:
            cluster: ECS cluster
            service: ECS service name
            desired_count: New desired task count

        Returns:
            True if successful, False otherwise
        """
        try:
            response: Dict[str, Any] = self.client.update_service(
                cluster=cluster,
                service=service,
                desiredCount=desired_count,
            )
        except ClientError as e:
            self.logger.error(f"Failed to update service {cluster}/{service}: {e}")
            return False

        svc = response.get("service", {})
        self.logger.info(
            f"Updated desired count for {cluster}/{service} to {desired_count} "
            f"(running={svc.get('runningCount')}, pending={svc.get('pendingCount')})"
        )
        return True
