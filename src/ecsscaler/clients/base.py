"""Base control-plane client interfaces."""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from ..models import PoolBounds

logger = logging.getLogger(__name__)


class ServiceClient(ABC):
    """Abstract base class for the container service control plane."""

    def __init__(self, region: Optional[str] = None):
        """
        Initialize the service client.

        Args:
            region: Cloud region to talk to
        """
        self.region = region
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def get_service_task_count(self, cluster: str, service: str) -> int:
        """
        Count the running tasks of one service.

        Args:
            cluster: Cluster name or ARN
            service: Service name

        Returns:
            Number of running tasks
        """
        pass

    @abstractmethod
    def get_cluster_task_count(self, cluster: str) -> int:
        """
        Count the running tasks of the whole cluster.

        Args:
            cluster: Cluster name or ARN

        Returns:
            Number of running tasks
        """
        pass

    @abstractmethod
    def update_desired_count(self, cluster: str, service: str, desired_count: int) -> bool:
        """
        Set the desired task count of a service.

        Returns:
            True if successful, False otherwise
        """
        pass


class PoolClient(ABC):
    """Abstract base class for the worker pool control plane."""

    def __init__(self, region: Optional[str] = None):
        self.region = region
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def get_pool_bounds(self, pool: str) -> PoolBounds:
        """
        Fetch the current bounds of a pool.

        Args:
            pool: Pool name

        Returns:
            Current PoolBounds

        Raises:
            PoolNotFoundError: If the pool does not exist
        """
        pass

    @abstractmethod
    def update_pool_bounds(self, pool: str, bounds: PoolBounds) -> bool:
        """
        Apply new bounds to a pool.

        Returns:
            True if successful, False otherwise
        """
        pass
