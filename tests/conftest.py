"""Shared fixtures and fakes for scaler tests."""

import os
import sys
from typing import Dict, List, Optional, Tuple

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ecsscaler.clients import PoolClient, ServiceClient  # noqa: E402
from ecsscaler.exceptions import PoolNotFoundError  # noqa: E402
from ecsscaler.models import PoolBounds  # noqa: E402

# moto needs credentials and a region, never let tests reach real AWS
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: end-to-end tests against a mocked AWS account")


class FakeServiceClient(ServiceClient):
    """
    In-memory ECS service client.

    The cluster count grows or shrinks with every successful update, the way
    a real cluster would once the new tasks have started.
    """

    def __init__(self, service_count: int = 0, cluster_count: int = 0):
        super().__init__("us-east-1")
        self.service_count = service_count
        self.cluster_count = cluster_count
        self.updates: List[Tuple[str, str, int]] = []
        self.should_fail = False

    def get_service_task_count(self, cluster: str, service: str) -> int:
        return self.service_count

    def get_cluster_task_count(self, cluster: str) -> int:
        return self.cluster_count

    def update_desired_count(self, cluster: str, service: str, desired_count: int) -> bool:
        if self.should_fail:
            return False
        self.updates.append((cluster, service, desired_count))
        self.cluster_count += desired_count - self.service_count
        self.service_count = desired_count
        return True


class FakePoolClient(PoolClient):
    """In-memory Auto Scaling client."""

    def __init__(self, pools: Optional[Dict[str, PoolBounds]] = None):
        super().__init__("us-east-1")
        self.pools = pools or {}
        self.updates: List[Tuple[str, PoolBounds]] = []
        self.should_fail = False

    def get_pool_bounds(self, pool: str) -> PoolBounds:
        if pool not in self.pools:
            raise PoolNotFoundError(pool)
        return self.pools[pool]

    def update_pool_bounds(self, pool: str, bounds: PoolBounds) -> bool:
        if self.should_fail:
            return False
        self.updates.append((pool, bounds))
        self.pools[pool] = bounds
        return True


@pytest.fixture
def service_client():
    """ECS fake with 4 service tasks in a 10-task cluster."""
    return FakeServiceClient(service_count=4, cluster_count=10)


@pytest.fixture
def pool_client():
    """Auto Scaling fake with one group named prod-asg."""
    return FakePoolClient(
        {"prod-asg": PoolBounds(min_size=3, max_size=10, desired_capacity=5)}
    )
