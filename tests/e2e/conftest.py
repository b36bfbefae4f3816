"""Pytest configuration for E2E tests."""

from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

REGION = "us-east-1"
ASG_NAME = "prod-ecs-asg"


@pytest.fixture
def aws():
    """Mocked AWS account for the duration of one test."""
    with mock_aws():
        yield


@pytest.fixture
def autoscaling_client(aws):
    """Auto Scaling client with an ECS capacity group of 3..10, desired 5."""
    ec2 = boto3.client("ec2", region_name=REGION)
    image_id = ec2.describe_images()["Images"][0]["ImageId"]

    client = boto3.client("autoscaling", region_name=REGION)
    client.create_launch_configuration(
        LaunchConfigurationName=f"{ASG_NAME}-lc",
        ImageId=image_id,
        InstanceType="t3.medium",
    )
    client.create_auto_scaling_group(
        AutoScalingGroupName=ASG_NAME,
        LaunchConfigurationName=f"{ASG_NAME}-lc",
        MinSize=3,
        MaxSize=10,
        DesiredCapacity=5,
        AvailabilityZones=[f"{REGION}a"],
    )
    return client


class FakeEcsCluster:
    """
    Stand-in for the ECS API.

    Keeps running task ARNs per service and starts or stops tasks as soon as
    the desired count of a service changes.
    """

    def __init__(self, tasks_per_service):
        self.tasks = {
            service: [self._arn(service, i) for i in range(count)]
            for service, count in tasks_per_service.items()
        }
        self.client = MagicMock()
        self.client.get_paginator.return_value.paginate.side_effect = self._paginate
        self.client.update_service.side_effect = self._update_service

    @staticmethod
    def _arn(service, index):
        return f"arn:aws:ecs:{REGION}:123456789012:task/prod/{service}-{index:08d}"

    def _paginate(self, cluster, desiredStatus, serviceName=None):
        if serviceName is not None:
            arns = list(self.tasks.get(serviceName, []))
        else:
            arns = [arn for service_arns in self.tasks.values() for arn in service_arns]
        # two tasks per page to exercise pagination
        return [{"taskArns": arns[i:i + 2]} for i in range(0, len(arns), 2)] or [{"taskArns": []}]

    def _update_service(self, cluster, service, desiredCount):
        self.tasks[service] = [self._arn(service, i) for i in range(desiredCount)]
        return {"service": {"runningCount": desiredCount, "pendingCount": 0}}


@pytest.fixture
def ecs_cluster():
    """Cluster running 4 web tasks and 6 worker tasks."""
    return FakeEcsCluster({"web": 4, "worker": 6})
