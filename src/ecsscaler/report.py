"""Plain-text report of a scaling run."""

from typing import List

from .models import Direction, ScalingReport

DRY_RUN_BANNER = "\n".join(
    [
        "*******************************************",
        "*       EXECUTING IN DRY RUN MODE         ",
        "*******************************************",
    ]
)
NO_ADJUSTMENT_WARNING = (
    "** Warning! Current ASG capacity is sufficient and would not be updated **"
)


def format_report(report: ScalingReport) -> str:
    """
    Render a scaling report the way operators read it on a terminal.

    New ASG bounds are left out when the MinSize adjustment was skipped.
    """
    request = report.request
    outcome = report.outcome
    bounds = report.current_pool_bounds
    lines: List[str] = []

    if request.dry_run:
        lines += [DRY_RUN_BANNER, ""]
        updates_header = "New Values - (Updates not executed)"
    else:
        updates_header = "New Values:"

    if request.direction is Direction.UP:
        requested_op = f"Desired ECS task increase: {report.delta.raw}"
    else:
        requested_op = f"Desired ECS tasks decrease: {report.delta.raw}"

    lines += [
        "",
        "Current Values:",
        "==============================",
        f"- Target ECS Service: {request.service}",
        f"- Target ECS Cluster: {request.cluster}",
        f"- Target Autoscaling Group: {request.pool}",
        f"- Current ECS service task count: {report.current_service_task_count}",
        f"- Current ECS cluster total task count: {report.current_cluster_task_count}",
        f"- Current ASG MinSize: {bounds.min_size}",
        f"- Current ASG MaxSize: {bounds.max_size}",
        f"- Current ASG DesiredCapacity: {bounds.desired_capacity}",
        f"- {requested_op}",
    ]

    if outcome.adjustment_skipped:
        lines += ["", NO_ADJUSTMENT_WARNING]

    lines += [
        "",
        updates_header,
        "====================================",
        f"- New ECS service count: {outcome.new_service_task_count}",
    ]

    if not outcome.adjustment_skipped:
        new_bounds = outcome.new_pool_bounds
        lines += [
            f"- New ASG MinSize: {new_bounds.min_size}",
            f"- New ASG MaxSize: {new_bounds.max_size}",
            f"- New ASG Desired Capacity: {new_bounds.desired_capacity}",
        ]

    if not request.dry_run:
        lines += ["", "- Updates complete!"]

    lines.append("")
    return "\n".join(lines) + "\n"
