"""Unit tests for report rendering."""

from ecsscaler.delta import resolve_delta
from ecsscaler.models import (
    Direction,
    PoolBounds,
    ScalingOutcome,
    ScalingReport,
    ScalingRequest,
)
from ecsscaler.report import DRY_RUN_BANNER, NO_ADJUSTMENT_WARNING, format_report


def make_report(direction=Direction.UP, delta="25%", dry_run=False, skipped=False):
    request = ScalingRequest(
        cluster="prod",
        service="web",
        pool="prod-asg",
        direction=direction,
        delta=delta,
        dry_run=dry_run,
    )
    return ScalingReport(
        request=request,
        delta=resolve_delta(delta),
        current_service_task_count=4,
        current_cluster_task_count=10,
        current_pool_bounds=PoolBounds(min_size=3, max_size=10, desired_capacity=5),
        outcome=ScalingOutcome(
            new_service_task_count=5,
            new_pool_bounds=PoolBounds(min_size=6, max_size=10, desired_capacity=6),
            adjustment_skipped=skipped,
        ),
    )


class TestFormatReport:
    """Tests for format_report."""

    def test_current_values(self):
        """Test that targets and current values are listed."""
        text = format_report(make_report())

        assert "Current Values:" in text
        assert "- Target ECS Service: web" in text
        assert "- Target ECS Cluster: prod" in text
        assert "- Target Autoscaling Group: prod-asg" in text
        assert "- Current ECS service task count: 4" in text
        assert "- Current ECS cluster total task count: 10" in text
        assert "- Current ASG MinSize: 3" in text
        assert "- Current ASG MaxSize: 10" in text
        assert "- Current ASG DesiredCapacity: 5" in text

    def test_requested_operation(self):
        """Test the requested increase/decrease line."""
        assert "- Desired ECS task increase: 25%" in format_report(make_report())
        assert "- Desired ECS tasks decrease: 3" in format_report(
            make_report(Direction.DOWN, "3")
        )

    def test_new_values_after_update(self):
        """Test new values and the completion line outside dry-run."""
        text = format_report(make_report())

        assert "New Values:" in text
        assert "- New ECS service count: 5" in text
        assert "- New ASG MinSize: 6" in text
        assert "- New ASG MaxSize: 10" in text
        assert "- New ASG Desired Capacity: 6" in text
        assert "- Updates complete!" in text
        assert DRY_RUN_BANNER not in text
        assert NO_ADJUSTMENT_WARNING not in text

    def test_dry_run(self):
        """Test the dry-run banner and header."""
        text = format_report(make_report(dry_run=True))

        assert text.startswith(DRY_RUN_BANNER)
        assert "New Values - (Updates not executed)" in text
        assert "Updates complete!" not in text

    def test_skipped_adjustment_hides_new_bounds(self):
        """Test that a skipped adjustment warns and hides every new ASG bound."""
        text = format_report(make_report(skipped=True))

        assert NO_ADJUSTMENT_WARNING in text
        assert "- New ECS service count: 5" in text
        assert "New ASG" not in text

    def test_blank_line_before_current_values(self):
        """Test that the current values block is preceded by a blank line."""
        assert format_report(make_report()).startswith("\nCurrent Values:\n")

        dry_run_text = format_report(make_report(dry_run=True))
        assert dry_run_text.startswith(DRY_RUN_BANNER + "\n\n\nCurrent Values:\n")

    def test_report_ends_with_blank_line(self):
        """Test that the report finishes with an empty line in every mode."""
        assert format_report(make_report()).endswith("- Updates complete!\n\n")
        assert format_report(make_report(dry_run=True)).endswith(
            "- New ASG Desired Capacity: 6\n\n"
        )
        assert format_report(make_report(dry_run=True, skipped=True)).endswith(
            "- New ECS service count: 5\n\n"
        )
