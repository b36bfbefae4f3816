"""Command-line interface for the ECS/ASG scaler."""

import argparse
import logging
import sys
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .config import Config, load_defaults, setup_logging
from .exceptions import ScalerError
from .models import Direction, ScalingRequest
from .report import format_report
from .scaler import CapacityScaler

logger = logging.getLogger(__name__)

REQUIRED_TARGETS = (
    ("asg", "Missing required parameter: --asg (EC2 Autoscaling group)"),
    ("service", "Missing required parameter: --service"),
    ("cluster", "Missing required parameter: --cluster"),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ecs-asg-scaler",
        description=(
            "Scale an ECS service up or down together with the EC2 Auto Scaling "
            "group that hosts it. With --dry-run, report capacity without "
            "executing any updates. ASG bounds are only moved in the scaling "
            "direction: if current capacity already covers the computed size "
            "it is left as is."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add 25% more tasks to the web service
  ecs-asg-scaler --up -c prod -s web -a prod-ecs-asg -d 25%

  # Preview removing 4 tasks
  ecs-asg-scaler --down -c prod -s web -a prod-ecs-asg -d 4 --dry-run
        """,
    )

    parser.add_argument("--up", dest="direction", action="store_const", const=Direction.UP,
                        help="Scale resources up. If both --up and --down are given, the latter is used")
    parser.add_argument("--down", dest="direction", action="store_const", const=Direction.DOWN,
                        help="Scale resources down. If both --up and --down are given, the latter is used")
    parser.add_argument("-a", "--asg", help="The autoscaling group for the EC2 cluster")
    parser.add_argument("-c", "--cluster", help="The ECS service cluster")
    parser.add_argument("-s", "--service", help="The ECS service name")
    parser.add_argument("-d", "--delta",
                        help="Amount to change ECS tasks by, eg. 20 or 25%%. "
                             "Negative values or decimals are not supported")
    parser.add_argument("--dry-run", action="store_true",
                        help="Reporting mode. Does not execute updates")
    parser.add_argument("--region", help="AWS region (default: AWS_REGION or us-east-1)")
    parser.add_argument("--config", default=Config.DEFAULTS_FILE or None,
                        help="YAML file with default region, cluster, service and asg")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scaler CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        defaults = load_defaults(args.config)
    except ScalerError as e:
        print(str(e), file=sys.stderr)
        return 1

    for key, value in defaults.items():
        if getattr(args, key) is None:
            setattr(args, key, value)

    if args.direction is None:
        parser.error("Missing --down or --up flag. We don't know which way to scale")
    if args.delta is None:
        parser.error("Missing --delta flag. We don't know how much to scale by")
    for key, message in REQUIRED_TARGETS:
        if not getattr(args, key):
            parser.error(message)

    request = ScalingRequest(
        cluster=args.cluster,
        service=args.service,
        pool=args.asg,
        direction=args.direction,
        delta=args.delta,
        dry_run=args.dry_run,
    )

    scaler = CapacityScaler(region=args.region or Config.AWS_REGION)

    try:
        report = scaler.run(request)
    except ScalerError as e:
        logger.error(f"Scaling aborted: {e}")
        print(str(e), file=sys.stderr)
        return 1
    except (ClientError, BotoCoreError) as e:
        logger.error(f"AWS request failed: {e}", exc_info=True)
        print(f"AWS request failed: {e}", file=sys.stderr)
        return 1

    print(format_report(report), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
