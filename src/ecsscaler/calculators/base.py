"""Base calculator interface."""

import logging

from ..models import ScalingContext

logger = logging.getLogger(__name__)


def round_half_up_percent(count: int, percent: int) -> int:
    """
    Return ``count * percent / 100`` rounded half up, using integers only.

    Equivalent to ``floor(count * percent / 100 + 0.5)`` for non-negative
    inputs without going through floating point.
    """
    return (2 * count * percent + 100) // 200


class ScalingCalculator:
    """
    Base class for scaling calculators.

    Holds the run context and the delta arithmetic shared by the service and
    pool calculators. Each subclass exposes its own ``calculate`` entry point.
    """

    def __init__(self, context: ScalingContext):
        """
        Initialize the calculator.

        Args:
            context: Direction, delta and mode for the current run
        """
        self.context = context
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _change_amount(self, count: int) -> int:
        """
        Number of tasks the delta moves ``count`` by.

        Args:
            count: Task count the delta applies to

        Returns:
            Non-negative change amount
        """
        delta = self.context.delta

        if not delta.is_percentage:
            return delta.magnitude

        # A fraction of zero tasks is still zero, so move by at least one
        if count == 0:
            return 1

        return round_half_up_percent(count, delta.magnitude)

    def _apply_delta(self, count: int) -> int:
        """
        Move ``count`` by the delta in the context direction.

        Args:
            count: Current task count

        Returns:
            New task count, never below zero
        """
        change = self._change_amount(count)

        if self.context.is_scale_up:
            new_count = count + change
        else:
            new_count = count - change

        return max(0, new_count)
