"""Exceptions raised by the scaler."""


class ScalerError(Exception):
    """Base class for all scaler errors."""


class InvalidDeltaError(ScalerError):
    """The delta expression is not a whole number, optionally ending in '%'."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"The delta value you provided was not numeric: {value!r}. "
            "Valid examples are 24 or 25%"
        )


class PoolNotFoundError(ScalerError):
    """The named Auto Scaling group does not exist or is inactive."""

    def __init__(self, pool: str):
        self.pool = pool
        super().__init__(f"Autoscaling group {pool} is either invalid or inactive")


class ConfigurationError(ScalerError):
    """Operator configuration is missing or malformed."""


class ScalingFailedError(ScalerError):
    """A mutating request to ECS or Auto Scaling did not succeed."""
