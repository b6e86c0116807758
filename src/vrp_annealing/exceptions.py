"""Error types raised by the loader and the annealing core."""


class InstanceError(ValueError):
    """The instance description is unreadable or malformed."""


class RouteInvariantError(RuntimeError):
    """A solution no longer covers every customer exactly once in non-empty routes."""
