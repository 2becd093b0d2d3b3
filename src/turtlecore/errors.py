"""Error types raised by turtlecore."""


class DomainError(ValueError):
    """A value is outside the domain of its type (heading, pen state, ...)."""


class InvariantViolation(RuntimeError):
    """Internal state that should be impossible was reached."""
