"""Exception types raised by the builder and the drive-state machine."""


class PickupPatternError(Exception):
    """Base class for all pickup-patterns errors."""


class OptionDomainError(PickupPatternError, ValueError):
    """A value fell outside the domain of the field it was supplied for."""

    def __init__(self, field: str, value, allowed=None):
        self.field = field
        self.value = value
        self.allowed = allowed
        message = f"{value!r} is not a valid {field}"
        if allowed:
            message += f" (allowed: {allowed})"
        super().__init__(message)


class IllegalTransitionError(PickupPatternError):
    """The current drive state has no transition for the requested operation."""

    def __init__(self, state: str, operation: str):
        self.state = state
        self.operation = operation
        super().__init__(f"illegal transition from {state} via {operation}")
