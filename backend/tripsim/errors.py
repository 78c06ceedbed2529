"""Exceptions raised by the simulation engine and its providers."""


class SimulationValidationError(ValueError):
    """A simulation request failed validation. Fatal to the call."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class ProviderFailure(Exception):
    """A catalog or geo provider was unreachable or returned garbage."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class OptionNotFound(ValueError):
    """A flight or hotel id is not part of a simulation result."""
