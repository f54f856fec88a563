"""Error types for SPIN & DARE."""


class SpinDareError(Exception):
    """Base class for all game errors."""


class ConfigurationError(SpinDareError):
    """Challenge pool or planner parameters violate their invariants.

    Raised while a game instance is being assembled; the game must not start.
    """


class InvalidStateTransition(SpinDareError):
    """A command was issued while the machine was not in the required phase."""

    def __init__(self, command: str, phase: str) -> None:
        super().__init__(f"{command} rejected in phase {phase}")
        self.command = command
        self.phase = phase
