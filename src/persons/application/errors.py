"""Errors raised by the application layer for callers to report."""

BAD_USER_INPUT = "BAD_USER_INPUT"


class PersonsError(Exception):
    """Base class for caller-facing errors. `code` is machine-readable."""

    code = "INTERNAL_SERVER_ERROR"


class NameNotUnique(PersonsError):
    """Create was asked for a name that is already in the roster."""

    code = BAD_USER_INPUT

    def __init__(self, name: str) -> None:
        super().__init__("Name must be unique")
        self.name = name

    @property
    def invalid_args(self) -> str:
        return self.name
