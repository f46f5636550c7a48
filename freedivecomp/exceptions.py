"""Errors raised synchronously to callers of the timing core."""


class FreediveCompError(Exception):
    """Base class for every error the timer raises on purpose."""


class UnknownDiscipline(FreediveCompError):
    """Discipline code outside the fixed competition set."""

    def __init__(self, code) -> None:
        self.code = code
        super().__init__(f"Unknown discipline: {code!r}")


class InvalidOperation(FreediveCompError):
    """Command not allowed in the session's current state
    (e.g. changing discipline or starting while the timer is armed)."""
