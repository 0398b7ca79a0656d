"""Domain exceptions."""


class TimetableLoadError(RuntimeError):
    """Raised when the timetable source cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load timetable from {source}: {reason}")
        self.source = source
        self.reason = reason


class PositionUnavailableError(RuntimeError):
    """Raised when the rider's position cannot be obtained (denied, timed out, unsupported)."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
