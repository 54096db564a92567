"""Exceptions raised by the plane database"""


class PlaneDatabaseError(Exception):
    """Base class for plane database errors"""


class SourceUnavailableError(PlaneDatabaseError):
    """A source file could not be opened or read"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"cannot open file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DatabaseLoadError(PlaneDatabaseError):
    """Loading failed in a way that leaves the database unusable"""


class DatabaseClosedError(PlaneDatabaseError):
    """The database was used after close()"""
