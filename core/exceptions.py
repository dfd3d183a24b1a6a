class GymError(Exception):
    """Base class for errors raised by the membership system."""


class StoreUnavailableError(GymError):
    """Raised when the users file is missing or cannot be read."""


class MalformedRecordError(GymError):
    """
    Raised when the users file contains a truncated or corrupt record.

    Attributes:
        path: The file being parsed.
        line_no: 1-based line number where parsing failed.
    """
    def __init__(self, path, line_no: int, reason: str):
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{path}:{line_no}: {reason}")
