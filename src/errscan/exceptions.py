"""Custom exception hierarchy for the errscan package."""


class ErrscanError(Exception):
    """Base exception for all errscan errors."""


class ConfigurationError(ErrscanError):
    """Missing or invalid scan configuration."""


class LogFileError(ErrscanError):
    """Log file could not be opened or read."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class TimestampParseError(ErrscanError):
    """Leading timestamp of a log line could not be parsed (non-fatal)."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        super().__init__(f"{reason}: {line!r}")
