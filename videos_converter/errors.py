"""Exception types raised while converting a folder of videos."""

from pathlib import Path
from typing import Optional


class ConverterError(Exception):
    """Base class for every error raised by the converter."""
    pass


class ConfigurationError(ConverterError):
    """Exception raised for invocation-related errors."""
    pass


class InvalidArgumentCount(ConfigurationError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"An invalid number of arguments has been passed ({count}). Aborting."
        )


class DirectoryCreateFailure(ConverterError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create output directory {path}: {reason}")


class DirectoryReadFailure(ConverterError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read source directory {path}: {reason}")


class EncoderInvocationFailure(ConverterError):
    """The encoder could not be started or did not produce an output file."""

    def __init__(
        self,
        source: Path,
        reason: str,
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        self.source = source
        self.reason = reason
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(reason)
