"""
Error types for the stringutils command line.
"""

from pathlib import Path
from typing import Optional


class StringUtilsError(Exception):
    """Base exception for all stringutils errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class InputError(StringUtilsError):
    """
    Raised when input text cannot be read.

    This error is raised when:
    - An input file does not exist or is not a regular file
    - An input file cannot be opened
    - Input bytes are not valid UTF-8
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message
