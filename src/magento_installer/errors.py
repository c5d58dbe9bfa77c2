"""Fatal errors raised by the installer.

Each one aborts the invocation; the CLI prints the message and exits 1.
"""

from typing import Optional


class InstallerError(Exception):
    """Base exception for installer failures."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UnsupportedRuntimeError(InstallerError):
    """The running interpreter is too old for the installer."""


class AlreadyExistsError(InstallerError):
    """The target application directory already exists."""


class DownloadError(InstallerError):
    """The application archive could not be fetched."""


class ExtractionError(InstallerError):
    """The application archive could not be unpacked into place."""
