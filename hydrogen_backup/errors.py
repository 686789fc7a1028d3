"""Exceptions raised by the backup and restore operations.

The CLI turns any :class:`HydrogenBackupError` into a ``click.ClickException``
so library code never exits the process itself.
"""


class HydrogenBackupError(Exception):
    """Base class for every error this package raises."""


class ProcessRunError(HydrogenBackupError):
    """An external tool could not be started or exited with a non-zero status."""

    def __init__(self, command, returncode=None, reason=None):
        self.command = command
        self.returncode = returncode
        self.reason = reason
        program = command[0] if command else "<empty command>"
        if reason is not None:
            message = f"{program} could not be started: {reason}"
        else:
            message = f"{program} failed with exit status {returncode}"
        super().__init__(message)


class BackupNameError(HydrogenBackupError):
    """A backup directory name does not end in a Unix timestamp."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Backup directory '{name}' does not end in a Unix timestamp")


class SelectionError(HydrogenBackupError):
    """The restore selection was not a number or matched no backup."""

    def __init__(self, value, message: str):
        self.value = value
        super().__init__(message)
