import datetime
import os
import re
from dataclasses import dataclass

from ..errors import BackupNameError

# Marks a directory as one of ours, both when creating and when listing.
DIRECTORY_SIGNATURE = "hydrogenbackup"

_SIGNATURE_RE = re.compile(re.escape(DIRECTORY_SIGNATURE))

# ASCII digits with an optional sign, nothing else.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class BackupDirectory:
    name: str
    timestamp: int

    @property
    def created_at(self) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(self.timestamp).astimezone()

    def created_at_display(self) -> str:
        try:
            return self.created_at.strftime("%Y-%m-%d %H:%M:%S %z %Z")
        except (ValueError, OverflowError, OSError):
            # outside what the platform clock can represent
            return str(self.timestamp)


def parse_decimal(text: str) -> int:
    """Parse ``text`` as a base-10 integer, raising ``ValueError`` for anything else."""
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"invalid decimal: {text!r}")
    return int(text)


def backup_name(timestamp: int) -> str:
    return f"{DIRECTORY_SIGNATURE}_{int(timestamp)}"


def parse_timestamp(name: str) -> int:
    """Return the Unix timestamp after the last underscore of ``name``.

    Raises :class:`BackupNameError` if there is no underscore or the suffix
    is not an integer.
    """
    _, sep, suffix = name.rpartition("_")
    if not sep:
        raise BackupNameError(name)
    try:
        return parse_decimal(suffix)
    except ValueError:
        raise BackupNameError(name) from None


def is_backup_name(name: str) -> bool:
    # Loose substring match, anything containing the signature counts.
    return _SIGNATURE_RE.search(name) is not None


class StorageGateway:
    """Backup directories living directly under ``backup_dir``."""

    def __init__(self, backup_dir: str = "."):
        self.backup_dir = backup_dir

    def path_for(self, name: str) -> str:
        if os.path.normpath(self.backup_dir) == ".":
            return name
        return os.path.join(self.backup_dir, name)

    def list_backup_names(self) -> list[str]:
        with os.scandir(self.backup_dir) as it:
            names = [e.name for e in it if e.is_dir() and is_backup_name(e.name)]
        return sorted(names)

    def list_backups(self) -> list[BackupDirectory]:
        return [BackupDirectory(name, parse_timestamp(name)) for name in self.list_backup_names()]
