import logging
from typing import Dict

from ..errors import SelectionError
from ..data.database_gateway import DatabaseGateway
from ..data.storage_gateway import BackupDirectory, StorageGateway, parse_decimal

logger = logging.getLogger(__name__)

BackupIndex = Dict[int, BackupDirectory]


def build_index(backups: list[BackupDirectory]) -> BackupIndex:
    """Number backups from 1 in the order given."""
    return {i: backup for i, backup in enumerate(backups, 1)}


def parse_selection(raw: str, index: BackupIndex) -> BackupDirectory:
    value = (raw or "").strip()
    try:
        number = parse_decimal(value)
    except ValueError:
        raise SelectionError(raw, f"'{value}' is not a backup number") from None
    if number not in index:
        raise SelectionError(number, f"No backup numbered {number}")
    return index[number]


class RestoreUseCase:
    """Lists backup directories and restores a chosen one.

    The index returned by :meth:`list_backups` is only valid until the
    directory contents change; callers build a fresh one per restore.
    """

    def __init__(self, db_gateway: DatabaseGateway, storage_gateway: StorageGateway):
        self.db_gateway = db_gateway
        self.storage_gateway = storage_gateway

    def list_backups(self) -> BackupIndex:
        return build_index(self.storage_gateway.list_backups())

    def execute(self, backup: BackupDirectory) -> None:
        logger.info("Restoring backup %s", backup.name)
        self.db_gateway.restore(self.storage_gateway.path_for(backup.name))
