import logging
import time
from typing import Callable

from ..data.database_gateway import DatabaseGateway
from ..data.storage_gateway import StorageGateway, backup_name

logger = logging.getLogger(__name__)


class BackupUseCase:
    def __init__(self, db_gateway: DatabaseGateway, storage_gateway: StorageGateway,
                 clock: Callable[[], float] = time.time):
        self.db_gateway = db_gateway
        self.storage_gateway = storage_gateway
        self.clock = clock

    def execute(self) -> str:
        """Dump every database into a new ``hydrogenbackup_<unix-seconds>`` directory.

        Returns the directory name. A failed dump raises ``ProcessRunError``
        and may leave a partially written directory behind.
        """
        name = backup_name(int(self.clock()))
        logger.info("Creating backup %s", name)
        self.db_gateway.dump(self.storage_gateway.path_for(name))
        return name
