import logging
import subprocess
from typing import Sequence

from ..errors import ProcessRunError

logger = logging.getLogger(__name__)

SECRET_FLAGS = ("--server.password",)


def redact(args: Sequence[str]) -> list[str]:
    """Return a copy of ``args`` safe to log, with password values masked."""
    masked: list[str] = []
    hide_next = False
    for arg in args:
        if hide_next:
            masked.append("****")
            hide_next = False
            continue
        masked.append(arg)
        if arg in SECRET_FLAGS:
            hide_next = True
    return masked


class ProcessRunner:
    """Runs an external command with the terminal's stdout/stderr attached.

    Blocks until the command finishes. There is no timeout.
    """

    def run(self, args: Sequence[str]) -> None:
        args = list(args)
        logger.debug("Running %s", " ".join(redact(args)))
        try:
            res = subprocess.run(args)
        except OSError as e:
            raise ProcessRunError(args, reason=e) from e
        if res.returncode != 0:
            raise ProcessRunError(args, returncode=res.returncode)
