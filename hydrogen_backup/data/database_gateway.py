from typing import Optional

from .config_loader import ServerConfig
from .process_runner import ProcessRunner


class DatabaseGateway:
    """Builds arangodump/arangorestore command lines and hands them to a runner."""

    def __init__(self, config: ServerConfig, runner: Optional[ProcessRunner] = None):
        self.config = config
        self.runner = runner or ProcessRunner()

    def _server_args(self) -> list[str]:
        return [
            "--server.endpoint", self.config.endpoint,
            "--server.username", self.config.username,
            "--server.password", self.config.password,
        ]

    def dump_command(self, output_directory: str) -> list[str]:
        # System collections must be included or the graph definitions are lost.
        return [
            self.config.arangodump_path,
            "--output-directory", output_directory,
            *self._server_args(),
            "--all-databases", "true",
            "--include-system-collections", "true",
        ]

    def restore_command(self, input_directory: str) -> list[str]:
        return [
            self.config.arangorestore_path,
            "--input-directory", input_directory,
            *self._server_args(),
            "--all-databases", "true",
            "--create-database", "true",
            "--include-system-collections", "true",
        ]

    def dump(self, output_directory: str) -> None:
        self.runner.run(self.dump_command(output_directory))

    def restore(self, input_directory: str) -> None:
        self.runner.run(self.restore_command(input_directory))
