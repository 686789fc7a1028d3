"""Entry point for ``python -m hydrogen_backup backup|restore``."""

from .interface.cli import backup_cli

if __name__ == "__main__":
    backup_cli(prog_name="hydrogenbackup")
