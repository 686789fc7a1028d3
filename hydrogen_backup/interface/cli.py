import logging
import os

import click

from ..app.backup_use_case import BackupUseCase
from ..app.restore_use_case import RestoreUseCase, parse_selection
from ..data.config_loader import load_config
from ..data.database_gateway import DatabaseGateway
from ..data.process_runner import ProcessRunner
from ..data.storage_gateway import StorageGateway
from ..errors import HydrogenBackupError

USAGE = "You need to either choose the backup or restore command line arguments"

# Only the first argument matters; anything after the subcommand is ignored.
SUBCOMMAND_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def _configure_logging() -> None:
    level_name = (os.getenv("HYDROGENBACKUP_LOG_LEVEL") or "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


class SubcommandGroup(click.Group):
    """Group that answers an unknown or missing subcommand with the usage line and status 1."""

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else ""
        if self.get_command(ctx, cmd_name) is None:
            click.echo(USAGE)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


def _gateways(ctx) -> tuple[DatabaseGateway, StorageGateway]:
    db_gateway = DatabaseGateway(ctx.obj["config"], runner=ctx.obj["runner"])
    storage_gateway = StorageGateway(backup_dir=".")
    return db_gateway, storage_gateway


@click.group(
    cls=SubcommandGroup,
    invoke_without_command=True,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.pass_context
def cli(ctx):
    """Back up and restore a Hydrogen ArangoDB server.

    Server details are read from config.env (YAML) in the current directory.
    """
    _configure_logging()
    ctx.ensure_object(dict)
    if ctx.invoked_subcommand is None:
        click.echo(USAGE)
        ctx.exit(1)
    if "config" not in ctx.obj:
        ctx.obj["config"] = load_config()
    ctx.obj.setdefault("runner", ProcessRunner())


@cli.command(add_help_option=False, context_settings=SUBCOMMAND_SETTINGS)
@click.pass_context
def backup(ctx):
    """Dump all databases into a new hydrogenbackup_<timestamp> directory."""
    db_gateway, storage_gateway = _gateways(ctx)
    use_case = BackupUseCase(db_gateway, storage_gateway)
    try:
        name = use_case.execute()
    except HydrogenBackupError as e:
        raise click.ClickException(str(e))
    click.echo(f"Backup written to {click.style(name, fg='red')}")


@cli.command(add_help_option=False, context_settings=SUBCOMMAND_SETTINGS)
@click.pass_context
def restore(ctx):
    """Pick a backup from the current directory and restore it."""
    db_gateway, storage_gateway = _gateways(ctx)
    use_case = RestoreUseCase(db_gateway, storage_gateway)
    try:
        index = use_case.list_backups()
        if not index:
            click.echo(f"No backups found in {os.path.abspath(storage_gateway.backup_dir)}")
            return

        for number, entry in index.items():
            click.echo(
                f"[{click.style(str(number), fg='yellow')}] "
                f"{click.style(entry.name, fg='red')} : "
                f"{click.style(entry.created_at_display(), fg='green')}"
            )

        raw = click.prompt(
            f"Please enter the {click.style('[number]', fg='yellow')} of the backup you want to restore",
            default="",
            show_default=False,
            prompt_suffix=" : ",
        )
        selected = parse_selection(raw, index)

        click.echo(
            f"{click.style('Attempting to restore', fg='blue')} "
            f"{click.style(selected.name, fg='red')} "
            f"{click.style('from backup...', fg='blue')}"
        )
        use_case.execute(selected)
    except HydrogenBackupError as e:
        raise click.ClickException(str(e))


# Console script entry point
backup_cli = cli
