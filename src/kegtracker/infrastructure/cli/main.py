import click
from pydantic import ValidationError as SettingsError

from kegtracker.infrastructure.bootstrap import keg_tracker, settings
from kegtracker.infrastructure.cli.menu import run_menu
from kegtracker.logging_config import configure_logging


@click.command()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log verbosity (overrides KEGTRACKER_LOG_LEVEL).",
)
def cli(log_level: str | None) -> None:
    """Keg Tracker: track beer kegs and their contents."""
    try:
        cfg = settings()
    except SettingsError as exc:
        fields = ", ".join(
            f"KEGTRACKER_{'.'.join(str(part) for part in err['loc'])}"
            for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {fields}")

    configure_logging(log_level or cfg.LOG_LEVEL)

    run_menu(keg_tracker(), unit=cfg.VOLUME_UNIT)
