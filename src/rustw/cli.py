"""CLI for rustw configuration using Click.

Provides 'rustw docs' to describe every option and 'rustw show' to print the
configuration a rustw.toml file resolves to.
"""

import logging
import sys
from pathlib import Path

import click

from rustw.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    MalformedDocumentError,
    RustwConfig,
    load_config,
)

logger = logging.getLogger(__name__)


def read_config_text(path: Path) -> str:
    """Read a config file as UTF-8 text.

    Raises:
        MalformedDocumentError: If the file is not valid UTF-8.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"{path} is not valid UTF-8: {exc}") from exc


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
def cli(verbose: bool) -> None:
    """rustw - configuration for the rustw web frontend."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


@cli.command()
def docs() -> None:
    """Print documentation for every configuration option."""
    RustwConfig.print_docs()


@cli.command()
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Use specific config file (skips discovery)",
)
@click.option(
    "-d",
    "--dir",
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory)",
)
def show(config_file: Path | None, project_dir: Path | None) -> None:
    """Print the effective configuration.

    Reads the given config file, or rustw.toml in the project directory.
    Without either, the defaults are shown.

    Examples:

        \b
        # Config from the current directory
        rustw show

        \b
        # Use specific config file
        rustw show -c myconfig.toml
    """
    if config_file is None:
        project_dir = (project_dir or Path.cwd()).resolve()
        candidate = project_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            config_file = candidate

    try:
        if config_file is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE_NAME)
            text = ""
        else:
            logger.debug("Loading config from %s", config_file)
            text = read_config_text(config_file)
        config = load_config(text)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(config.to_toml(), nl=False)


if __name__ == "__main__":
    cli()
