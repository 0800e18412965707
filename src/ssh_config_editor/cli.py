from __future__ import annotations

import logging
import os
from functools import partial

import click

from .core import store
from .core.errors import ConfigAccessError, ConfigError
from .tui.app import SSHConfigApp
from .tui.state import EditorState
from . import __version__

LOG_ENV_VAR = "SSH_CONFIG_EDITOR_LOG"


def configure_logging() -> None:
    """Log to the file named by $SSH_CONFIG_EDITOR_LOG; the terminal belongs to the UI."""
    target = os.environ.get(LOG_ENV_VAR)
    if not target:
        logging.getLogger("ssh_config_editor").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=target,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(__version__)
@click.option("-s", "-search", "--search", "search", default="", help="Filter hosts by name")
def main(search: str) -> None:
    """Browse, edit and delete Host entries in ~/.ssh/config."""
    configure_logging()
    try:
        path = store.default_config_path()
        store.ensure_writable(path)
        hosts = store.load_hosts(path)
    except ConfigAccessError as exc:
        click.echo(str(exc), err=True)
        click.echo("Please check file permissions.", err=True)
        raise SystemExit(1)
    except ConfigError as exc:
        click.echo(str(exc), err=True)
        raise SystemExit(1)

    state = EditorState(hosts, persist=partial(store.save_hosts, path), search=search)
    try:
        SSHConfigApp(state).run()
    except Exception as exc:  # broad for user friendliness
        click.echo(f"Error running terminal UI: {exc}", err=True)
        raise SystemExit(1)
