"""Thin CLI wrapper — Typer commands that delegate to the Container.

All client construction goes through bootstrap.Container.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Annotated, Optional

import typer

from notems.presentation.cli.formatters import (
    console,
    content_panel,
    demo_table,
    error_message,
    json_panel,
    save_result_panel,
)

app = typer.Typer(
    name="notems",
    help="📝 Read and write note.ms online clipboards",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Inspect the client configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON configuration file"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log request progress to stderr")
    ] = False,
) -> None:
    """Read and write note.ms online clipboards."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _container(config: Optional[str]):
    from notems.bootstrap import Container
    from notems.domain.errors import ConfigurationError

    try:
        return Container(config_path=config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


def _client(slot: str, config: Optional[str]):
    from notems.domain.errors import InvalidSlotError

    container = _container(config)
    try:
        return container.client(slot)
    except InvalidSlotError as e:
        error_message(str(e))
        raise typer.Exit(code=1)


def _read_text(text: str) -> str:
    return sys.stdin.read() if text == "-" else text


# ---------------------------------------------------------------------------
# notems get
# ---------------------------------------------------------------------------


@app.command()
def get(
    slot: Annotated[str, typer.Argument(help="Slot name (last segment of the note URL)")],
    raw: Annotated[
        bool, typer.Option("--raw", "-r", help="Print the bare text, no decoration")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Print the current content of a slot."""
    from notems.domain.errors import NetworkError, ParseError

    client = _client(slot, config)
    try:
        content = client.fetch()
    except (NetworkError, ParseError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    finally:
        client.close()

    if raw:
        typer.echo(content, nl=False)
    else:
        content_panel(content, client.url)


# ---------------------------------------------------------------------------
# notems save / append
# ---------------------------------------------------------------------------


@app.command()
def save(
    slot: Annotated[str, typer.Argument(help="Slot name (last segment of the note URL)")],
    text: Annotated[str, typer.Argument(help="Text to write; '-' reads standard input")],
    append: Annotated[
        bool, typer.Option("--append", "-a", help="Append instead of replacing")
    ] = False,
    separator: Annotated[
        Optional[str],
        typer.Option("--separator", "-s", help="Separator used when appending"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Replace (or with --append, extend) the content of a slot."""
    client = _client(slot, config)
    with client:
        result = client.save(_read_text(text), append=append, separator=separator)

    save_result_panel(result)
    if not result:
        raise typer.Exit(code=1)


@app.command("append")
def append_cmd(
    slot: Annotated[str, typer.Argument(help="Slot name (last segment of the note URL)")],
    text: Annotated[str, typer.Argument(help="Text to append; '-' reads standard input")],
    separator: Annotated[
        Optional[str],
        typer.Option("--separator", "-s", help="Separator placed before the new text"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Append text to a slot, keeping what is already there."""
    client = _client(slot, config)
    with client:
        result = client.append(_read_text(text), separator=separator)

    save_result_panel(result)
    if not result:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# notems demo
# ---------------------------------------------------------------------------


@app.command()
def demo(
    slot: Annotated[str, typer.Argument(help="Slot to run the walkthrough against")],
    config: ConfigOption = None,
) -> None:
    """Replace, append and append-with-separator on a slot, showing each result."""
    from notems.domain.errors import InvalidSlotError

    container = _container(config)
    try:
        uc = container.run_demo(slot)
    except InvalidSlotError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    steps = uc.execute(now=datetime.now().astimezone())
    demo_table(steps)
    if not all(step.succeeded for step in steps):
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# notems config show
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active configuration as JSON."""
    container = _container(config)
    json_panel(container.settings.model_dump_json(indent=2))
    if config:
        console.print(f"[dim]Loaded from {config}[/]")
