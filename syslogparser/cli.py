"""Command-line interface for syslogparser."""

import logging
import sys
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from syslogparser.config import find_config_file, load_config, merge_cli_options
from syslogparser.decoders import escape_param_value, format_timestamp
from syslogparser.errors import ParseError
from syslogparser.models import Message
from syslogparser.parser import Parser

console = Console()
logger = logging.getLogger(__name__)


def _show(value: object) -> str:
    return "[dim]-[/dim]" if value is None else escape(str(value))


def render_message(message: Message) -> None:
    """Print a parsed message as tables."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("prival", str(message.prival))
    table.add_row("facility", f"{message.facility} ({message.facility_name})")
    table.add_row("severity", f"{message.severity} ({message.severity_name})")
    table.add_row("version", str(message.version))
    table.add_row("timestamp", format_timestamp(message.timestamp))
    table.add_row("hostname", _show(message.hostname))
    table.add_row("app_name", _show(message.app_name))
    table.add_row("procid", _show(message.procid))
    table.add_row("msgid", _show(message.msgid))
    table.add_row("msg", _show(message.msg), end_section=True)
    console.print(table)

    for element in message.structured_data or ():
        sd_table = Table(title=escape(f"[{element.id}]"), title_justify="left")
        sd_table.add_column("Param", style="cyan")
        sd_table.add_column("Value")
        for name, value in element.params.items():
            # Show values the way they are written on the wire
            sd_table.add_row(escape(name), escape(f'"{escape_param_value(value)}"'))
        console.print(sd_table)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to config file (default: searches standard locations)",
)
@click.option(
    "--allow-missing-sd/--strict",
    "allow_missing_sd",
    default=None,
    help="Accept lines without a STRUCTURED-DATA field (default: strict)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output (debug logging)")
@click.pass_context
def main(
    ctx: click.Context,
    config: Path | None,
    allow_missing_sd: bool | None,
    verbose: bool,
) -> None:
    """syslogparser - Parse RFC 5424 syslog lines."""
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Load config file, CLI overrides
    cfg = load_config(config)
    cfg = merge_cli_options(
        cfg,
        allow_missing_sd=allow_missing_sd,
        log_level="DEBUG" if verbose else None,
    )
    logging.getLogger().setLevel(cfg.log_level)

    ctx.obj["config"] = cfg
    ctx.obj["parser"] = Parser(cfg.parser_config())

    # Show config file location if found
    config_path = config or find_config_file()
    if config_path:
        ctx.obj["config_path"] = config_path
        logger.debug(f"Config: {config_path}")


@main.command()
@click.argument("lines", nargs=-1, required=True)
@click.pass_context
def parse(ctx: click.Context, lines: tuple[str, ...]) -> None:
    """Parse syslog lines given as arguments.

    Example:
        syslogparser parse '<34>1 2003-10-11T22:14:15.003Z host su - ID47 - hello'
    """
    parser: Parser = ctx.obj["parser"]
    failed = 0

    for line in lines:
        try:
            message = parser.parse(line)
        except ParseError as e:
            failed += 1
            console.print(f"[red]{escape(str(e))}[/red]")
            if e.cause:
                console.print(f"[dim]  {escape(str(e.cause))}[/dim]")
            continue
        render_message(message)

    if failed:
        sys.exit(1)


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary")
@click.pass_context
def check(ctx: click.Context, source: TextIO, quiet: bool) -> None:
    """Check every line of a file (or stdin) parses.

    Example:
        syslogparser check /var/log/remote/app.log
    """
    parser: Parser = ctx.obj["parser"]
    stats = {"lines": 0, "parsed": 0, "failed": 0, "skipped": 0}

    for lineno, raw in enumerate(source, start=1):
        stats["lines"] += 1
        line = raw.rstrip("\r\n")
        if not line:
            stats["skipped"] += 1
            logger.debug(f"Line {lineno}: empty, skipped")
            continue

        try:
            parser.parse(line)
        except ParseError as e:
            stats["failed"] += 1
            if quiet:
                logger.warning(f"Line {lineno}: {e.cause or e}")
            else:
                logger.debug(f"Line {lineno}: {e.cause or e}")
                console.print(f"[red]Line {lineno}: {escape(str(e))}[/red]")
                if e.cause:
                    console.print(f"[dim]  {escape(str(e.cause))}[/dim]")
            continue

        stats["parsed"] += 1

    console.print(f"Lines read: {stats['lines']:,}")
    console.print(f"[green]Parsed: {stats['parsed']:,}[/green]")
    if stats["skipped"]:
        console.print(f"[yellow]Skipped (empty): {stats['skipped']:,}[/yellow]")
    if stats["failed"]:
        console.print(f"[red]Failed: {stats['failed']:,}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
