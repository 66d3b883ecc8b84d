"""Command-line host for repofeed.

The host owns the coordination channels.  It mounts one subcommand per
registered plugin, and once the subcommand has returned it drains the
item and error channels until every unit of work has finished.  Drained
items are printed as a table; a traversal error makes the run fail.
"""

from __future__ import annotations

import queue
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ..channels.bundle import Channels, Item
from ..config_loader import load_config
from ..errors import ConfigurationError, TraversalError
from ..logging.logger import JSONReport, configure_logging, get_logger
from ..plugins import iter_plugins

console = Console()
log = get_logger(__name__)

POLL_INTERVAL = 0.1


def drain(channels: Channels, report: Optional[JSONReport] = None) -> Tuple[List[Item], List[Exception]]:
    """Collect everything published until the wait group reaches zero."""
    items: List[Item] = []
    errors: List[Exception] = []

    def pull() -> None:
        while True:
            try:
                items.append(channels.items.get_nowait())
            except queue.Empty:
                break
        while True:
            try:
                errors.append(channels.errors.get_nowait())
            except queue.Empty:
                break

    # every publish happens before the matching done(), so one final pull
    # after the counter reaches zero sees all of it
    while not channels.wait_group.wait(timeout=POLL_INTERVAL):
        pull()
    pull()

    if report is not None:
        for item in items:
            report.add_item(item)
        for error in errors:
            report.add_error(error)
    return items, errors


def build_cli(channels: Optional[Channels] = None) -> click.Group:
    channels = channels if channels is not None else Channels()

    @click.group()
    @click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), default=None, help='Path to YAML configuration file.')
    @click.option('--report', 'report_path', type=click.Path(dir_okay=False, writable=True), default=None, help='Write drained items and errors to this JSON file.')
    @click.option('-v', '--verbose', is_flag=True, help='Enable debug logging.')
    @click.pass_context
    def cli(ctx: click.Context, config_path: Optional[str], report_path: Optional[str], verbose: bool) -> None:
        """repofeed: emit repository contents to downstream scanners."""
        configure_logging(verbose=verbose)
        try:
            ctx.obj = load_config(Path(config_path) if config_path else None)
        except ConfigurationError as err:
            raise click.UsageError(str(err)) from err
        ctx.meta['report_path'] = report_path

    @cli.result_callback()
    @click.pass_context
    def finish(ctx: click.Context, *_: object, **__: object) -> None:
        report_path = ctx.meta.get('report_path')
        report = JSONReport(Path(report_path)) if report_path else None
        items, errors = drain(channels, report)

        table = Table(title='Emitted items')
        table.add_column('Source')
        table.add_column('Length', justify='right')
        for item in sorted(items, key=lambda i: i.source):
            table.add_row(item.source, str(len(item.content)))
        console.print(table)

        for error in errors:
            log.warning('%s: %s', type(error).__name__, error)
        if report is not None:
            report.flush()
        if any(isinstance(error, TraversalError) for error in errors):
            ctx.exit(1)

    for plugin_cls in iter_plugins():
        cli.add_command(plugin_cls().define_command(channels))

    return cli


def main() -> None:  # pragma: no cover
    build_cli()(prog_name='repofeed')


if __name__ == '__main__':  # pragma: no cover
    main()
