"""Local repository plugin.

Mounts ``repository --path PATH`` on the host.  Invoking it starts a
``RepositoryProducer`` for ``PATH`` and returns straight away; files are
published onto the host's channels from background threads.
"""

from __future__ import annotations

from typing import Optional

import click

from ..channels.bundle import Channels
from ..config_loader import Settings
from ..producer.engine import RepositoryProducer, start_repository_producer
from .base import Plugin
from .registry import register

ARG_REPOSITORY = 'path'


@register
class RepositoryPlugin(Plugin):
    plugin_name = 'repository'

    def __init__(self) -> None:
        self.path: Optional[str] = None

    def define_command(self, channels: Channels) -> click.Command:
        @click.pass_context
        def run(ctx: click.Context, path: str) -> RepositoryProducer:
            self.path = path
            settings = ctx.find_object(Settings)
            return start_repository_producer(path, channels, settings)

        return click.Command(
            name=self.plugin_name,
            callback=run,
            params=[
                click.Option(
                    [f'--{ARG_REPOSITORY}'],
                    required=True,
                    type=click.Path(exists=True, file_okay=False, dir_okay=True),
                    help='Local repository path [required]',
                ),
            ],
            short_help='Scan local repository',
            help='Scan local repository for sensitive information',
        )
