"""Plugin contract between producers and the host."""

from __future__ import annotations

from abc import ABC, abstractmethod

import click

from ..channels.bundle import Channels


class Plugin(ABC):
    plugin_name: str = ''

    @abstractmethod
    def define_command(self, channels: Channels) -> click.Command:
        """Return the command the host mounts for this plugin.

        The command publishes onto ``channels`` and must return without
        waiting for its background work.
        """
