"""Repository producer for repofeed.

Drives the discovery engine and the item emitter for one root directory.
``start`` registers a single unit of work for the whole walk, runs the
walk on a background thread and returns immediately.  The walk unit is
marked done once every per-file task has been dispatched; the host sees
the producer finish when the shared wait group reaches zero.
"""

from __future__ import annotations

import threading
from enum import Enum, auto
from typing import Optional

from ..channels.bundle import Channels
from ..config_loader import Settings
from ..discovery.engine import discover_files
from ..emission.engine import emit_items
from ..errors import ConfigurationError, TraversalError
from ..logging.logger import get_logger
from ..supervisor.manager import WorkerSupervisor

log = get_logger(__name__)


class ProducerState(Enum):
    IDLE = auto()
    CONFIGURED = auto()
    WALKING = auto()
    DISPATCHING = auto()
    DRAINING = auto()


class RepositoryProducer:
    """Walk one repository and publish its files onto ``channels``."""

    def __init__(self, root: str, channels: Channels, settings: Optional[Settings] = None):
        self.channels = channels
        self.settings = settings or Settings()
        self.state = ProducerState.IDLE
        if not root:
            raise ConfigurationError('repository path is required')
        self.root = root
        self.state = ProducerState.CONFIGURED
        self._thread: Optional[threading.Thread] = None

    def start(self) -> threading.Thread:
        """Start the walk in the background and return its thread."""
        if self._thread is not None:
            raise RuntimeError('producer already started')
        self.channels.wait_group.add(1)
        self._thread = threading.Thread(target=self._run, name='repofeed-walk', daemon=True)
        try:
            self._thread.start()
        except RuntimeError:
            self.channels.wait_group.done()
            raise
        return self._thread

    def _run(self) -> None:
        try:
            self.state = ProducerState.WALKING
            log.info('walking %s', self.root)
            try:
                paths = discover_files(self.root, self.settings.skip_dirs)
            except TraversalError as err:
                log.error('%s', err)
                self.channels.errors.put(err)
                return
            log.info('found %d files under %s', len(paths), self.root)

            self.state = ProducerState.DISPATCHING
            supervisor = WorkerSupervisor(max_workers=self.settings.max_workers)
            try:
                emit_items(
                    paths,
                    self.channels,
                    supervisor,
                    encoding=self.settings.encoding,
                    errors=self.settings.decode_errors,
                )
            finally:
                supervisor.close(wait=False)
            self.state = ProducerState.DRAINING
        finally:
            self.channels.wait_group.done()


def start_repository_producer(root: str, channels: Channels, settings: Optional[Settings] = None) -> RepositoryProducer:
    producer = RepositoryProducer(root, channels, settings)
    producer.start()
    return producer
