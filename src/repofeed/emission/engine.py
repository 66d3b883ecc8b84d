"""Item emission for repofeed.

Turns each candidate path into exactly one ``Item`` on the item channel
or one ``ReadError`` on the error channel.  Each path is an independent
unit of work on the shared wait group.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..channels.bundle import Channels, Item
from ..errors import ReadError
from ..logging.logger import get_logger
from ..supervisor.manager import WorkerSupervisor

log = get_logger(__name__)


def read_item(path: str, encoding: str = 'utf-8', errors: str = 'replace') -> Item:
    """Read ``path`` fully and wrap its text in an ``Item``."""
    data = Path(path).read_bytes()
    return Item.from_file(path, data.decode(encoding, errors))


def emit_items(
    paths: Sequence[str],
    channels: Channels,
    supervisor: WorkerSupervisor,
    encoding: str = 'utf-8',
    errors: str = 'replace',
) -> int:
    """Dispatch one read per path onto ``supervisor``.

    The wait group is incremented before each task is submitted and each
    task marks itself done exactly once, whatever the outcome.  Returns the
    number of tasks dispatched.
    """

    def unit(path: str) -> None:
        try:
            item = read_item(path, encoding, errors)
        except (OSError, UnicodeError, LookupError) as err:
            log.debug('could not read %s: %s', path, err)
            read_error = ReadError(path, f'error while reading {path}: {err}')
            read_error.__cause__ = err
            channels.errors.put(read_error)
        else:
            channels.items.put(item)
        finally:
            channels.wait_group.done()

    for path in paths:
        channels.wait_group.add(1)
        try:
            supervisor.submit(lambda path=path: unit(path))
        except RuntimeError:
            # supervisor already closed
            channels.wait_group.done()
            raise
    log.debug('dispatched %d read tasks', len(paths))
    return len(paths)
