"""Coordination bundle shared between producers and the plugin host.

The host owns a single ``Channels`` instance.  Producers only publish to
it: items go on ``items``, failures on ``errors``, and every unit of work
is bracketed by ``wait_group.add`` / ``wait_group.done`` so the host can
tell when everything has drained.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Item:
    content: str
    source: str
    id: str

    @classmethod
    def from_file(cls, path: str, content: str) -> 'Item':
        """Build an item whose identity is the path it was read from."""
        return cls(content=content, source=path, id=path)


class WaitGroup:
    """Counter of pending units of work.

    ``wait`` blocks until the counter drops back to zero.
    """

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    @property
    def pending(self) -> int:
        with self._cond:
            return self._count

    def add(self, n: int = 1) -> None:
        with self._cond:
            if self._count + n < 0:
                raise ValueError('negative WaitGroup counter')
            self._count += n
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the counter to reach zero.

        Returns ``False`` if ``timeout`` expired first.
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout=timeout)


@dataclass
class Channels:
    items: 'queue.Queue[Item]' = field(default_factory=queue.Queue)
    errors: 'queue.Queue[Exception]' = field(default_factory=queue.Queue)
    wait_group: WaitGroup = field(default_factory=WaitGroup)
