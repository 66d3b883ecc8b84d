"""Logging utilities for repofeed.

``configure_logging`` routes the ``repofeed`` logger hierarchy through a
``rich`` handler on stderr.  ``JSONReport`` collects what the host drained
from the channels and writes it to disk when flushed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = 'repofeed'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{_LOGGER_NAME}.{name}')


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    # the CLI may be invoked several times in one process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    return logger


class JSONReport:
    def __init__(self, path: Path):
        self.path = path
        self.items: List[Dict[str, Any]] = []
        self.errors: List[Dict[str, Any]] = []

    def add_item(self, item: Any) -> None:
        self.items.append({'id': item.id, 'source': item.source, 'length': len(item.content)})

    def add_error(self, error: BaseException) -> None:
        self.errors.append({
            'kind': type(error).__name__,
            'path': getattr(error, 'path', None),
            'message': str(error),
        })

    def flush(self) -> None:
        with self.path.open('w', encoding='utf-8') as f:
            json.dump({'items': self.items, 'errors': self.errors}, f, indent=2)
