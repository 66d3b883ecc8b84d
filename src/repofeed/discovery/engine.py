"""Discovery engine for repofeed.

Walks a single root directory and returns the files worth handing to the
item emitter.  The walk is sequential and uses ``os.walk`` with names
sorted at every level, so two walks over an unchanged tree produce the
same list in the same order.

Filtering rules:

* directories named in ``skip_dirs`` (``.git`` by default) are pruned
  together with their whole subtree;
* zero-byte files are skipped;
* directories themselves are never returned.

Any error raised while enumerating the tree aborts the walk with a
``TraversalError``.
"""

from __future__ import annotations

import os
from typing import Iterable, List, NoReturn

from ..errors import ConfigurationError, TraversalError
from ..logging.logger import get_logger

DEFAULT_SKIP_DIRS = ('.git',)

log = get_logger(__name__)


def _raise_walk_error(err: OSError) -> NoReturn:
    raise TraversalError(err.filename, f'error while walking through the directory: {err}') from err


def discover_files(root: str, skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS) -> List[str]:
    """Return candidate file paths under ``root``.

    Args:
        root: Directory to walk.  Returned paths are joined onto it, so a
            relative root yields relative paths.
        skip_dirs: Directory names whose subtrees are not entered.

    Returns:
        Ordered list of non-empty file paths.

    Raises:
        ConfigurationError: ``root`` is empty.
        TraversalError: enumerating an entry failed.
    """
    if not root:
        raise ConfigurationError('root path is required')
    if not os.path.isdir(root):
        # os.walk reports a regular-file root as an empty tree
        try:
            os.scandir(root).close()
        except OSError as err:
            _raise_walk_error(err)

    skipped = set(skip_dirs)
    if os.path.basename(os.path.normpath(root)) in skipped:
        log.debug('root %s is a skipped directory', root)
        return []
    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames[:] = sorted(name for name in dirnames if name not in skipped)
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            try:
                size = os.lstat(path).st_size
            except OSError as err:
                _raise_walk_error(err)
            if size == 0:
                log.debug('skipping empty file %s', path)
                continue
            files.append(path)
    return files
