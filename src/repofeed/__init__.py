"""repofeed: emit the contents of a local repository to downstream scanners."""

__version__ = '0.1.0'
