"""Producer plugins.

Importing this package registers the built-in plugins.
"""

from . import repository  # noqa: F401
from .registry import get_plugin, iter_plugins, register

__all__ = ['get_plugin', 'iter_plugins', 'register']
