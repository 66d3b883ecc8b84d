"""Name-keyed registry of producer plugins mounted by the host."""

from __future__ import annotations

from typing import Dict, Iterator, Type

from .base import Plugin

REGISTRY: Dict[str, Type[Plugin]] = {}


def register(plugin: Type[Plugin]) -> Type[Plugin]:
    name = getattr(plugin, 'plugin_name', None)
    if not isinstance(name, str) or not name:
        raise ValueError('Plugin must define non-empty plugin_name')

    existing = REGISTRY.get(name)
    if existing is not None and existing is not plugin:
        raise ValueError(
            f'Duplicate plugin_name={name!r}: '
            f'{existing.__module__}.{existing.__name__} vs {plugin.__module__}.{plugin.__name__}'
        )

    REGISTRY[name] = plugin
    return plugin


def get_plugin(name: str) -> Type[Plugin]:
    try:
        return REGISTRY[name]
    except KeyError as exc:
        raise ValueError(f'Unknown plugin: {name!r}') from exc


def iter_plugins() -> Iterator[Type[Plugin]]:
    yield from REGISTRY.values()
