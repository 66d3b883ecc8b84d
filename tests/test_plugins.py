"""Tests for the plugin registry and the repository plugin."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from repofeed.channels.bundle import Channels
from repofeed.plugins import registry
from repofeed.plugins.base import Plugin
from repofeed.plugins.repository import RepositoryPlugin


class _DummyPlugin(Plugin):
    plugin_name = 'dummy'

    def define_command(self, channels: Channels) -> click.Command:
        return click.Command(name=self.plugin_name)


@pytest.fixture
def isolated_registry(monkeypatch) -> dict:
    scratch = dict(registry.REGISTRY)
    monkeypatch.setattr(registry, 'REGISTRY', scratch)
    return scratch


def test_repository_plugin_is_registered() -> None:
    assert registry.get_plugin('repository') is RepositoryPlugin
    assert RepositoryPlugin in list(registry.iter_plugins())


def test_register_rejects_duplicate_names(isolated_registry: dict) -> None:
    registry.register(_DummyPlugin)

    class Other(_DummyPlugin):
        pass

    with pytest.raises(ValueError, match='Duplicate'):
        registry.register(Other)


def test_register_is_idempotent_for_same_class(isolated_registry: dict) -> None:
    registry.register(_DummyPlugin)
    registry.register(_DummyPlugin)

    assert isolated_registry['dummy'] is _DummyPlugin


def test_register_requires_a_name(isolated_registry: dict) -> None:
    class Nameless(_DummyPlugin):
        plugin_name = ''

    with pytest.raises(ValueError):
        registry.register(Nameless)


def test_unknown_plugin() -> None:
    with pytest.raises(ValueError, match='Unknown plugin'):
        registry.get_plugin('nope')


def test_command_descriptor(channels: Channels) -> None:
    command = RepositoryPlugin().define_command(channels)

    assert command.name == 'repository'
    assert 'sensitive information' in command.help
    (option,) = command.params
    assert option.opts == ['--path']
    assert option.required


def test_missing_path_rejected_before_traversal(channels: Channels) -> None:
    command = RepositoryPlugin().define_command(channels)

    result = CliRunner().invoke(command, [])

    assert result.exit_code == 2
    assert 'Missing option' in result.output
    assert channels.wait_group.pending == 0
    assert channels.items.empty()
    assert channels.errors.empty()


def test_nonexistent_path_rejected_before_traversal(tmp_path: Path, channels: Channels) -> None:
    command = RepositoryPlugin().define_command(channels)

    result = CliRunner().invoke(command, ['--path', str(tmp_path / 'missing')])

    assert result.exit_code == 2
    assert channels.wait_group.pending == 0


def test_invocation_starts_producer(sample_repo: Path, channels: Channels) -> None:
    plugin = RepositoryPlugin()
    command = plugin.define_command(channels)

    result = CliRunner().invoke(command, ['--path', str(sample_repo)])

    assert result.exit_code == 0, result.output
    assert plugin.path == str(sample_repo)
    assert channels.wait_group.wait(timeout=5)
    item = channels.items.get_nowait()
    assert item.content == 'hello'
    assert channels.items.empty()


def test_plugin_modules_are_documented() -> None:
    from repofeed.plugins import base, repository

    for module in (registry, base, repository):
        assert module.__doc__ and module.__doc__.strip()
