"""Tests for repofeed.channels.bundle."""

from __future__ import annotations

import threading

import pytest

from repofeed.channels.bundle import Channels, Item, WaitGroup


def test_item_identity_is_its_path() -> None:
    item = Item.from_file('src/a.txt', 'hello')

    assert item == Item(content='hello', source='src/a.txt', id='src/a.txt')


def test_item_is_immutable() -> None:
    item = Item.from_file('a.txt', 'hello')

    with pytest.raises(AttributeError):
        item.content = 'changed'  # type: ignore[misc]


def test_wait_group_returns_immediately_when_idle() -> None:
    assert WaitGroup().wait(timeout=0)


def test_wait_group_times_out_while_pending() -> None:
    wg = WaitGroup()
    wg.add(2)
    wg.done()

    assert wg.pending == 1
    assert not wg.wait(timeout=0.01)


def test_wait_group_wakes_waiter_from_other_thread() -> None:
    wg = WaitGroup()
    wg.add(3)
    workers = [threading.Thread(target=wg.done) for _ in range(3)]
    for t in workers:
        t.start()

    assert wg.wait(timeout=5)
    for t in workers:
        t.join()


def test_wait_group_rejects_negative_counter() -> None:
    wg = WaitGroup()

    with pytest.raises(ValueError):
        wg.done()
    assert wg.pending == 0


def test_channels_instances_do_not_share_queues() -> None:
    first, second = Channels(), Channels()
    first.items.put(Item.from_file('a', 'b'))

    assert second.items.empty()
    assert first.wait_group is not second.wait_group
