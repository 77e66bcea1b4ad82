import threading

import pytest

from resizer.controllers.channel import Channel, ChannelCancelled, ChannelClosed


def test_fifo_until_closed():
    channel = Channel(capacity=4)
    for i in range(3):
        channel.put(i)
    channel.close()
    assert list(channel) == [0, 1, 2]
    with pytest.raises(ChannelClosed):
        channel.get()


def test_close_only_once():
    channel = Channel()
    channel.close()
    with pytest.raises(RuntimeError):
        channel.close()


def test_put_after_close_fails():
    channel = Channel(capacity=2)
    channel.close()
    with pytest.raises(RuntimeError):
        channel.put(1)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Channel(capacity=0)


def test_backpressure_with_concurrent_consumer():
    channel = Channel(capacity=1)
    received = []

    def consume():
        received.extend(channel)

    consumer = threading.Thread(target=consume)
    consumer.start()
    for i in range(50):
        channel.put(i)
    channel.close()
    consumer.join(timeout=10)
    assert not consumer.is_alive()
    assert received == list(range(50))


def run_in_thread(target):
    outcome = {}

    def wrapper():
        try:
            target()
        except ChannelCancelled as exc:
            outcome["error"] = exc

    thread = threading.Thread(target=wrapper)
    thread.start()
    return thread, outcome


def test_cancel_unblocks_waiting_consumer():
    channel = Channel()
    thread, outcome = run_in_thread(channel.get)
    channel.cancel()
    thread.join(timeout=10)
    assert not thread.is_alive()
    assert isinstance(outcome["error"], ChannelCancelled)


def test_cancel_unblocks_blocked_producer():
    channel = Channel(capacity=1)
    channel.put("fills the buffer")
    thread, outcome = run_in_thread(lambda: channel.put("blocks"))
    channel.cancel()
    thread.join(timeout=10)
    assert not thread.is_alive()
    assert isinstance(outcome["error"], ChannelCancelled)
    assert channel.cancelled
