from __future__ import annotations

import logging
import threading

import pytest

from ircbot.errors import HookError
from ircbot.irc.error_channel import ErrorChannel


def test_every_entry_reaches_the_handler():
    seen = []
    channel = ErrorChannel(handler=seen.append)
    channel.start()
    errors = [RuntimeError(str(i)) for i in range(50)]
    for err in errors:
        channel.put(err)
    channel.close()
    assert seen == errors
    assert channel.reported == 50
    assert not channel.running


def test_entries_queued_before_start_are_delivered():
    seen = []
    channel = ErrorChannel(handler=seen.append)
    channel.put(ValueError("early"))
    channel.start()
    channel.close()
    assert [str(e) for e in seen] == ["early"]


def test_put_does_not_block_on_slow_consumer():
    release = threading.Event()
    seen = []

    def slow(err):
        release.wait(5)
        seen.append(err)

    channel = ErrorChannel(handler=slow)
    channel.start()
    for i in range(1000):
        channel.put(RuntimeError(str(i)))
    # all puts returned while the consumer is still stuck on the first entry
    assert seen == []
    release.set()
    channel.close()
    assert len(seen) == 1000


def test_handler_failure_is_logged_and_consumer_continues(caplog):
    seen = []

    def flaky(err):
        if str(err) == "first":
            raise KeyError("handler broke")
        seen.append(err)

    channel = ErrorChannel(handler=flaky)
    channel.start()
    with caplog.at_level(logging.ERROR):
        channel.put(RuntimeError("first"))
        channel.put(RuntimeError("second"))
        channel.close()
    assert [str(e) for e in seen] == ["second"]
    assert "KeyError" in caplog.text


def test_default_handler_logs_structured_error(caplog):
    channel = ErrorChannel()
    channel.start()
    with caplog.at_level(logging.ERROR):
        channel.put(HookError("PRIVMSG", "url_cmd", RuntimeError("boom")))
        channel.close()
    assert "[HOOK]" in caplog.text
    assert "url_cmd" in caplog.text


def test_start_twice_raises():
    channel = ErrorChannel(handler=lambda e: None)
    channel.start()
    try:
        with pytest.raises(RuntimeError):
            channel.start()
    finally:
        channel.close()


def test_close_without_start_is_noop():
    ErrorChannel().close()


def test_dispatch_failures_flow_through_channel(client):
    seen = []
    channel = ErrorChannel(handler=seen.append)
    channel.start()

    def boom(c, m):
        raise RuntimeError("hook failed")

    client.register_hook("privmsg", boom)
    client.start()
    client.handle(":a!b@c PRIVMSG #c :hi", channel)
    client.handle(":a!b@c PRIVMSG #c :again", channel)
    channel.close()

    assert len(seen) == 2
    assert all(isinstance(e, HookError) for e in seen)
