from __future__ import annotations

import time

from ircbot.irc.join import RPL_WELCOME, install_welcome_join, welcome_join_hook

WELCOME = ":irc.example.org 001 bot :Welcome"


def test_join_after_delay_lists_channels_in_order(client, connection, sink):
    slept = []

    def fake_sleep(seconds):
        # nothing written before the delay elapses
        assert connection.sent == []
        slept.append(seconds)

    client.register_hook(RPL_WELCOME, welcome_join_hook(["#a", "#b"], 3.0, fake_sleep))
    client.start()
    client.handle(WELCOME, sink)

    assert slept == [3.0]
    assert connection.lines == ["JOIN #a,#b"]
    assert sink.items == []


def test_no_channels_writes_nothing(client, connection, sink):
    client.register_hook(RPL_WELCOME, welcome_join_hook([], 0, lambda s: None))
    client.start()
    client.handle(WELCOME, sink)
    assert connection.sent == []


def test_delay_blocks_following_hooks(client, connection, sink):
    order = []
    client.register_hook(RPL_WELCOME, welcome_join_hook(["#a"], 0.05))
    client.register_hook(RPL_WELCOME, lambda c, m: order.append(list(connection.lines)))
    client.start()

    started = time.monotonic()
    client.handle(WELCOME, sink)
    assert time.monotonic() - started >= 0.05
    # the sibling hook only ran once the JOIN had been written
    assert order == [["JOIN #a"]]


def test_install_welcome_join_registers_on_numeric(client):
    install_welcome_join(client, ["#a"], 0)
    assert len(client.hooks_for("001")) == 1
    assert client.hooks_for("privmsg") == ()
