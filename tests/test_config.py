from __future__ import annotations

import json

import pytest

from ircbot.config import BotConfig, ConfigLoader, load_config
from ircbot.errors import ConfigError


def write_config(tmp_path, data):
    path = tmp_path / "ircbot.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.json")
    assert config == BotConfig()
    assert config.port == 6667
    assert config.channels == []
    assert not config.use_tls


def test_full_file(tmp_path):
    path = write_config(
        tmp_path,
        {
            "host": "irc.example.org",
            "port": 6697,
            "channels": ["#a", " #b ", ""],
            "nick": "marv",
            "name": "Marv the bot",
            "cert": "/etc/ssl/ca.pem",
            "modules": {"url": {"exclude": ["localhost"]}},
        },
    )
    config = load_config(path)
    assert config.host == "irc.example.org"
    assert config.port == 6697
    assert config.channels == ["#a", "#b"]
    assert config.nick == "marv"
    assert config.use_tls
    assert config.modules == {"url": {"exclude": ["localhost"]}}


def test_channel_order_preserved(tmp_path):
    config = load_config(write_config(tmp_path, {"channels": ["#z", "#a", "#m"]}))
    assert config.channels == ["#z", "#a", "#m"]


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"nick": "caf\xe9"}')
    with pytest.raises(ConfigError, match="UTF-8"):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"port": 0},
        {"port": 70000},
        {"channels": "#a"},
        {"nick": "two words"},
        {"nick": ""},
    ],
)
def test_invalid_values(tmp_path, data):
    with pytest.raises(ConfigError):
        load_config(write_config(tmp_path, data))


def test_top_level_must_be_object():
    with pytest.raises(ConfigError):
        ConfigLoader.from_dict(["host"])
