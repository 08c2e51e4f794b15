from __future__ import annotations

import pytest

from ircbot.errors import ConfigError, DuplicateModuleError, ModuleLoadError
from ircbot.modules import Module, ModuleSet
from tests.fixtures.modules import Greeter, GreeterConfig


def test_modules_load_in_registration_order(client):
    log = []
    modules = ModuleSet(client)
    for name in ("one", "two", "three"):
        modules.register(Greeter(name, log=log))
    modules.load_all()
    assert log == ["one", "two", "three"]
    assert [m.name() for m in modules.modules] == ["one", "two", "three"]
    assert len(client.hooks_for("join")) == 3


def test_failure_aborts_remaining_modules(client):
    log = []
    modules = ModuleSet(client)
    modules.register(Greeter("a", fail=True, log=log))
    modules.register(Greeter("b", log=log))

    with pytest.raises(ModuleLoadError) as excinfo:
        modules.load_all()

    assert log == ["a"]
    assert excinfo.value.module == "a"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "a cannot load" in str(excinfo.value)


def test_modules_loaded_before_failure_keep_hooks(client):
    modules = ModuleSet(client)
    modules.register(Greeter("ok"))
    modules.register(Greeter("bad", fail=True))
    with pytest.raises(ModuleLoadError):
        modules.load_all()
    assert len(client.hooks_for("join")) == 1


def test_defaults_kept_without_fragment(client):
    module = Greeter()
    modules = ModuleSet(client, {"someone-else": {"greeting": "ignored"}})
    modules.register(module)
    modules.load_all()
    assert module.config == GreeterConfig()
    assert module.loaded_with.greeting == "hello"


def test_fragment_overrides_present_keys_only(client):
    module = Greeter()
    modules = ModuleSet(client, {"greeter": {"greeting": "hi"}})
    modules.register(module)
    modules.load_all()
    assert module.config.greeting == "hi"
    assert module.config.count == 1
    assert module.config.targets == ["#default"]
    # configuration is in place before load runs
    assert module.loaded_with.greeting == "hi"


def test_defaults_reset_stale_state(client):
    module = Greeter()
    module.config.count = 99
    modules = ModuleSet(client)
    modules.register(module)
    modules.load_all()
    assert module.config.count == 1


def test_unknown_fragment_keys_are_ignored(client):
    module = Greeter()
    modules = ModuleSet(client, {"greeter": {"colour": "blue", "count": 3}})
    modules.register(module)
    modules.load_all()
    assert module.config.count == 3


@pytest.mark.parametrize("fragment", [["not", "a", "mapping"], {"count": "many"}])
def test_bad_fragment_fails_load(client, fragment):
    module = Greeter()
    modules = ModuleSet(client, {"greeter": fragment})
    modules.register(module)
    with pytest.raises(ModuleLoadError) as excinfo:
        modules.load_all()
    assert isinstance(excinfo.value.__cause__, ConfigError)
    assert module.log == []


def test_duplicate_names_rejected(client):
    modules = ModuleSet(client)
    modules.register(Greeter("same"))
    with pytest.raises(DuplicateModuleError):
        modules.register(Greeter("same"))
    assert len(modules.modules) == 1


def test_load_all_runs_once(client):
    log = []
    modules = ModuleSet(client)
    modules.register(Greeter(log=log))
    modules.load_all()
    modules.load_all()
    assert log == ["greeter"]


def test_get_by_name(client):
    modules = ModuleSet(client)
    greeter = Greeter()
    modules.register(greeter)
    assert modules.get("greeter") is greeter
    assert modules.get("missing") is None


def test_module_contract_is_abstract():
    with pytest.raises(TypeError):
        Module()  # type: ignore[abstract]
