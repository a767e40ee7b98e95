import pytest

from minilibc.runtime import ExitRegistry


def test_handlers_run_in_reverse_order():
    registry = ExitRegistry()
    calls = []
    for name in ("a", "b", "c"):
        registry.register(lambda name=name: calls.append(name))
    registry.run()
    assert calls == ["c", "b", "a"]


def test_handlers_run_once():
    registry = ExitRegistry()
    calls = []
    registry.register(lambda: calls.append(1))
    registry.run()
    registry.run()
    assert calls == [1]


def test_exit_raises_with_status_after_handlers():
    registry = ExitRegistry()
    calls = []
    registry.register(lambda: calls.append("done"))
    with pytest.raises(SystemExit) as info:
        registry.exit(3)
    assert info.value.code == 3
    assert calls == ["done"]


def test_handler_registered_during_run_also_runs():
    registry = ExitRegistry()
    calls = []
    registry.register(
        lambda: (
            calls.append("outer"),
            registry.register(lambda: calls.append("inner")),
        )
    )
    registry.run()
    assert calls == ["outer", "inner"]


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        ExitRegistry().register(42)


def test_exit_flushes_output(capsys):
    registry = ExitRegistry()
    registry.register(lambda: print("bye", end=""))
    with pytest.raises(SystemExit):
        registry.exit(0)
    assert capsys.readouterr().out == "bye"