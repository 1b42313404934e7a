# tests/core/operations/test_executor.py
"""
Testes do OperationExecutor e do ExecutionContext.

Os testes asseguram que:
- registros `starting` / `finished` respeitam `meta.logging_enabled`
- falhas de I/O geram um registro ERROR (sempre) e são re-lançadas
- outras exceções propagam sem registro de erro
- o executor nunca realiza retry
- o contexto resolve a entidade por um registry injetado

Decisões arquiteturais:
    - O registro ERROR não é filtrado pela flag de logging
"""

import pytest

from atlas_configstore.core.errors import ConfigNotFoundError, ConfigReadError
from atlas_configstore.core.operations import (
    CRUDOperations,
    ExecutionContext,
    Operation,
    OperationExecutor,
    OperationLog,
)
from atlas_configstore.core.registry import ConfigRegistry


class CountingOperations(CRUDOperations):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.trace = []

    def perform_read(self, config):
        self.trace.append(("read", config.name))

    def perform_update(self, config):
        self.trace.append(("update", config.name))


def _messages(log):
    return [(e["operation"], e["level"], e["message"]) for e in log.events]


def test_starting_and_finished_records(make_config, op_log):
    config = make_config(name="server")
    executor = OperationExecutor(config, log=op_log)

    executor.execute(Operation("RELOAD", lambda c: None))

    assert _messages(op_log) == [("RELOAD", "INFO", "starting"), ("RELOAD", "INFO", "finished")]
    assert all(e["config"] == "server" for e in op_log.events)
    assert all(e["timestamp"].endswith("+00:00") for e in op_log.events)


def test_logging_flag_disables_info_records(make_config, op_log):
    config = make_config(logging_enabled=False)
    OperationExecutor(config, log=op_log).execute(Operation("RELOAD", lambda c: None))
    assert op_log.events == []


@pytest.mark.parametrize("logging_enabled", [True, False])
def test_io_failure_is_logged_and_reraised(make_config, op_log, logging_enabled):
    config = make_config(logging_enabled=logging_enabled)
    calls = []

    def broken(c):
        calls.append(c)
        raise ConfigReadError("disco indisponível")

    with pytest.raises(ConfigReadError):
        OperationExecutor(config, log=op_log).execute(Operation.of(broken))

    assert len(calls) == 1
    [error] = op_log.records(level="ERROR")
    assert error["operation"] == "broken"
    assert error["message"] == "disco indisponível"
    assert error["error"]["type"] == "ConfigReadError"
    assert error["error"]["details"]["path"] == str(config.path)
    assert op_log.records(level="INFO", config=config.name) == (
        [op_log.events[0]] if logging_enabled else []
    )


def test_plain_os_error_is_also_reported(make_config, op_log):
    config = make_config()

    def broken(c):
        raise PermissionError("negado")

    with pytest.raises(PermissionError):
        OperationExecutor(config, log=op_log).execute(Operation.of(broken))

    assert len(op_log.records(level="ERROR")) == 1


def test_non_io_failure_propagates_without_error_record(make_config, op_log):
    config = make_config()

    def broken(c):
        raise ValueError("bug")

    with pytest.raises(ValueError):
        OperationExecutor(config, log=op_log).execute(Operation.of(broken))

    assert op_log.records(level="ERROR") == []


def test_execute_all_runs_in_order_and_stops_on_failure(make_config):
    config = make_config()
    trace = []

    def fail(c):
        raise OSError("x")

    executor = OperationExecutor(config)
    with pytest.raises(OSError):
        executor.execute_all(
            Operation("A", lambda c: trace.append("A")),
            Operation("B", fail),
            Operation("C", lambda c: trace.append("C")),
        )
    assert trace == ["A"]


def test_execution_context_resolves_through_registry(make_config):
    registry = ConfigRegistry()
    config = make_config("server.yml", name="server")
    registry.register("server", config)
    ops = CountingOperations()

    ctx = ExecutionContext.of(registry, "server", ops)
    returned = ctx.execute("create").execute(lambda o: o.read()).execute("update")

    assert returned is ctx
    assert config.exists()
    assert ops.trace == [("read", "server"), ("update", "server")]
    assert ctx.executor.log is ops.log
    assert [e["operation"] for e in ops.log.records(level="INFO") if e["message"] == "starting"] == [
        "CREATE",
        "READ",
        "UPDATE",
    ]


def test_execution_context_with_explicit_log(make_config):
    registry = ConfigRegistry()
    registry.register("server", make_config())
    log = OperationLog()

    ctx = ExecutionContext.of(registry, "server", CountingOperations(), log=log)
    ctx.execute("read")

    assert len(log.events) == 2


def test_execution_context_unknown_key():
    with pytest.raises(ConfigNotFoundError):
        ExecutionContext.of(ConfigRegistry(), "missing", CountingOperations())
