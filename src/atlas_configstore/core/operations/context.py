# src/atlas_configstore/core/operations/context.py
"""
Contexto de execução encadeável.

`ExecutionContext` agrupa uma configuração, seu executor e a implementação
CRUD do formato, permitindo encadear chamadas:

    ExecutionContext.of(registry, "server", YamlSource()) \\
        .execute("create") \\
        .execute(lambda ops: ops.read())

A entidade é resolvida por um `ConfigRegistry` injetado; não existe
provedor global.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..config.file import ConfigFile
from ..registry import ConfigRegistry
from .crud import CRUDOperations
from .executor import OperationExecutor
from .log import OperationLog
from .operation import ConfigOperation

Task = Union[str, Callable[[CRUDOperations], ConfigOperation]]


@dataclass
class ExecutionContext:
    config: ConfigFile
    executor: OperationExecutor
    operations: CRUDOperations

    @classmethod
    def of(
        cls,
        registry: ConfigRegistry,
        key: str,
        operations: CRUDOperations,
        log: Optional[OperationLog] = None,
    ) -> "ExecutionContext":
        config = registry.get(key)
        executor = OperationExecutor(config, log=log if log is not None else operations.log)
        return cls(config=config, executor=executor, operations=operations)

    def execute(self, task: Task) -> "ExecutionContext":
        if isinstance(task, str):
            operation = self.operations.operation(task)
        else:
            operation = task(self.operations)
        self.executor.execute(operation)
        return self
