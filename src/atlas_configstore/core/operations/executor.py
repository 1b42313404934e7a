# src/atlas_configstore/core/operations/executor.py
"""
Executor de operações sobre uma configuração.

O executor é o único ponto que sequencia a execução de uma operação
contra uma `ConfigFile`, registrando início, fim e falhas no log
estruturado.

Política de falhas:
    - `OSError` (inclui `ConfigIOError`) → registro ERROR + re-raise
    - Demais exceções propagam sem registro adicional
    - Nenhum retry é realizado

Decisões arquiteturais:
    - Registros `starting` / `finished` (INFO) respeitam `meta.logging_enabled`
    - O registro ERROR é sempre emitido e carrega um `ErrorPayload`
"""

from __future__ import annotations

from typing import Optional

from ..config.file import ConfigFile
from ..errors import error_payload
from .log import ERROR, INFO, OperationLog
from .operation import ConfigOperation


class OperationExecutor:
    def __init__(self, config: ConfigFile, *, log: Optional[OperationLog] = None):
        self.config = config
        self.log = log if log is not None else OperationLog()

    def execute(self, operation: ConfigOperation) -> None:
        config = self.config
        verbose = config.meta.logging_enabled

        if verbose:
            self.log.log(config=config.name, operation=operation.name, level=INFO, message="starting")

        try:
            operation.execute(config)
        except OSError as e:
            self.log.log(
                config=config.name,
                operation=operation.name,
                level=ERROR,
                message=str(e) or "Falha de I/O",
                error=error_payload(e, path=str(config.path)).to_dict(),
            )
            raise

        if verbose:
            self.log.log(config=config.name, operation=operation.name, level=INFO, message="finished")

    def execute_all(self, *operations: ConfigOperation) -> "OperationExecutor":
        for operation in operations:
            self.execute(operation)
        return self
