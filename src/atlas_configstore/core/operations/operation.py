# src/atlas_configstore/core/operations/operation.py
"""
Contrato de operação sobre uma configuração.

Uma operação é uma unidade de trabalho nomeada e *adiada*: ela não está
ligada a nenhuma `ConfigFile` até ser executada, o que permite reutilizar
a mesma instância contra entidades diferentes.

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable)
    - Funções simples são adaptadas via `Operation`

Limites explícitos:
    - Não registra eventos de log (ver `OperationExecutor`)
    - Não trata exceções
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from ..config.file import ConfigFile

ANONYMOUS_NAME = "AnonymousProcess"


@runtime_checkable
class ConfigOperation(Protocol):
    name: str

    def execute(self, config: ConfigFile) -> None:
        ...


@dataclass(frozen=True)
class Operation:
    """Adapta um callable `(ConfigFile) -> None` ao contrato `ConfigOperation`."""

    name: str
    action: Callable[[ConfigFile], None]

    @classmethod
    def of(cls, action: Callable[[ConfigFile], None], name: Optional[str] = None) -> "Operation":
        if name is None:
            name = getattr(action, "__name__", "") or ANONYMOUS_NAME
            if name == "<lambda>":
                name = ANONYMOUS_NAME
        return cls(name=name, action=action)

    def execute(self, config: ConfigFile) -> None:
        self.action(config)
