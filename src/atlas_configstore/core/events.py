# src/atlas_configstore/core/events.py
"""
Eventos de ciclo de vida de configurações.

Este módulo define apenas a *fronteira* com o mecanismo externo de
publicação/assinatura: os payloads de evento e o contrato `publish`.

Eventos publicados:
    - ConfigCreateEvent → após `create` materializar o recurso
    - ConfigDeleteEvent → após `delete` remover o recurso
    - ConfigLoadEvent   → após `read` carregar a memória
    - ConfigSaveEvent   → após `update` persistir a memória

Princípios fundamentais:
    - Todo evento carrega a referência à entidade afetada
    - Publicação é notificação (best-effort), nunca garantia de integridade

Limites explícitos:
    - Não implementa o lado de assinatura (listeners / dispatch)
    - Não garante entrega nem ordem entre sinks distintos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Type, TypeVar, runtime_checkable

from .config.file import ConfigFile


@dataclass(frozen=True)
class ConfigEvent:
    config: ConfigFile

    @property
    def name(self) -> str:
        return self.config.name


@dataclass(frozen=True)
class ConfigCreateEvent(ConfigEvent):
    pass


@dataclass(frozen=True)
class ConfigDeleteEvent(ConfigEvent):
    pass


@dataclass(frozen=True)
class ConfigLoadEvent(ConfigEvent):
    pass


@dataclass(frozen=True)
class ConfigSaveEvent(ConfigEvent):
    pass


E = TypeVar("E", bound=ConfigEvent)


@runtime_checkable
class EventSink(Protocol):
    def publish(self, event: ConfigEvent) -> None:
        ...


@dataclass
class EventLog:
    """Sink em memória que apenas registra os eventos publicados."""

    events: List[ConfigEvent] = field(default_factory=list)

    def publish(self, event: ConfigEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: Type[E]) -> List[E]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
