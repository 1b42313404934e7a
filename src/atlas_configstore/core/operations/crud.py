# src/atlas_configstore/core/operations/crud.py
"""
Ciclo de vida CRUD de uma configuração.

Este módulo define `CRUDOperations`, a base das implementações por formato
(YAML, JSON). Ela modela as quatro operações como unidades de trabalho
adiadas (`Operation`) e concentra o que é comum a todos os formatos:
criação do recurso físico, remoção e o sequenciamento de hooks.

Máquina de estados (por entidade):

    NotPresent --create--> Present --read/update--> Present --delete--> NotPresent

Hooks (no-op por padrão):
    - on_pre_create   → hook (propaga exceções)
    - on_post_create  → notificação (exceções registradas como WARNING, nunca propagadas)
    - on_pre_delete   → hook (propaga exceções)
    - on_post_delete  → hook (propaga exceções)

Decisões arquiteturais:
    - `create` sobre recurso existente é no-op (sem post-create)
    - Recurso embarcado é copiado quando disponível; caso contrário,
      um arquivo vazio é criado (inclusive quando a cópia falha)
    - `delete` sempre limpa a memória, exista ou não o recurso
    - Colaboradores (eventos, recursos, log) são injetados

Limites explícitos:
    - `read` e `update` são definidos por cada formato
    - Não realiza retry
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from ..config.file import ConfigFile
from ..errors import ConfigWriteError, error_payload
from ..events import ConfigEvent, EventSink
from ..resources import ResourceLocator
from .log import INFO, WARNING, OperationLog
from .operation import Operation

CREATE = "CREATE"
READ = "READ"
UPDATE = "UPDATE"
DELETE = "DELETE"


class CRUDOperations(ABC):
    def __init__(
        self,
        *,
        events: Optional[EventSink] = None,
        resources: Optional[ResourceLocator] = None,
        log: Optional[OperationLog] = None,
    ):
        self.events = events
        self.resources = resources
        self.log = log if log is not None else OperationLog()

    # -----------------------------
    # Operações adiadas
    # -----------------------------
    def create(self) -> Operation:
        return Operation(name=CREATE, action=self._create)

    def read(self) -> Operation:
        return Operation(name=READ, action=self.perform_read)

    def update(self) -> Operation:
        return Operation(name=UPDATE, action=self.perform_update)

    def delete(self) -> Operation:
        return Operation(name=DELETE, action=self._delete)

    def operation(self, name: str) -> Operation:
        """Resolve uma operação pelo nome (`"create"`, `"READ"`, ...)."""
        factories: Dict[str, Callable[[], Operation]] = {
            CREATE: self.create,
            READ: self.read,
            UPDATE: self.update,
            DELETE: self.delete,
        }
        factory = factories.get(name.strip().upper())
        if factory is None:
            raise ValueError(f"Operação desconhecida: {name!r}")
        return factory()

    # -----------------------------
    # Específico por formato
    # -----------------------------
    @abstractmethod
    def perform_read(self, config: ConfigFile) -> None:
        ...

    @abstractmethod
    def perform_update(self, config: ConfigFile) -> None:
        ...

    # -----------------------------
    # Hooks
    # -----------------------------
    def on_pre_create(self, config: ConfigFile) -> None:
        pass

    def on_post_create(self, config: ConfigFile) -> None:
        pass

    def on_pre_delete(self, config: ConfigFile) -> None:
        pass

    def on_post_delete(self, config: ConfigFile) -> None:
        pass

    # -----------------------------
    # Implementação comum
    # -----------------------------
    def _create(self, config: ConfigFile) -> None:
        self.on_pre_create(config)

        if config.exists():
            self._info(config, CREATE, "Configuração já existe; nada a criar", path=str(config.path))
            return

        try:
            config.path.parent.mkdir(parents=True, exist_ok=True)
            if not self._copy_default(config):
                config.path.touch()
        except OSError as e:
            raise ConfigWriteError(f"Falha ao criar {config.path}: {e}") from e

        self._notify(self.on_post_create, config, CREATE)

    def _delete(self, config: ConfigFile) -> None:
        self.on_pre_delete(config)

        if config.exists():
            try:
                config.path.unlink()
            except OSError as e:
                raise ConfigWriteError(f"Falha ao remover {config.path}: {e}") from e
            self.on_post_delete(config)

        config.memory.clear()

    def _copy_default(self, config: ConfigFile) -> bool:
        if self.resources is None:
            return False

        relative = config.meta.relative_path
        try:
            stream = self.resources.open_resource(relative)
            if stream is None:
                return False
            with stream:
                content = stream.read()
            config.path.write_bytes(content)
        except OSError as e:
            self._warn(config, CREATE, f"Falha ao copiar recurso padrão '{relative}': {e}")
            return False

        self._info(config, CREATE, "Recurso padrão copiado", resource=relative)
        return True

    def _notify(self, hook: Callable[[ConfigFile], None], config: ConfigFile, operation: str) -> None:
        """Dispara um hook como notificação: falhas são registradas, nunca propagadas."""
        try:
            hook(config)
        except Exception as e:
            self._warn(
                config,
                operation,
                f"Falha em {getattr(hook, '__name__', 'hook')}: {e}",
                error=error_payload(e).to_dict(),
            )

    def _publish(self, event: ConfigEvent) -> None:
        if self.events is not None:
            self.events.publish(event)

    def _info(self, config: ConfigFile, operation: str, message: str, **extra) -> None:
        if config.meta.logging_enabled:
            self.log.log(config=config.name, operation=operation, level=INFO, message=message, **extra)

    def _warn(self, config: ConfigFile, operation: str, message: str, **extra) -> None:
        self.log.log(config=config.name, operation=operation, level=WARNING, message=message, **extra)
        self.log.add_warning(config=config.name, message=message)
