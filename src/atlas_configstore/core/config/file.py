# src/atlas_configstore/core/config/file.py
"""
Entidade de configuração (ConfigFile).

Um `ConfigFile` vincula três componentes:
    - metadados de identidade (`ConfigMeta`)
    - localização física (`Path`)
    - memória de dados (`DataMemory`)

Decisões arquiteturais:
    - A entidade é imutável após construção (frozen dataclass)
    - A construção é validada pelo `ConfigFileBuilder` (fail fast)
    - A mesma entidade pode ser alvo de qualquer operação CRUD

Invariantes:
    - Os três componentes estão sempre presentes
    - A referência à memória nunca muda (o conteúdo da memória sim)

Limites explícitos:
    - Não realiza I/O por conta própria
    - Não é removida do registry quando o arquivo é deletado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from atlas_configstore.core.errors import MissingComponentError
from atlas_configstore.core.memory.store import DataMemory

from .meta import ConfigMeta
from .paths import PathProvider


@dataclass(frozen=True)
class ConfigFile:
    """Tripla imutável (meta, path, memory)."""

    meta: ConfigMeta
    path: Path
    memory: DataMemory[Any] = field(repr=False)

    @property
    def name(self) -> str:
        return self.meta.name

    def exists(self) -> bool:
        return self.path.exists()


class ConfigFileBuilder:
    """
    Builder que valida a presença de metadata, memória e localização.

    Exemplo:
        config = (
            ConfigFileBuilder()
            .meta(ConfigMeta(name="network", relative_path="settings.yml"))
            .at(paths.custom("/srv/app"))
            .memory(DataMemory(key_type=str))
            .build()
        )
    """

    def __init__(self) -> None:
        self._meta: Optional[ConfigMeta] = None
        self._memory: Optional[DataMemory[Any]] = None
        self._provider: Optional[PathProvider] = None

    def meta(self, meta: ConfigMeta) -> "ConfigFileBuilder":
        self._meta = meta
        return self

    def at(self, provider: PathProvider) -> "ConfigFileBuilder":
        self._provider = provider
        return self

    def memory(self, memory: DataMemory[Any]) -> "ConfigFileBuilder":
        self._memory = memory
        return self

    def build(self) -> ConfigFile:
        missing: List[str] = []
        if self._meta is None:
            missing.append("meta")
        if self._memory is None:
            missing.append("memory")
        if self._provider is None:
            missing.append("location")
        if missing:
            raise MissingComponentError(tuple(missing))

        path = self._provider.resolve(self._meta.relative_path)
        return ConfigFile(meta=self._meta, path=Path(path), memory=self._memory)
