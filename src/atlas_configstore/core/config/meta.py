# src/atlas_configstore/core/config/meta.py
"""
Metadados de identidade de uma configuração.

Decisões arquiteturais:
    - Metadados são imutáveis (frozen dataclass)
    - `name` e `relative_path` são obrigatórios e não vazios
    - `logging_enabled` controla apenas eventos INFO das operações
    - `version` é uma string livre (sem migrações)
"""

from __future__ import annotations

from dataclasses import dataclass

from atlas_configstore.core.errors import ConfigValidationError

DEFAULT_VERSION = "1.0.0"


@dataclass(frozen=True)
class ConfigMeta:
    """Identidade (nome, caminho relativo, flag de logging, versão)."""

    name: str
    relative_path: str
    logging_enabled: bool = True
    version: str = DEFAULT_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigValidationError("ConfigMeta.name deve ser uma string não vazia")
        if not isinstance(self.relative_path, str) or not self.relative_path.strip():
            raise ConfigValidationError("ConfigMeta.relative_path deve ser uma string não vazia")
