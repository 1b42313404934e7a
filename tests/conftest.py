# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas ConfigStore.

Este módulo define fixtures reutilizáveis que fornecem:
- memórias vazias com chaves `str`
- uma fábrica de `ConfigFile` ancorada em `tmp_path`
- sinks de eventos e logs de operação isolados por teste

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Todo I/O acontece sob `tmp_path`
    - Nenhum estado é compartilhado entre testes

Limites explícitos:
    - Não substituir testes de integração dos formatos
    - Não conter lógica de domínio
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from atlas_configstore.core.config import ConfigFile, ConfigFileBuilder, ConfigMeta
from atlas_configstore.core.config import paths
from atlas_configstore.core.events import EventLog
from atlas_configstore.core.memory import DataMemory
from atlas_configstore.core.operations import OperationLog


@pytest.fixture
def memory() -> DataMemory[str]:
    return DataMemory(key_type=str)


@pytest.fixture
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture
def op_log() -> OperationLog:
    return OperationLog()


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ConfigFile]:
    """
    Fábrica de `ConfigFile` sob `tmp_path`.

    Uso:
        config = make_config("server.yml")
        config = make_config("data/app.json", name="app", logging_enabled=False)
    """

    def _make(relative_path: str = "config.yml", *, name: str = "test", logging_enabled: bool = True) -> ConfigFile:
        return (
            ConfigFileBuilder()
            .meta(ConfigMeta(name=name, relative_path=relative_path, logging_enabled=logging_enabled))
            .at(paths.custom(tmp_path))
            .memory(DataMemory(key_type=str))
            .build()
        )

    return _make
