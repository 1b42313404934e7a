# src/atlas_configstore/__init__.py
"""
Atlas ConfigStore — modelo de dados de configuração em processo.

Este pacote raiz define o namespace público do Atlas ConfigStore:
uma memória chave-valor tipada, a transformação entre estruturas
aninhadas e chaves planas (dot-path), templating por placeholders,
mapeamento de entidades via codecs e o ciclo de vida CRUD que
sincroniza a memória com arquivos YAML/JSON.

Arquitetura em alto nível:
    - core.memory      → DataMemory, getters tipados e MemoryEntry
    - core.structure   → flatten / unflatten
    - core.replacement → substituição de placeholders
    - core.mapper      → CodecRegistry e EntityMapper
    - core.config      → ConfigMeta, ConfigFile, paths e documentos
    - core.registry    → ConfigRegistry
    - core.operations  → CRUD, executor e contexto de execução
    - formats          → YamlSource, JsonSource

Limites explícitos:
    - Não mantém estado global (registry e sinks são injetados)
    - Não implementa assinatura de eventos
"""

from .core import (
    ConfigFile,
    ConfigFileBuilder,
    ConfigMeta,
    ConfigRegistry,
    DataMemory,
    EntityDataMemory,
    EntityMapper,
    ExecutionContext,
    OperationExecutor,
    OperationLog,
    PlaceholderProcessor,
    Replacement,
)
from .formats import AutoReadYamlSource, JsonSource, YamlSource

__all__ = [
    "AutoReadYamlSource",
    "ConfigFile",
    "ConfigFileBuilder",
    "ConfigMeta",
    "ConfigRegistry",
    "DataMemory",
    "EntityDataMemory",
    "EntityMapper",
    "ExecutionContext",
    "JsonSource",
    "OperationExecutor",
    "OperationLog",
    "PlaceholderProcessor",
    "Replacement",
    "YamlSource",
]
