# src/atlas_configstore/core/__init__.py
"""
Core do Atlas ConfigStore.

Componentes (das folhas para o topo):
    - replacement → templating por placeholders
    - memory      → DataMemory genérica com getters tipados
    - structure   → flatten / unflatten entre mapas aninhados e chaves planas
    - mapper      → codecs por tipo e mapeamento entidade ↔ memória
    - config      → entidade de configuração imutável
    - operations  → ciclo de vida CRUD e executor
    - registry    → diretório concorrente de configurações

Princípios fundamentais:
    - Nenhuma decisão silenciosa: conflitos e ausências são explícitos
    - Dependências são injetadas, nunca resolvidas globalmente
"""

from .config import ConfigFile, ConfigFileBuilder, ConfigMeta
from .mapper import EntityDataMemory, EntityMapper
from .memory import DataMemory
from .operations import ExecutionContext, OperationExecutor, OperationLog
from .registry import ConfigRegistry
from .replacement import PlaceholderProcessor, Replacement

__all__ = [
    "ConfigFile",
    "ConfigFileBuilder",
    "ConfigMeta",
    "ConfigRegistry",
    "DataMemory",
    "EntityDataMemory",
    "EntityMapper",
    "ExecutionContext",
    "OperationExecutor",
    "OperationLog",
    "PlaceholderProcessor",
    "Replacement",
]
