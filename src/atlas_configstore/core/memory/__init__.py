# src/atlas_configstore/core/memory/__init__.py
"""
Camada de memória do Atlas ConfigStore.

Componentes:
    - store  → `DataMemory`, store genérico chave-valor com getters tipados
    - values → união de valores suportada e funções de coerção
    - entry  → `MemoryEntry` / `MemoryDataType`, descritores tipados de chaves

Invariantes:
    - `get` nunca muta estado
    - `set` sobrescreve silenciosamente (sem merge)

Limites explícitos:
    - Não realiza I/O
    - Não é thread-safe
"""

from .entry import MemoryDataType, MemoryEntry
from .store import DataMemory

__all__ = ["DataMemory", "MemoryDataType", "MemoryEntry"]
